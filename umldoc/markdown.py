"""Splice rendered diagrams into markdown documents at umldoc markers."""
from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Tuple, Type

from .registry import DEFAULT_NOTATION, generator_class
from .render_base import DiagramGenerator

logger = logging.getLogger(__name__)

MARKER = re.compile(r"^\s*<!--\s*umldoc(?::(?P<notation>[\w-]+))?\s*-->\s*$")
FENCE = "```"


def find_markers(
    document: str, default_notation: str = DEFAULT_NOTATION
) -> List[Tuple[int, str]]:
    """Return ``(line index, notation)`` for each marker, in document order.

    Marker lines inside fenced code blocks are ignored.
    """
    markers: List[Tuple[int, str]] = []
    in_fence = False
    for index, line in enumerate(document.splitlines()):
        if line.lstrip().startswith(FENCE):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        match = MARKER.match(line)
        if match:
            markers.append((index, match.group("notation") or default_notation))
    return markers


def splice_diagrams(
    document: str,
    render: Callable[[str], str],
    default_notation: str = DEFAULT_NOTATION,
) -> str:
    """Insert ``render(notation)`` after every marker of ``document``.

    Bare markers use ``default_notation``. Every marker notation is checked
    before anything is rendered. A fenced block directly following a marker
    is taken to be the output of a previous run and is replaced. Everything
    else is copied unchanged.
    """
    generators: Dict[int, Type[DiagramGenerator]] = {
        index: generator_class(notation)
        for index, notation in find_markers(document, default_notation)
    }
    lines = document.splitlines(keepends=True)
    out: List[str] = []
    index = 0
    while index < len(lines):
        line = lines[index]
        generator_cls = generators.get(index)
        index += 1
        if generator_cls is None:
            out.append(line)
            continue
        logger.debug("Rendering %s diagram at line %d", generator_cls.notation, index)
        out.append(line if line.endswith("\n") else line + "\n")
        if index < len(lines) and lines[index].lstrip().startswith(FENCE):
            index = _skip_fenced_block(lines, index)
        out.append(f"{FENCE}{generator_cls.fence}\n")
        out.append(render(generator_cls.notation))
        out.append(f"{FENCE}\n")
    return "".join(out)


def _skip_fenced_block(lines: List[str], start: int) -> int:
    for index in range(start + 1, len(lines)):
        if lines[index].strip() == FENCE:
            return index + 1
    logger.warning("Unterminated code block after umldoc marker at line %d", start)
    return len(lines)
