"""Command line interface for rendering class models as UML diagrams."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .classifier import ASSOCIATION_SOURCES, DeclaredAssociations, InferredAssociations
from .errors import UmlDocError
from .loader import ModelLoader
from .markdown import splice_diagrams
from .model import Model
from .registry import DEFAULT_NOTATION, GENERATORS, get_generator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CliOptions:
    input_path: Path
    output_path: Optional[Path]
    notation: str
    association_source: str = DeclaredAssociations.name
    strict: bool = False
    markdown_path: Optional[Path] = None
    debug: bool = False


def parse_args(argv: Optional[Sequence[str]] = None) -> CliOptions:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--input",
        required=True,
        help="Path to the class model YAML file.",
    )
    parser.add_argument(
        "--output",
        default="-",
        help="Output path. Use '-' (default) for stdout.",
    )
    parser.add_argument(
        "--notation",
        choices=sorted(GENERATORS),
        default=DEFAULT_NOTATION,
        help="Diagram notation (default: %(default)s).",
    )
    parser.add_argument(
        "--infer-associations",
        action="store_true",
        help="Derive associations from field types instead of the declared list.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when an association references an entity that is not in the model.",
    )
    parser.add_argument(
        "--markdown",
        help="Markdown document whose umldoc markers receive the rendered diagrams.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    input_path = Path(args.input)
    if not input_path.exists():
        raise UmlDocError(f"Input file not found: {input_path}")

    markdown_path = Path(args.markdown) if args.markdown else None
    if markdown_path is not None and not markdown_path.exists():
        raise UmlDocError(f"Markdown file not found: {markdown_path}")

    return CliOptions(
        input_path=input_path,
        output_path=None if args.output == "-" else Path(args.output),
        notation=args.notation,
        association_source=(
            InferredAssociations.name if args.infer_associations else DeclaredAssociations.name
        ),
        strict=args.strict,
        markdown_path=markdown_path,
        debug=args.debug,
    )


def render_model(model: Model, notation: str, options: CliOptions) -> str:
    source = ASSOCIATION_SOURCES[options.association_source]()
    entities, associations = source.collect(model.entities, model.associations)
    logger.debug(
        "Rendering %s with %s associations (%d edges)",
        notation,
        source.name,
        len(associations),
    )
    generator = get_generator(notation, strict=options.strict)
    return generator.render(entities, associations)


def run(options: CliOptions) -> str:
    model = ModelLoader(options.input_path).load()
    if options.markdown_path is None:
        return render_model(model, options.notation, options)
    document = options.markdown_path.read_text(encoding="utf-8")
    return splice_diagrams(
        document,
        lambda notation: render_model(model, notation, options),
        default_notation=options.notation,
    )


def write_output(rendered: str, output_path: Optional[Path]) -> None:
    if output_path is None:
        sys.stdout.write(rendered)
        if not rendered.endswith("\n"):
            sys.stdout.write("\n")
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(rendered, encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        options = parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if options.debug else logging.WARNING)
        rendered = run(options)
        write_output(rendered, options.output_path)
        return 0
    except UmlDocError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
