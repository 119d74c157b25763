from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest

from umldoc.cli import CliOptions, main, parse_args, run
from umldoc.errors import UmlDocError, UnresolvedAssociationReference


def make_options(
    input_path: Path,
    *,
    notation: str = "mermaid",
    association_source: str = "declared",
    strict: bool = False,
    markdown_path: Optional[Path] = None,
) -> CliOptions:
    return CliOptions(
        input_path=input_path,
        output_path=None,
        notation=notation,
        association_source=association_source,
        strict=strict,
        markdown_path=markdown_path,
    )


def test_declared_associations(fixtures_dir: Path) -> None:
    diagram = run(make_options(fixtures_dir / "shop.yaml"))
    assert diagram.startswith("classDiagram\n    direction TB\n")
    assert "      -orders*\n" in diagram
    assert "      +COUNT$\n" in diagram
    assert "      <<enumeration>>\n" in diagram
    assert diagram.endswith("    Customer ONE --> MANY Order orders\n")


def test_inferred_associations(fixtures_dir: Path) -> None:
    diagram = run(make_options(fixtures_dir / "shop.yaml", association_source="inferred"))
    assert "-orders" not in diagram
    assert "      -name\n" in diagram
    assert diagram.endswith("    Customer ONE --> MANY Order orders\n")


def test_plantuml_output(fixtures_dir: Path) -> None:
    diagram = run(make_options(fixtures_dir / "shop.yaml", notation="plantuml"))
    assert diagram.startswith("@startuml\n")
    assert 'Customer "1" --> "*" Order : orders\n' in diagram


def test_dangling_reference_is_permissive_by_default(fixtures_dir: Path) -> None:
    diagram = run(make_options(fixtures_dir / "dangling.yaml"))
    assert "    Order MANY --> ONE Invoice\n" in diagram


def test_dangling_reference_fails_in_strict_mode(fixtures_dir: Path) -> None:
    with pytest.raises(UnresolvedAssociationReference):
        run(make_options(fixtures_dir / "dangling.yaml", strict=True))


def test_markdown_splicing(fixtures_dir: Path) -> None:
    result = run(
        make_options(fixtures_dir / "shop.yaml", markdown_path=fixtures_dir / "document.md")
    )
    assert "```mermaid\nclassDiagram\n" in result
    assert "```plantuml\n@startuml\n" in result
    assert "stale diagram" not in result


def test_parse_args(fixtures_dir: Path) -> None:
    options = parse_args(
        [
            "--input",
            str(fixtures_dir / "shop.yaml"),
            "--notation",
            "plantuml",
            "--infer-associations",
            "--strict",
        ]
    )
    assert options.notation == "plantuml"
    assert options.association_source == "inferred"
    assert options.strict is True
    assert options.output_path is None


def test_parse_args_missing_input(tmp_path: Path) -> None:
    with pytest.raises(UmlDocError, match="Input file not found"):
        parse_args(["--input", str(tmp_path / "missing.yaml")])


def test_main_writes_output_file(fixtures_dir: Path, tmp_path: Path) -> None:
    output = tmp_path / "out" / "shop.mmd"
    status = main(["--input", str(fixtures_dir / "shop.yaml"), "--output", str(output)])
    assert status == 0
    assert output.read_text(encoding="utf-8").startswith("classDiagram\n")


def test_main_writes_to_stdout(fixtures_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["--input", str(fixtures_dir / "shop.yaml")])
    assert status == 0
    assert "class Order {" in capsys.readouterr().out


def test_main_reports_errors(fixtures_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["--input", str(fixtures_dir / "double_label.yaml")])
    assert status == 1
    assert "Error: Only one side" in capsys.readouterr().err


def test_output_is_deterministic(fixtures_dir: Path) -> None:
    options = make_options(fixtures_dir / "shop.yaml")
    assert run(options) == run(options)


def test_markdown_bare_marker_follows_notation_option(fixtures_dir: Path, tmp_path: Path) -> None:
    document = tmp_path / "doc.md"
    document.write_text("<!-- umldoc -->\n", encoding="utf-8")
    result = run(
        make_options(fixtures_dir / "shop.yaml", notation="plantuml", markdown_path=document)
    )
    assert result.startswith("<!-- umldoc -->\n```plantuml\n@startuml\n")
    assert "classDiagram" not in result
