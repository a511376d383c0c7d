"""Tests for the ``dumpling`` command line."""

from __future__ import annotations

import json
import logging
import typing as typ

import pytest
from bs4 import BeautifulSoup

from dumpling import cli

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_root_logging() -> typ.Iterator[None]:
    """Undo the handler the CLI installs on the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    folder = tmp_path / "content"
    folder.mkdir()
    (folder / "part.md").write_text(
        '+++\ntarget = "Part.Size"\n+++\nSee [Part.Material] too.\n', encoding="utf-8"
    )
    return folder


def test_miniwiki_writes_single_page(
    sample_dump_path: Path,
    content_dir: Path,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    output = tmp_path / "dist" / "miniwiki.html"
    cli.miniwiki(dump=sample_dump_path, output=output, content=content_dir)

    assert capsys.readouterr().out.strip() == f"wrote {output}"
    soup = BeautifulSoup(output.read_text(encoding="utf-8"), "html.parser")
    size = soup.find(id="Part.Size")
    assert size.find("div", class_="dump-description").find("a")["href"] == (
        "#Part.Material"
    )


def test_site_writes_class_pages(
    sample_dump_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output = tmp_path / "site"
    cli.site(dump=sample_dump_path, output=output)

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert lines[1] == f"wrote {output / 'class' / 'Part.html'}"
    assert (output / "class" / "Hopper.html").exists()


def test_site_honours_config(
    sample_dump_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = tmp_path / "dumpling.yaml"
    config.write_text("class_dir: reference\n", encoding="utf-8")
    cli.site(dump=sample_dump_path, output=tmp_path / "site", config=config)

    assert (tmp_path / "site" / "reference" / "Part.html").exists()
    assert "reference" in capsys.readouterr().out


def test_megadump_writes_merged_json(
    sample_dump_path: Path, content_dir: Path, tmp_path: Path
) -> None:
    output = tmp_path / "megadump.json"
    cli.megadump(dump=sample_dump_path, output=output, content=content_dir)

    merged = json.loads(output.read_text(encoding="utf-8"))
    part = next(c for c in merged["Classes"] if c["Name"] == "Part")
    size = next(m for m in part["Members"] if m["Name"] == "Size")
    break_joints = next(m for m in part["Members"] if m["Name"] == "breakJoints")
    assert size["Description"] == "See [Part.Material] too."
    assert size["DescriptionSource"] == "Community"
    assert break_joints["DescriptionSource"] == "Heuristic"


def test_verbose_enables_info_logging(sample_dump_path: Path, tmp_path: Path) -> None:
    cli.megadump(dump=sample_dump_path, output=tmp_path / "out.json", verbose=True)
    assert logging.getLogger().level == logging.INFO


def test_app_reads_options_from_environment(
    sample_dump_path: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    output = tmp_path / "env.html"
    monkeypatch.setenv("DUMPLING_DUMP", str(sample_dump_path))
    monkeypatch.setenv("DUMPLING_OUTPUT", str(output))

    cli.app(["miniwiki"])

    assert output.exists()
    assert "wrote" in capsys.readouterr().out


def test_missing_dump_fails(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        cli.miniwiki(dump=tmp_path / "absent.json", output=tmp_path / "out.html")
