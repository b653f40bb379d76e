from __future__ import annotations

from pathlib import Path

from click.testing import Result
from typer.testing import CliRunner

from threadpress.cli import app


def _invoke(*args: str) -> Result:
    runner = CliRunner()
    return runner.invoke(app, ["run", "--no-progress", "--no-prompt", *args])


def test_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.html"
    result = _invoke("--in", str(missing), "--out-dir", str(tmp_path))
    assert result.exit_code == 3
    assert f"Source file not found: {missing}" in result.stderr
    assert list(tmp_path.iterdir()) == []


def test_unsupported_extension(tmp_path: Path) -> None:
    in_path = tmp_path / "foo.bin"
    in_path.write_text("data", encoding="utf-8")
    result = _invoke("--in", str(in_path), "--out-dir", str(tmp_path))
    assert result.exit_code == 3


def test_no_comments(tmp_path: Path) -> None:
    in_path = tmp_path / "page.html"
    in_path.write_text("<p>just a page</p>", encoding="utf-8")
    out_dir = tmp_path / "out"
    result = _invoke("--in", str(in_path), "--out-dir", str(out_dir), "--format", "txt")
    assert result.exit_code == 5
    assert "No comments found" in result.stderr
    assert not out_dir.exists()


def test_bad_config(thread_html: Path, tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    result = _invoke("--in", str(thread_html), "--config", str(bad_cfg))
    assert result.exit_code == 4


def test_invalid_font_size(thread_html: Path, tmp_path: Path) -> None:
    result = _invoke(
        "--in", str(thread_html), "--out-dir", str(tmp_path), "--format", "pdf", "--font-size", "10"
    )
    assert result.exit_code == 4
    assert not list(tmp_path.glob("*.pdf"))


def test_too_many_columns(thread_html: Path, tmp_path: Path) -> None:
    result = _invoke("--in", str(thread_html), "--out-dir", str(tmp_path), "--columns", "7")
    assert result.exit_code == 4


def test_columns_too_narrow(thread_html: Path, tmp_path: Path) -> None:
    cfg = tmp_path / "narrow.yml"
    cfg.write_text("page:\n  width: 180\n  margin: 60\nlayout:\n  column_gap: 30\n")
    out_dir = tmp_path / "out"
    result = _invoke(
        "--in", str(thread_html), "--config", str(cfg), "--out-dir", str(out_dir),
        "--format", "pdf", "--columns", "3",
    )
    assert result.exit_code == 4
    assert "column width" in result.stderr
    assert not out_dir.exists()


def test_unwritable_output(thread_html: Path, tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    result = _invoke("--in", str(thread_html), "--out-dir", str(blocker), "--format", "md")
    assert result.exit_code == 3


def test_undecodable_source(tmp_path: Path) -> None:
    in_path = tmp_path / "page.html"
    in_path.write_bytes(b'<div slot="comment"><p>caf\xe9</p></div>')
    out_dir = tmp_path / "out"
    result = _invoke("--in", str(in_path), "--out-dir", str(out_dir), "--format", "txt")
    assert result.exit_code == 3
    assert f"Error: Cannot decode {in_path}" in result.stderr
    assert not out_dir.exists()
