from __future__ import annotations

from pathlib import Path

from click.testing import Result
from typer.testing import CliRunner

from threadpress.cli import app


def _run(*args: str, input: str | None = None) -> Result:
    runner = CliRunner()
    return runner.invoke(app, ["run", "--no-progress", *args], input=input)


def test_cli_run_txt(thread_html: Path, tmp_path: Path) -> None:
    result = _run(
        "--in", str(thread_html), "--out-dir", str(tmp_path),
        "--format", "txt", "--out", "comments", "--no-prompt",
    )
    assert result.exit_code == 0, result.output
    out = tmp_path / "comments.txt"
    assert out.read_text(encoding="utf-8").endswith("Last & final")
    assert f"Successfully saved to: {out}" in result.stdout
    assert "Total comments extracted: 3" in result.stdout


def test_cli_run_pdf_columns(thread_html: Path, tmp_path: Path) -> None:
    result = _run(
        "--in", str(thread_html), "--out-dir", str(tmp_path), "--no-prompt",
        "--format", "pdf", "--columns", "3", "--font-size", "9", "--title", "Saved thread",
    )
    assert result.exit_code == 0, result.output
    assert (tmp_path / "reddit-thread-comments.pdf").read_bytes().startswith(b"%PDF")


def test_cli_prompts_for_missing_options(thread_html: Path, tmp_path: Path) -> None:
    result = _run(
        "--in", str(thread_html), "--out-dir", str(tmp_path), "--prompt",
        input="md\nmy-thread\n",
    )
    assert result.exit_code == 0, result.output
    assert (tmp_path / "my-thread.md").exists()


def test_cli_prompts_pdf_options(thread_html: Path, tmp_path: Path) -> None:
    result = _run(
        "--in", str(thread_html), "--out-dir", str(tmp_path), "--prompt",
        input="pdf\nbook\n13\n2\nMy Title\n",
    )
    assert result.exit_code == 0, result.output
    assert (tmp_path / "book.pdf").read_bytes().startswith(b"%PDF")


def test_cli_reprompts_invalid_choice(thread_html: Path, tmp_path: Path) -> None:
    result = _run(
        "--in", str(thread_html), "--out-dir", str(tmp_path), "--prompt",
        "--out", "x", input="docx\ntxt\n",
    )
    assert result.exit_code == 0, result.output
    assert (tmp_path / "x.txt").exists()


def test_cli_source_from_config(thread_html: Path, tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yml"
    cfg.write_text(f"source: '{thread_html.as_posix()}'\noutput:\n  format: md\n")
    result = _run("--config", str(cfg), "--out-dir", str(tmp_path), "--no-prompt")
    assert result.exit_code == 0, result.output
    assert (tmp_path / "reddit-thread-comments.md").exists()
