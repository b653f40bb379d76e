from pathlib import Path
from typing import Any

from threadpress.config import load_config


def test_env_source(monkeypatch: Any) -> None:
    monkeypatch.setenv("THREADPRESS_SOURCE", "saved/thread.html")
    cfg = load_config()
    assert cfg.source == "saved/thread.html"


def test_env_beats_file(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("source: from-file.html\n")
    assert load_config(cfg_file, env={}).source == "from-file.html"
    cfg = load_config(cfg_file, env={"THREADPRESS_SOURCE": "from-env.html"})
    assert cfg.source == "from-env.html"


def test_empty_env_value_ignored() -> None:
    assert load_config(env={"THREADPRESS_SOURCE": ""}).source == "source.html"
