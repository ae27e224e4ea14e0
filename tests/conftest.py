import json
from pathlib import Path

import pytest

TEMPLATE_SETTINGS = {"sourceBase": "src", "testBase": "tests", "fileCasing": "default"}
STARTER_SETTINGS = {"sourceBase": "app", "starter": True}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of the tests."""
    monkeypatch.delenv("REDUXRC_BASE_PATH", raising=False)
    monkeypatch.delenv("REDUXRC_TEMPLATE", raising=False)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project directory with a default and a starter template but no dotfile."""
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / ".reduxrc").write_text(json.dumps(TEMPLATE_SETTINGS, indent=2) + "\n")
    (templates / ".starterrc").write_text(json.dumps(STARTER_SETTINGS))
    (tmp_path / "package.json").write_text(json.dumps({"name": "demo", "version": "1.0.0"}))
    return tmp_path
