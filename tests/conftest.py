import json

import pytest


@pytest.fixture
def project(tmp_path):
    """A project root with config.json, a base template and public/."""

    config = {
        "template": {
            "base": "template/layout/base.html",
            "header": "template/layout/header.html",
            "footer": "template/layout/footer.html",
        },
        "manifest": {},
    }
    (tmp_path / "config.json").write_text(json.dumps(config), encoding="utf-8")
    layout = tmp_path / "template" / "layout"
    layout.mkdir(parents=True)
    (layout / "base.html").write_text(
        "<div>{{ header }}{{ body }}{{ footer }}</div>", encoding="utf-8"
    )
    (tmp_path / "public").mkdir()
    (tmp_path / "html").mkdir()
    return tmp_path


@pytest.fixture
def set_manifest(project):
    def _set(manifest):
        path = project / "config.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        data["manifest"] = manifest
        path.write_text(json.dumps(data), encoding="utf-8")

    return _set
