from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_install_does_not_ship_generic_top_level_names():
    config = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))

    setuptools_config = config["tool"]["setuptools"]
    assert setuptools_config["packages"] == []
    assert setuptools_config["py-modules"] == []
    assert "scripts" not in config["project"]


def test_server_script_bootstraps_the_project_root():
    server = PYPROJECT.parent / "tools" / "mcp_server.py"
    source = server.read_text(encoding="utf-8")

    bootstrap = source.index("sys.path.insert(0")
    assert bootstrap < source.index("from core import weather")
