"""Package version lookup for the CLI and ``__version__``."""

import tomllib
from functools import lru_cache
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

DIST_NAME = "blueprint-themes"

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


@lru_cache(maxsize=1)
def get_version() -> str:
    """Version from the source checkout's pyproject.toml, else installed metadata."""
    if _PYPROJECT.is_file():
        with _PYPROJECT.open("rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == DIST_NAME and project.get("version"):
            return str(project["version"])
    try:
        return _metadata_version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"
