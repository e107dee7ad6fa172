"""Top-level package for the Civics Toolkit.

Provides subpackages:
- civics_toolkit.core – immutable question models, schema and serialization
- civics_toolkit.parsing – question list parser and local-file pipeline
- civics_toolkit.updates – update page extraction and reconciliation
- civics_toolkit.common – shared reference data (states and territories)
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("civics-toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
