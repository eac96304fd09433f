"""Data models: the sizes of C integer types across platform conventions."""
from importlib.metadata import version, PackageNotFoundError

from data_models.errors import CTypeParseError, DataModelError, MissingTypeError, TargetTripleError
from data_models.models import CHAR_BIT, DataModel, TypeCategory
from data_models.parser import parse_c_type
from data_models.targets import TargetPlatform, model_for_triple, parse_triple

try:
    __version__ = version("data-models")
    __dev__ = False
except PackageNotFoundError:
    # Development mode - read from pyproject.toml
    import tomllib
    from pathlib import Path
    try:
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            __version__ = tomllib.load(f).get("project", {}).get("version", "unknown")
    except OSError:
        __version__ = "unknown"
    __dev__ = True

__all__ = [
    "CHAR_BIT",
    "CTypeParseError",
    "DataModel",
    "DataModelError",
    "MissingTypeError",
    "TargetPlatform",
    "TargetTripleError",
    "TypeCategory",
    "model_for_triple",
    "parse_c_type",
    "parse_triple",
]
