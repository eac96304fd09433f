# data_models/errors.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Severity(str, Enum):
    ERROR = "error"


class Category(str, Enum):
    GENERAL = "general"
    PARSE   = "parse"
    TARGET  = "target"
    LAYOUT  = "layout"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    severity: Severity
    text: str
    category: Category = Category.GENERAL
    doc: str = ""


REGISTRY: Dict[str, ErrorMessage] = {}

class _ErrorCatalog:
    def __init__(self, backing: Dict[str, ErrorMessage]) -> None:
        self._registry = backing

    def __getattr__(self, name: str) -> ErrorMessage:
        try:
            return self._registry[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __getitem__(self, code: str) -> ErrorMessage:
        return self._registry[code]


ERR = _ErrorCatalog(REGISTRY)


class DataModelError(ValueError):
    """Base class for errors raised on free-form input.

    The lookup operations themselves never raise; only the helpers that
    accept strings (C type spellings, target triples) or build composite
    layouts do.
    """

    def __init__(self, message: ErrorMessage, text: str) -> None:
        super().__init__(f"{message.code}: {text}")
        self.message = message
        self.text = text

    @property
    def code(self) -> str:
        return self.message.code


class CTypeParseError(DataModelError):
    pass


class TargetTripleError(DataModelError):
    pass


class MissingTypeError(DataModelError):
    pass


def error(code: str, exc_type: type = DataModelError, **kwargs) -> DataModelError:
    """Build an exception of `exc_type` for a catalog entry.

    Args:
        code: Error code (e.g., "DM0001")
        exc_type: DataModelError subclass to instantiate
        **kwargs: Format parameters for the error message

    Returns:
        The exception, ready to be raised by the caller.
    """
    return exc_type(_get(code), _fmt(code, **kwargs))


#
# --- Helpers
#

def _add(msg: ErrorMessage) -> None:
    if msg.code in REGISTRY:
        raise ValueError(f"duplicate error code {REGISTRY[msg.code]} in {msg}")
    REGISTRY[msg.code] = msg

def _get(code: str) -> ErrorMessage:
    try:
        return REGISTRY[code]
    except KeyError:
        raise KeyError(f"unknown error code: {code}")

def _fmt(code: str, **kwargs) -> str:
    msg = _get(code)
    try:
        return msg.text.format(**kwargs)
    except KeyError as key_error:
        missing = key_error.args[0]
        raise KeyError(f"missing text key '{missing}' for {code} "
                       f"(needed by: {msg.text!r})") from None

#
# --- Registry population
#

_add(ErrorMessage("DM0001", Severity.ERROR,
    "cannot parse C type '{text}': {reason}",
    Category.PARSE, "Only char, short, int, long, long long and pointers are recognized."))

_add(ErrorMessage("DM0002", Severity.ERROR,
    "invalid target triple '{triple}'",
    Category.TARGET, "Expected an LLVM triple of the form arch-vendor-os[-abi]."))

_add(ErrorMessage("DM0003", Severity.ERROR,
    "'{type}' has no size under the {model} data model",
    Category.LAYOUT, "The data model does not define this type, so it cannot be laid out."))
