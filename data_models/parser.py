"""Parse C type spellings into type categories."""
from __future__ import annotations

from collections import Counter
from functools import lru_cache
from pathlib import Path

from lark import Lark, Tree, UnexpectedInput

from data_models.errors import CTypeParseError, error
from data_models.models import TypeCategory

GRAMMAR_PATH = Path(__file__).parent / "ctype.lark"

_QUALIFIERS = {"CONST", "VOLATILE"}


@lru_cache(maxsize=None)
def _parser() -> Lark:
    return Lark.open(str(GRAMMAR_PATH), parser="lalr", lexer="basic")


def parse_c_type(text: str) -> TypeCategory:
    """Map a C type spelling to the category that determines its size.

    Specifiers may come in any order, as in C ("long unsigned int" is an
    unsigned long). Qualifiers are ignored. Any pointer declarator makes the
    result POINTER regardless of the pointee.

    Examples:
        >>> parse_c_type("unsigned long long int")
        <TypeCategory.LONG_LONG: 'long long'>
        >>> parse_c_type("const char *")
        <TypeCategory.POINTER: 'pointer'>

    Raises:
        CTypeParseError: If `text` is not a supported type (e.g. "long double",
            "wchar_t", a bare "void", or "short long"), or is not a str.
    """
    if not isinstance(text, str):
        raise error("DM0001", CTypeParseError, text=text,
                    reason=f"expected a string, got {type(text).__name__}")
    try:
        tree = _parser().parse(text)
    except UnexpectedInput as e:
        raise error("DM0001", CTypeParseError, text=text,
                    reason=f"unexpected input at column {e.column}") from e

    specifiers = Counter()
    pointers = 0
    for child in tree.children:
        if isinstance(child, Tree):
            pointers += 1
        elif child.type == "NAME":
            raise error("DM0001", CTypeParseError, text=text,
                        reason=f"unsupported type name '{child}'")
        elif child.type not in _QUALIFIERS:
            specifiers[child.type] += 1

    base = _base_category(text, specifiers)
    if pointers:
        return TypeCategory.POINTER
    if base is None:
        raise error("DM0001", CTypeParseError, text=text, reason="void has no size")
    return base


def _base_category(text: str, spec: Counter) -> TypeCategory | None:
    """Resolve a specifier multiset; None stands for void."""
    def fail(reason: str) -> CTypeParseError:
        return error("DM0001", CTypeParseError, text=text, reason=reason)

    if not spec:
        raise fail("missing type specifier")
    if spec["SIGNED"] + spec["UNSIGNED"] > 1:
        raise fail("conflicting or repeated signedness")

    if spec["VOID"]:
        if sum(spec.values()) != 1:
            raise fail("void cannot be combined with other specifiers")
        return None

    char, short, long, int_ = spec["CHAR"], spec["SHORT"], spec["LONG"], spec["INT"]
    if int_ > 1 or char > 1 or short > 1 or long > 2:
        raise fail("repeated type specifier")
    if char:
        if short or long or int_:
            raise fail("char cannot be combined with short, long or int")
        return TypeCategory.CHAR
    if short and long:
        raise fail("short cannot be combined with long")
    if short:
        return TypeCategory.SHORT
    if long == 2:
        return TypeCategory.LONG_LONG
    if long == 1:
        return TypeCategory.LONG
    # int, signed, unsigned, or a combination of them
    return TypeCategory.INT
