"""Data models and the sizes of C integer types under each of them.

A data model is the choice of bit widths for the C integer types made by a
platform or ABI. The C standard only fixes lower bounds (short and int are at
least 16 bits, long at least 32, long long at least 64); the exact widths
come from the data model.

Model names spell out which types are widened: ILP32 means (I)nt, (L)ong and
(P)ointer are 32 bits. The scheme is a convention and not entirely
consistent. Four models found wide acceptance:

- LP32  (2/4/4): m68k Mac, Win16
- ILP32 (4/4/4): Win32, Unix and Unix-like systems before the mid-1990s
- LLP64 (4/4/8): Win64
- LP64  (4/8/8): Unix and Unix-like systems (Linux, macOS)

References:
    J. R. Mashey. The long road to 64 bits. ACM Queue, 4(8):24-35, 2006.
    T. Lauer. Porting to Win32. Springer, 1996.
"""
from __future__ import annotations
from enum import Enum
from typing import Dict, Mapping

# Bits per char. Every other width is a whole number of chars.
CHAR_BIT = 8


class TypeCategory(Enum):
    """The C types whose size a data model fixes."""
    CHAR = "char"            # smallest addressable unit, CHAR_BIT bits
    SHORT = "short"          # at least 16 bits
    INT = "int"              # at least 16 bits
    LONG = "long"            # at least 32 bits
    LONG_LONG = "long long"  # at least 64 bits
    POINTER = "pointer"      # size_t / object pointer, at least 16 bits

    def __str__(self) -> str:
        return self.value


class DataModel(Enum):
    """Named platform conventions for C integer widths.

    Example:
        >>> model = DataModel.LP64  # e.g. Linux
        >>> model.size_of(TypeCategory.POINTER)
        8
    """
    #        char short int long llong ptr  example
    IP16 = "IP16"        # 1  --  2  --  --  2  16-bit PDP-11
    IP16L32 = "IP16L32"  # 1   2  2   4  --  2  32-bit PDP-11
    LP32 = "LP32"        # 1   2  2   4   8  4  m68k Mac, win16
    ILP32 = "ILP32"      # 1   2  4   4   8  4  unix before mid-1990s, win32
    LLP64 = "LLP64"      # 1   2  4   4   8  8  windows since XP x64
    LP64 = "LP64"        # 1   2  4   8   8  8  unix/linux since the 1990s
    ILP64 = "ILP64"      # 1   2  8   8   8  8  HAL/Fujitsu SPARC64
    SILP64 = "SILP64"    # 1   8  8   8   8  8  Cray UNICOS
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def new(cls, int_size: int, long_size: int, pointer_size: int) -> DataModel:
        """Guess the data model from the byte sizes of int, long and pointer.

        Only exact matches are recognized; anything else is UNKNOWN.
        SILP64 is never returned since it shares (8, 8, 8) with ILP64 and
        differs only in the width of short.

        Example:
            >>> DataModel.new(4, 8, 8)
            <DataModel.LP64: 'LP64'>
        """
        return _BY_INT_LONG_POINTER.get((int_size, long_size, pointer_size), cls.UNKNOWN)

    def size_of(self, category: TypeCategory) -> int:
        """Size in bytes of `category` under this model.

        Returns 0 when the model is UNKNOWN or does not define the type
        (e.g. long under IP16). Never raises for a valid category.
        """
        return _SIZES[self][category]

    def bit_width(self, category: TypeCategory) -> int:
        """Width in bits of `category` under this model, 0 if undefined."""
        return self.size_of(category) * CHAR_BIT

    def size_of_c(self, spelling: str) -> int:
        """Size in bytes of a C type spelled out as source text.

        Raises:
            CTypeParseError: If the spelling is not a supported C type.
        """
        from data_models.parser import parse_c_type
        return self.size_of(parse_c_type(spelling))

    def sizes(self) -> Dict[TypeCategory, int]:
        """The full row of the size table for this model."""
        return dict(_SIZES[self])

    @property
    def known(self) -> bool:
        return self is not DataModel.UNKNOWN


def _row(char: int, short: int, int_: int, long: int, long_long: int, pointer: int) -> Mapping[TypeCategory, int]:
    return {
        TypeCategory.CHAR: char,
        TypeCategory.SHORT: short,
        TypeCategory.INT: int_,
        TypeCategory.LONG: long,
        TypeCategory.LONG_LONG: long_long,
        TypeCategory.POINTER: pointer,
    }


# Sizes in bytes. 0 marks a type the model leaves undefined.
# The models follow no common formula, so every entry is spelled out.
_SIZES: Dict[DataModel, Mapping[TypeCategory, int]] = {
    DataModel.IP16:    _row(1, 0, 2, 0, 0, 2),
    DataModel.IP16L32: _row(1, 2, 2, 4, 0, 2),
    DataModel.LP32:    _row(1, 2, 2, 4, 8, 4),
    DataModel.ILP32:   _row(1, 2, 4, 4, 8, 4),
    DataModel.LLP64:   _row(1, 2, 4, 4, 8, 8),
    DataModel.LP64:    _row(1, 2, 4, 8, 8, 8),
    DataModel.ILP64:   _row(1, 2, 8, 8, 8, 8),
    DataModel.SILP64:  _row(1, 8, 8, 8, 8, 8),
    DataModel.UNKNOWN: _row(0, 0, 0, 0, 0, 0),
}

# (int, long, pointer) -> model. SILP64 deliberately absent.
_BY_INT_LONG_POINTER: Dict[tuple[int, int, int], DataModel] = {
    (2, 0, 2): DataModel.IP16,
    (2, 4, 2): DataModel.IP16L32,
    (2, 4, 4): DataModel.LP32,
    (4, 4, 4): DataModel.ILP32,
    (4, 4, 8): DataModel.LLP64,
    (4, 8, 8): DataModel.LP64,
    (8, 8, 8): DataModel.ILP64,
}
