"""LLVM IR integer types for C types under a data model.

Used by code generators that need the IR spelling of `long` or `size_t`
for a particular target convention.
"""
from __future__ import annotations

from typing import Iterable, Optional

from llvmlite import ir

from data_models.errors import MissingTypeError, error
from data_models.models import DataModel, TypeCategory


def ll_type(model: DataModel, category: TypeCategory) -> Optional[ir.IntType]:
    """Map a C type category to its LLVM integer type under `model`.

    POINTER maps to the pointer-sized integer (the IR type of intptr_t).
    Returns None when the model does not define the type.
    """
    width = model.bit_width(category)
    if width == 0:
        return None
    return ir.IntType(width)


def ll_struct(model: DataModel, members: Iterable[TypeCategory]) -> ir.LiteralStructType:
    """Build a literal struct type with one integer field per member.

    Args:
        model: Data model fixing the member widths
        members: Member categories in declaration order

    Raises:
        MissingTypeError: If a member has no size under `model`.
    """
    fields = []
    for category in members:
        ty = ll_type(model, category)
        if ty is None:
            raise error("DM0003", MissingTypeError, type=category, model=model)
        fields.append(ty)
    return ir.LiteralStructType(fields)
