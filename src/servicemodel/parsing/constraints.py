"""Range constraints derived from schema metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING

from servicemodel.typing.models import LengthRange, NumericRange

if TYPE_CHECKING:
    from servicemodel.typing.models import IntegerContext, NumberContext


def integer_range(context: IntegerContext | None) -> NumericRange[int]:
    """Build an integer range from integer schema bounds.

    Args:
        context (IntegerContext | None): Integer schema metadata.

    Returns:
        NumericRange[int]: Range constraint; undeclared bounds stay unset.
    """
    if context is None:
        return NumericRange[int]()
    return NumericRange[int](
        minimum=context.minimum,
        maximum=context.maximum,
        exclusive_minimum=context.exclusive_minimum,
        exclusive_maximum=context.exclusive_maximum,
    )


def number_range(context: NumberContext | None) -> NumericRange[float]:
    """Build a floating point range from number schema bounds.

    Args:
        context (NumberContext | None): Number schema metadata.

    Returns:
        NumericRange[float]: Range constraint; undeclared bounds stay unset.
    """
    if context is None:
        return NumericRange[float]()
    return NumericRange[float](
        minimum=context.minimum,
        maximum=context.maximum,
        exclusive_minimum=context.exclusive_minimum,
        exclusive_maximum=context.exclusive_maximum,
    )


def length_range(minimum: int | None, maximum: int | None) -> LengthRange[int]:
    """Build a length range, dropping a minimum of zero.

    Args:
        minimum (int | None): Declared minimum length or item count.
        maximum (int | None): Declared maximum length or item count.

    Returns:
        LengthRange[int]: Length constraint.
    """
    return LengthRange[int](
        minimum=minimum if minimum is not None and minimum > 0 else None,
        maximum=maximum,
    )
