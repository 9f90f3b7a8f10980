"""
Field Selectors - Reading a Value off an Opaque Element.

order_by, sum, avg, max and min take a selector. A selector is either:
    - a callable taking the element and returning the value, or
    - a field name, looked up by key on mappings and by attribute otherwise.

A field name that the element does not have resolves to MISSING rather than
raising, so aggregations can skip the element.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Callable, Union

from querykit.domain.value_objects import MISSING

Selector = Union[str, Callable[[Any], Any]]


def resolve_selector(selector: Selector) -> Callable[[Any], Any]:
    """
    Turn a selector into a callable.

    Args:
        selector: Callable or field name

    Returns:
        Callable returning the selected value or MISSING

    Raises:
        TypeError: If selector is neither a string nor callable
    """
    if isinstance(selector, str):
        return _field_reader(selector)
    if callable(selector):
        return selector
    raise TypeError(
        f"Selector must be a field name or callable, got {type(selector).__name__}"
    )


def _field_reader(name: str) -> Callable[[Any], Any]:
    def read(element: Any) -> Any:
        if isinstance(element, Mapping):
            return element.get(name, MISSING)
        return getattr(element, name, MISSING)

    return read


def is_numeric(value: Any) -> bool:
    """
    Check whether a selected value takes part in numeric reductions.

    Real numbers and Decimals qualify. Booleans, NaN, strings, None and
    MISSING do not.
    """
    if isinstance(value, bool):
        return False
    if not isinstance(value, (numbers.Real, Decimal)):
        return False
    # NaN is the only value not equal to itself
    return value == value


def add_numeric(total: Any, value: Any) -> Any:
    """
    Add two qualifying values.

    Decimal only combines exactly with int, so a Decimal meeting a float or
    Fraction is added as float.
    """
    if isinstance(total, Decimal) != isinstance(value, Decimal):
        other = value if isinstance(total, Decimal) else total
        if not isinstance(other, int):
            return float(total) + float(value)
    return total + value
