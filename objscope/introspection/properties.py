"""
Own Property Listing

Lists the names stored directly on an object, never those it only reaches
through its class or ancestors.
"""

from typing import Any, List, Optional

from objscope.core.schema import InvalidInput
from objscope.core.constants import MAX_ARRAY_INDEX
from objscope.core.reflection import Reflector, host_reflector


def own_property_names(obj: Any, *, reflector: Optional[Reflector] = None) -> List[str]:
    """
    Find an object's own property names.

    Dunder and private names are included. Primitives are boxed rather than
    rejected: numbers and bools own nothing, a str owns its indices. Only
    None, which has nothing to box, is refused.

    Ordering: integer-like keys ascending numerically, then every other key
    in insertion order.

    Args:
        obj: Object to query
        reflector: Reflection facade (defaults to the running interpreter)

    Returns:
        Own property names

    Raises:
        InvalidInput: If obj is None

    Examples:
        own_property_names({"b": 1, "2": 0, "a": 2})   # ["2", "b", "a"]
        own_property_names(types.FunctionType)         # ["__new__", "__repr__", "__call__", ...]
    """
    reflector = reflector or host_reflector

    if not reflector.has_type(obj):
        raise InvalidInput(f"Cannot convert {obj!r} to object")

    seen = set()
    names = []
    for key in reflector.own_keys(obj):
        name = str(key)
        if name not in seen:
            seen.add(name)
            names.append(name)

    return _canonical_order(names)


def _canonical_order(names: List[str]) -> List[str]:
    indices = sorted((name for name in names if _is_array_index(name)), key=int)
    others = [name for name in names if not _is_array_index(name)]
    return indices + others


def _is_array_index(name: str) -> bool:
    """Check for canonical non-negative integer strings ("0", "12"; not "012" or "-1")."""
    if not name or not name.isascii() or not name.isdigit():
        return False
    if len(name) > 1 and name[0] == "0":
        return False
    return int(name) < MAX_ARRAY_INDEX
