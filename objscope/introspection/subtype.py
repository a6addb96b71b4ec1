"""
Subtype Classification

Tags any Python value with its canonical runtime category, e.g. "object Function"
for callables and classes or "object Array" for lists and tuples.
"""

from typing import Any, Optional

from objscope.core.constants import SubtypeTag, BUILTIN_TAGS
from objscope.core.reflection import Reflector, host_reflector


def subtype(value: Any, *, reflector: Optional[Reflector] = None) -> str:
    """
    Find the subtype tag of a value.

    The value's type (from the single type() call) is walked along its MRO;
    the first class that declares __subtype_tag__ or appears in the builtin
    tag table decides. Every MRO ends in object, so every value, None
    included, gets a tag.

    Only the type decides, never callable(): an instance of a user class
    that merely defines __call__ is "object Object". Such a class can set
    __subtype_tag__ = "Function" to be tagged as a function.

    Args:
        value: Any Python value
        reflector: Reflection facade (defaults to the running interpreter)

    Returns:
        Tag rendered as "object <Tag>"

    Examples:
        subtype(object)        # "object Function"
        subtype({"a": 1})      # "object Object"
        subtype(None)          # "object Null"
    """
    reflector = reflector or host_reflector
    value_type = reflector.type_of(value)

    for klass in reflector.mro(value_type):
        override = getattr(klass, '__dict__', {}).get(SubtypeTag.OVERRIDE_ATTR)
        if isinstance(override, str):
            return SubtypeTag.render(override)

        tag = BUILTIN_TAGS.get(klass)
        if tag is not None:
            return SubtypeTag.render(tag)

    return SubtypeTag.render(SubtypeTag.OBJECT)
