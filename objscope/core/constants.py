"""
objscope constants for subtype tagging and chain rendering
"""

import re
import types
import asyncio
import datetime
import functools
from decimal import Decimal
from fractions import Fraction


class SubtypeTag:
    """Canonical subtype tag names"""

    OBJECT = "Object"
    FUNCTION = "Function"
    ARRAY = "Array"
    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    NULL = "Null"
    DATE = "Date"
    REGEXP = "RegExp"
    ERROR = "Error"
    SET = "Set"
    ARRAY_BUFFER = "ArrayBuffer"
    GENERATOR = "Generator"
    ASYNC_GENERATOR = "AsyncGenerator"
    PROMISE = "Promise"
    MODULE = "Module"

    # Prefix of every rendered tag ("[object Function]" minus the brackets)
    PREFIX = "object"

    # Class attribute that overrides the builtin table, inherited through the MRO
    OVERRIDE_ATTR = "__subtype_tag__"

    @classmethod
    def render(cls, tag: str) -> str:
        """Render a tag the way subtype() returns it"""
        return f"{cls.PREFIX} {tag}"


class ChainDefaults:
    """Default ancestor chain rendering"""

    SEPARATOR = " -> "
    TERMINAL_LABEL = "null"


# Exact classes only; subclasses resolve through their MRO.
BUILTIN_TAGS = {
    type(None): SubtypeTag.NULL,
    bool: SubtypeTag.BOOLEAN,
    int: SubtypeTag.NUMBER,
    float: SubtypeTag.NUMBER,
    complex: SubtypeTag.NUMBER,
    Decimal: SubtypeTag.NUMBER,
    Fraction: SubtypeTag.NUMBER,
    str: SubtypeTag.STRING,
    bytes: SubtypeTag.ARRAY_BUFFER,
    bytearray: SubtypeTag.ARRAY_BUFFER,
    memoryview: SubtypeTag.ARRAY_BUFFER,
    list: SubtypeTag.ARRAY,
    tuple: SubtypeTag.ARRAY,
    set: SubtypeTag.SET,
    frozenset: SubtypeTag.SET,
    dict: SubtypeTag.OBJECT,
    datetime.date: SubtypeTag.DATE,
    re.Pattern: SubtypeTag.REGEXP,
    BaseException: SubtypeTag.ERROR,

    # Callables
    type: SubtypeTag.FUNCTION,
    types.FunctionType: SubtypeTag.FUNCTION,
    types.BuiltinFunctionType: SubtypeTag.FUNCTION,
    types.MethodType: SubtypeTag.FUNCTION,
    types.MethodWrapperType: SubtypeTag.FUNCTION,
    types.WrapperDescriptorType: SubtypeTag.FUNCTION,
    types.MethodDescriptorType: SubtypeTag.FUNCTION,
    types.ClassMethodDescriptorType: SubtypeTag.FUNCTION,
    functools.partial: SubtypeTag.FUNCTION,

    # Suspendables
    types.GeneratorType: SubtypeTag.GENERATOR,
    types.AsyncGeneratorType: SubtypeTag.ASYNC_GENERATOR,
    types.CoroutineType: SubtypeTag.PROMISE,
    asyncio.Future: SubtypeTag.PROMISE,

    types.ModuleType: SubtypeTag.MODULE,
    object: SubtypeTag.OBJECT,
}

# Largest array index is 2**32 - 2; keys at or above this sort as plain strings
MAX_ARRAY_INDEX = 2 ** 32 - 1

