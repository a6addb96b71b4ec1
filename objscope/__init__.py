"""
objscope - Runtime object introspection helpers
"""

from .core.config import get_version, ChainConfig
from .core.schema import InvalidInput
from .core.reflection import Reflector, HostReflector
from .introspection import subtype, own_property_names, ancestor_chain

__version__ = get_version()

__all__ = [
    # Main functions
    'subtype',
    'own_property_names',
    'ancestor_chain',

    # Configuration
    'ChainConfig',

    # Reflection facade
    'Reflector',
    'HostReflector',

    # Errors
    'InvalidInput',

    # Version
    '__version__'
]
