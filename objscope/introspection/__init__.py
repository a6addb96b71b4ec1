"""
objscope introspection helpers
"""

from .subtype import subtype
from .properties import own_property_names
from .chain import ancestor_chain


__all__ = [
    'subtype',
    'own_property_names',
    'ancestor_chain',
]
