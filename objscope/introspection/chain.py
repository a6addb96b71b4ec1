"""
Ancestor Chain Rendering

Renders the chain of types an object delegates to, from the type of the
object up to the terminal root past `object`.
"""

import logging
from typing import Any, Optional

from objscope.core.schema import InvalidInput
from objscope.core.config import ChainConfig, DEFAULT_CHAIN_CONFIG
from objscope.core.reflection import Reflector, host_reflector


logger = logging.getLogger(__name__)


def ancestor_chain(obj: Any, *, reflector: Optional[Reflector] = None,
                   config: Optional[ChainConfig] = None) -> str:
    """
    Find an object's ancestor chain.

    The walk starts at type(obj), not at obj: ancestor_chain(T) walks the
    metaclass of T, while ancestor_chain(T()) walks T itself. This asymmetry
    is long-standing behaviour that callers rely on; do not "fix" it here.

    The result opens with str(obj) followed by a separator, and every node
    appends another separator plus its name, so the first segment carries a
    doubled arrow. Set config.collapseLeadingArrow to drop it. The terminal
    root has no name and is rendered as config.terminalLabel.

    Args:
        obj: Object to start with
        reflector: Reflection facade (defaults to the running interpreter)
        config: Rendering options (defaults to DEFAULT_CHAIN_CONFIG)

    Returns:
        Arrow-joined chain string

    Raises:
        InvalidInput: If obj is None (no constructor to start from)

    Examples:
        ancestor_chain(type)       # "<class 'type'> ->  -> type -> object -> null"
        ancestor_chain(True)       # "True ->  -> bool -> int -> object -> null"
    """
    reflector = reflector or host_reflector
    config = config or DEFAULT_CHAIN_CONFIG

    if not reflector.has_type(obj):
        raise InvalidInput(f"{obj!r} has no constructor to start an ancestor chain from")

    separator = config.separator
    result = reflector.render(obj)
    if not config.collapseLeadingArrow:
        result += separator

    ancestors = reflector.mro(reflector.type_of(obj))
    for node in ancestors:
        result += separator + reflector.type_name(node)

    logger.debug("Walked %d ancestors", len(ancestors))

    return result + separator + config.terminalLabel
