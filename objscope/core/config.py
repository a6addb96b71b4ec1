# core/config.py
"""
objscope Configuration

Rendering options are plain dataclasses handed to the operations by the
caller; nothing is read from or written to disk.
"""

from dataclasses import dataclass

from objscope.core.constants import ChainDefaults


__version__ = "0.1.0"

def get_version() -> str:
    return __version__


@dataclass
class ChainConfig:
    """Ancestor chain rendering configuration."""
    separator: str = ChainDefaults.SEPARATOR
    terminalLabel: str = ChainDefaults.TERMINAL_LABEL
    collapseLeadingArrow: bool = False

    def __post_init__(self):
        """Validate option types."""
        if not isinstance(self.separator, str):
            raise ValueError(f"Invalid chain separator: {self.separator!r}")
        if not isinstance(self.terminalLabel, str):
            raise ValueError(f"Invalid chain terminal label: {self.terminalLabel!r}")
        if not isinstance(self.collapseLeadingArrow, bool):
            raise ValueError(f"Invalid collapseLeadingArrow: {self.collapseLeadingArrow!r}")


DEFAULT_CHAIN_CONFIG = ChainConfig()
