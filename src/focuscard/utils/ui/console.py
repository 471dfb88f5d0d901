"""Console utilities for FocusCard."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get a Rich Console instance shared by commands and formatters."""
    return Console(highlight=highlight)
