"""Utility modules for ircprims.

Provides:
- logger: get_logger for namespaced logging
- text: preview for bounded rendering of byte views
"""

from ircprims.utils.logger import get_logger
from ircprims.utils.text import preview

__all__ = [
    "get_logger",
    "preview",
]
