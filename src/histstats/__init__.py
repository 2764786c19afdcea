"""histstats package initialization."""

"""
Usage statistics for the zsh command history
"""

__version__ = '0.1.0'

from .history import (
    ZshHistory,
    CommandClassifier,
    HistoryStats,
    load_stats,
)

from .utils.logger import get_logger

__all__ = [
    'ZshHistory',
    'CommandClassifier',
    'HistoryStats',
    'load_stats',
    'get_logger',
]
