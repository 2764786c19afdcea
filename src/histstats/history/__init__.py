"""History package initialization."""

from .decoder import ZshHistory, default_history_path, open_history_file
from .classifier import (
    CommandClassifier,
    classify_command,
    classify_git_subcommand,
    classify_man_page,
    load_stats,
    process_command_history,
    resolve_command,
    tokenize,
)
from .errors import HistoryError, HistoryUnavailableError, TokenDecodeError
from .models import HistoryStats, RankedEntry, ReportSection, ResolvedCommand

__all__ = [
    'ZshHistory',
    'default_history_path',
    'open_history_file',
    'CommandClassifier',
    'classify_command',
    'classify_git_subcommand',
    'classify_man_page',
    'load_stats',
    'process_command_history',
    'resolve_command',
    'tokenize',
    'HistoryError',
    'HistoryUnavailableError',
    'TokenDecodeError',
    'HistoryStats',
    'RankedEntry',
    'ReportSection',
    'ResolvedCommand',
]
