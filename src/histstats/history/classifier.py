"""Command classification and frequency aggregation."""

from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..utils.logger import get_logger
from .decoder import ZshHistory
from .errors import TokenDecodeError
from .models import HistoryStats, ResolvedCommand

logger = get_logger(__name__)

GIT_COMMANDS = {b'g', b'git'}
GIT_COMMIT_ALIASES = {b'gc', b'gca'}
GIT_ADD_ALIASES = {b'ga', b'gau'}

def tokenize(command: bytes) -> List[bytes]:
    """Split a command on single spaces, keeping empty tokens."""
    return command.split(b' ')

def resolve_command(tokens: List[bytes]) -> ResolvedCommand:
    """Skip leading ``NAME=value`` tokens and pick the command and two args.

    Any token containing ``=`` counts as an assignment, quoted or not.
    """
    index = 0
    while index < len(tokens) and b'=' in tokens[index]:
        index += 1
    picked = tokens[index:index + 3]
    picked += [None] * (3 - len(picked))
    return ResolvedCommand(command=picked[0], arg1=picked[1], arg2=picked[2])

def _decode(token: bytes) -> str:
    try:
        return token.decode('utf-8')
    except UnicodeDecodeError as e:
        raise TokenDecodeError(token) from e

def _is_section_number(token: bytes) -> bool:
    # Vacuously true for an empty token
    return all(0x30 <= byte <= 0x39 for byte in token)

def classify_man_page(resolved: ResolvedCommand) -> Optional[str]:
    """Return the manual page looked up by a ``man`` command.

    A numeric first argument is a section, as in ``man 3 printf``, and the
    page is then the second argument.
    """
    if resolved.command != b'man' or resolved.arg1 is None:
        return None
    page = resolved.arg1
    if _is_section_number(page):
        if resolved.arg2 is None:
            return None
        page = resolved.arg2
    return _decode(page)

def classify_git_subcommand(resolved: ResolvedCommand) -> Optional[str]:
    """Return the git subcommand a command runs, expanding common aliases."""
    if resolved.command in GIT_COMMANDS and resolved.arg1 is not None:
        return _decode(resolved.arg1)
    if resolved.command in GIT_COMMIT_ALIASES:
        return 'commit'
    if resolved.command in GIT_ADD_ALIASES:
        return 'add'
    return None

def classify_command(resolved: ResolvedCommand) -> Optional[str]:
    """Return the command name."""
    if resolved.command is None:
        return None
    return _decode(resolved.command)

class CommandClassifier:
    """Classifies logical commands into the frequency tables."""

    def __init__(self, extended: bool = True):
        """Initialize command classifier.

        Args:
            extended: Also count git subcommands.
        """
        self.extended = extended
        self.classifications = [
            ('man_pages', classify_man_page),
            ('commands', classify_command),
        ]
        if extended:
            self.classifications.insert(1, ('git_subcommands', classify_git_subcommand))

    def record(self, stats: HistoryStats, command: bytes) -> None:
        """Update every table for one command.

        A token that is not valid UTF-8 only skips the table it was bound for.
        """
        resolved = resolve_command(tokenize(command))
        for table, classify in self.classifications:
            try:
                key = classify(resolved)
            except TokenDecodeError as e:
                logger.debug(f"Skipping {table} entry: {e}")
                continue
            if key is not None:
                stats.increment(table, key)

def process_command_history(stats: HistoryStats, history: Iterable[bytes],
                            extended: bool = True) -> HistoryStats:
    """Feed every logical command from history into stats."""
    classifier = CommandClassifier(extended=extended)
    records = 0
    for command in history:
        classifier.record(stats, command)
        records += 1
    logger.debug(f"Classified {records} commands")
    return stats

def load_stats(path: Union[str, Path, None] = None, extended: bool = True) -> HistoryStats:
    """Aggregate statistics for a history file.

    Args:
        path: History file to read. If None, uses ``~/.zsh_history``.
        extended: Also count git subcommands.

    Returns:
        The filled tables, empty if the file is unavailable.
    """
    stats = HistoryStats()
    history = ZshHistory.open(path)
    if history is None:
        return stats
    with history:
        return process_command_history(stats, history, extended=extended)
