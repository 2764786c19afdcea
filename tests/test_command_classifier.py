"""Tests for command classification and aggregation."""

import pytest

from histstats.history.classifier import (
    CommandClassifier,
    classify_command,
    classify_git_subcommand,
    classify_man_page,
    load_stats,
    process_command_history,
    resolve_command,
    tokenize,
)
from histstats.history.errors import TokenDecodeError
from histstats.history.models import HistoryStats

def resolved(command: bytes):
    return resolve_command(tokenize(command))

class TestTokenizing:
    """Test cases for tokenizing and resolving commands."""

    def test_tokenize_keeps_empty_tokens(self):
        """Test that consecutive spaces produce empty tokens."""
        assert tokenize(b'ls  -la') == [b'ls', b'', b'-la']
        assert tokenize(b'') == [b'']

    @pytest.mark.parametrize("command,expected", [
        (b'git status', (b'git', b'status', None)),
        (b'FOO=bar git status', (b'git', b'status', None)),
        (b'A=1 B=2 make -j 8', (b'make', b'-j', b'8')),
        (b'man 3 printf extra', (b'man', b'3', b'printf')),
        (b'ls', (b'ls', None, None)),
        (b'FOO=bar', (None, None, None)),
        # Any token with '=' is skipped, even inside quotes
        (b'"a=b" echo', (b'echo', None, None)),
    ])
    def test_resolve_command(self, command, expected):
        """Test environment-prefix skipping."""
        result = resolved(command)
        assert (result.command, result.arg1, result.arg2) == expected

class TestClassification:
    """Test cases for the individual classifications."""

    @pytest.mark.parametrize("command,expected", [
        (b'man printf', 'printf'),
        (b'man 3 printf', 'printf'),
        (b'man 3', None),
        (b'man', None),
        (b'man  printf', 'printf'),
        (b'LANG=C man ls', 'ls'),
        (b'woman ls', None),
    ])
    def test_man_page(self, command, expected):
        """Test manual page classification."""
        assert classify_man_page(resolved(command)) == expected

    @pytest.mark.parametrize("command,expected", [
        (b'git status', 'status'),
        (b'g log --oneline', 'log'),
        (b'FOO=bar git status', 'status'),
        (b'git', None),
        (b'gc', 'commit'),
        (b'gca -m "msg"', 'commit'),
        (b'ga .', 'add'),
        (b'gau', 'add'),
        (b'ls -la', None),
    ])
    def test_git_subcommand(self, command, expected):
        """Test git subcommand classification."""
        assert classify_git_subcommand(resolved(command)) == expected

    def test_command(self):
        """Test command name classification."""
        assert classify_command(resolved(b'FOO=bar git status')) == 'git'
        assert classify_command(resolved(b'FOO=bar')) is None

    def test_invalid_utf8_raises(self):
        """Test that undecodable tokens are reported."""
        with pytest.raises(TokenDecodeError) as exc_info:
            classify_man_page(resolved(b'man \xff'))
        assert exc_info.value.token == b'\xff'

        with pytest.raises(TokenDecodeError):
            classify_command(resolved(b'\xfe\xff status'))

class TestCommandClassifier:
    """Test cases for CommandClassifier."""

    @pytest.fixture
    def stats(self):
        """Create empty statistics."""
        return HistoryStats()

    @pytest.fixture
    def classifier(self):
        """Create an extended CommandClassifier."""
        return CommandClassifier()

    def test_record(self, classifier, stats):
        """Test that one command updates every table it belongs to."""
        classifier.record(stats, b'FOO=bar git status')
        classifier.record(stats, b'man 3 printf')

        assert stats.commands == {'git': 1, 'man': 1}
        assert stats.man_pages == {'printf': 1}
        assert stats.git_subcommands == {'status': 1}

    def test_commit_alias_counted_once(self, classifier, stats):
        """Test that commit aliases count once regardless of arguments."""
        classifier.record(stats, b'gca -m "msg"')
        assert stats.git_subcommands == {'commit': 1}
        assert stats.commands == {'gca': 1}

    def test_missing_section_page(self, classifier, stats):
        """Test that 'man 3' records no manual page."""
        classifier.record(stats, b'man 3')
        assert stats.man_pages == {}
        assert stats.commands == {'man': 1}

    @pytest.mark.parametrize("command,commands,man_pages,git_subcommands", [
        (b'man \xff', {'man': 1}, {}, {}),
        (b'git \xff', {'git': 1}, {}, {}),
        (b'\xff status', {}, {}, {}),
    ])
    def test_decode_failures_are_isolated(self, classifier, stats, command, commands, man_pages, git_subcommands):
        """Test that a bad token only skips its own table."""
        classifier.record(stats, command)
        assert stats.commands == commands
        assert stats.man_pages == man_pages
        assert stats.git_subcommands == git_subcommands

    def test_minimal_variant_skips_git(self, stats):
        """Test that the minimal classifier ignores git subcommands."""
        CommandClassifier(extended=False).record(stats, b'git status')
        assert stats.git_subcommands == {}
        assert stats.commands == {'git': 1}

    def test_command_count_matches_decodable_records(self, stats):
        """Test that command counts add up to the decodable records."""
        history = [
            b'git status',
            b'\xff\xfe',
            b'FOO=1',
            b'ls',
            b'',
            b'X=1 \xc3\xa9cho hi',
            b'X=1 \xc3 hi',
        ]
        process_command_history(stats, history)

        assert stats.total_commands == 4
        assert stats.commands == {'git': 1, 'ls': 1, '': 1, 'écho': 1}

class TestLoadStats:
    """Test cases for load_stats."""

    def test_missing_file(self, tmp_path):
        """Test that a missing history file gives empty tables."""
        stats = load_stats(tmp_path / "missing")
        assert stats == HistoryStats()

    def test_history_file(self, tmp_path):
        """Test aggregation over a history file."""
        path = tmp_path / ".zsh_history"
        path.write_bytes(
            b': 1700000000:0;git status\n'
            b': 1700000001:0;FOO=bar git commit -m "a\n'
            b'b"\n'
            b': 1700000002:0\n'
            b': 1700000003:0;man 3 printf\n'
            b': 1700000004:0;gca -m "msg"\n'
        )

        stats = load_stats(path)

        assert stats.commands == {'git': 2, 'man': 1, 'gca': 1}
        assert stats.man_pages == {'printf': 1}
        assert stats.git_subcommands == {'status': 1, 'commit': 2}
