"""
Report formatting utilities
"""

import random
from typing import List, Sequence

from ..config import (
    FLAVOR_TEXTS,
    MINIMAL_TOP_COMMANDS,
    TOP_COMMANDS,
    TOP_GIT_SUBCOMMANDS,
    TOP_MAN_PAGES,
)
from ..history.models import HistoryStats, ReportSection

class ReportFormatter:
    """Turn history statistics into ranked text sections."""

    def __init__(self, extended: bool = True):
        self.extended = extended

    def build_sections(self, stats: HistoryStats) -> List[ReportSection]:
        """Rank each table and drop the ones the variant does not show."""
        if not self.extended:
            return [
                ReportSection.from_table("Your most used commands:", stats.commands, MINIMAL_TOP_COMMANDS),
                ReportSection.from_table("Your most used man pages:", stats.man_pages, TOP_MAN_PAGES),
            ]

        sections = [
            ReportSection.from_table("Your most used commands:", stats.commands, TOP_COMMANDS),
            ReportSection.from_table("Your most used man pages:", stats.man_pages, TOP_MAN_PAGES),
            ReportSection.from_table("Your most used git subcommands:", stats.git_subcommands, TOP_GIT_SUBCOMMANDS),
        ]
        # Sections with nothing counted are left out entirely
        return [section for section in sections if section.total > 0]

    @staticmethod
    def format_section(section: ReportSection) -> str:
        lines = [section.title]
        lines.extend(f"{entry.count} {entry.key}" for entry in section.entries)
        return '\n'.join(lines)

    @staticmethod
    def pick_flavor_text(choices: Sequence[str] = FLAVOR_TEXTS) -> str:
        """Pick one closing line at random."""
        return random.choice(choices)

    def format_report(self, stats: HistoryStats) -> str:
        """Format every section followed by a flavor line."""
        blocks = [self.format_section(section) for section in self.build_sections(stats)]
        blocks.append(self.pick_flavor_text())
        return '\n\n'.join(blocks)
