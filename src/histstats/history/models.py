"""Pydantic models for history statistics."""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional

class ResolvedCommand(BaseModel):
    """Command token and its first two arguments after env-prefix skipping."""
    command: Optional[bytes] = Field(None, description="Resolved command token")
    arg1: Optional[bytes] = Field(None, description="Token following the command")
    arg2: Optional[bytes] = Field(None, description="Second token following the command")

    class Config:
        """Pydantic model configuration."""
        frozen = True

class HistoryStats(BaseModel):
    """Frequency tables accumulated over one pass of the history file."""
    commands: Dict[str, int] = Field(default_factory=dict, description="Command name counts")
    man_pages: Dict[str, int] = Field(default_factory=dict, description="Manual page counts")
    git_subcommands: Dict[str, int] = Field(default_factory=dict, description="Git subcommand counts")

    class Config:
        """Pydantic model configuration."""
        validate_assignment = True
        frozen = False

    def increment(self, table: str, key: str) -> None:
        """Add one occurrence of key to the named table."""
        counts = getattr(self, table)
        counts[key] = counts.get(key, 0) + 1

    @property
    def total_commands(self) -> int:
        return sum(self.commands.values())

class RankedEntry(BaseModel):
    """One line of a ranked report."""
    count: int
    key: str

class ReportSection(BaseModel):
    """A titled top-N list built from one frequency table."""
    title: str = Field(..., description="Heading printed above the entries")
    entries: List[RankedEntry] = Field(default_factory=list)
    total: int = Field(0, description="Sum of all counts in the source table")

    @classmethod
    def from_table(cls, title: str, table: Dict[str, int], limit: int) -> "ReportSection":
        """Rank a table by count, ties broken by descending key."""
        ranked = sorted((count, key) for key, count in table.items())
        ranked.reverse()
        return cls(
            title=title,
            entries=[RankedEntry(count=count, key=key) for count, key in ranked[:limit]],
            total=sum(table.values()),
        )
