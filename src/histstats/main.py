"""Main entry point for histstats."""

import sys
from .utils.logger import get_logger
from .utils.formatter import ReportFormatter
from .history.classifier import load_stats

# Initialize logger
logger = get_logger(__name__)

def run(path=None, extended=True):
    """Read the history file and return the formatted report."""
    stats = load_stats(path, extended=extended)
    logger.info(f"Counted {stats.total_commands} commands")
    return ReportFormatter(extended=extended).format_report(stats)

def main():
    """Main entry point."""
    print(run())
    return 0

if __name__ == "__main__":
    sys.exit(main())
