"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the coursemap package.

To create a different UI (web, JSON API, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..dates import format_date
from ..models import MappingResult


class TerminalDisplay:
    """
    Pretty terminal output for mapping results.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR API RESPONSE:
       Skip the display entirely and return MappingResult.to_dict().

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        """Print an error message in red."""
        print(f"\n  {cls.RED}✗ {message}{cls.RESET}")

    @staticmethod
    def format_results(result: MappingResult) -> str:
        """
        Plain-text summary of a mapping, without colors.

        Useful for logs, emails or anywhere ANSI codes would be noise.
        """
        lines = []
        if result.trimester_start is not None:
            lines.append("Trimester Period:")
            lines.append(f"  Start: {format_date(result.trimester_start)} | End: {format_date(result.trimester_end)}")
        if result.course_start is not None:
            lines.append("Online Course Period:")
            lines.append(f"  Start: {format_date(result.course_start)} | End: {format_date(result.course_end)}")
        lines.append("On your trimester date, you should be at:")
        lines.append(f"  {format_date(result.course_date)}")
        lines.append("in your online course.")
        return "\n".join(lines)

    @classmethod
    def print_results(cls, result: MappingResult):
        """Print both periods and the mapped course date."""
        cls.print_header("TRIMESTER → ONLINE COURSE")

        if result.trimester_start is not None:
            cls.print_subheader("Trimester Period")
            print(f"  {cls.BOLD}Start:{cls.RESET} {format_date(result.trimester_start)}"
                  f"  |  {cls.BOLD}End:{cls.RESET} {format_date(result.trimester_end)}")

        if result.course_start is not None:
            cls.print_subheader("Online Course Period")
            print(f"  {cls.BOLD}Start:{cls.RESET} {format_date(result.course_start)}"
                  f"  |  {cls.BOLD}End:{cls.RESET} {format_date(result.course_end)}")

        cls.print_subheader("On your trimester date, you should be at")
        print(f"  {cls.BOLD}{cls.GREEN}{format_date(result.course_date)}{cls.RESET}")
        if result.course_day_count:
            print(f"  {cls.DIM}class day {result.course_index + 1} of {result.course_day_count}{cls.RESET}")
        print(f"  {cls.DIM}in your online course.{cls.RESET}")
