"""
Command-Line Interface for the Course Day Mapper.

Answers "I'm on this day of my trimester; which day of my online course
should I be working on?"

Any start date not given as a flag is asked for interactively. The target
date defaults to today.

    python -m coursemap --trimester-start 2024-01-08 --course-start 2024-02-01
    python -m coursemap --trimester-start 2024-01-08 --course-start 2024-02-01 \\
        --target 2024-03-01 --json
"""

import argparse
import json
import sys
from typing import Optional

from loguru import logger

from .advisor import CourseDayAdvisor, default_target_date
from .config import VALID_LOG_LEVELS, get_settings
from .engines import DateMapper
from .errors import CourseMapError
from .logger import setup_logger
from .ui import TerminalDisplay


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coursemap",
        description="Map a trimester date to the matching online course day.",
    )
    parser.add_argument("--trimester-start", help="First day of the trimester (YYYY-MM-DD)")
    parser.add_argument("--course-start", help="First day of the online course (YYYY-MM-DD)")
    parser.add_argument("--target", help="Trimester date to map (YYYY-MM-DD, default: today)")
    parser.add_argument("--trimester-weeks", type=int, help="Trimester length in weeks")
    parser.add_argument("--course-weeks", type=int, help="Online course length in weeks")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--log-level", type=str.upper, choices=sorted(VALID_LOG_LEVELS),
                        help="Log level (overrides COURSEMAP_LOG_LEVEL)")
    return parser


def _prompt(label: str, default: Optional[str] = None) -> str:
    """
    Ask for a date on stdin.

    Returns the default (or an empty string) when stdin is closed, so the
    advisor reports the missing field instead of the CLI crashing.
    """
    suffix = f" [{default}]" if default else ""
    try:
        answer = input(f"  {label}{suffix}: ").strip()
    except EOFError:
        return default or ""
    return answer or (default or "")


def main(argv: Optional[list] = None) -> int:
    """
    Run the mapper from the command line.

    Returns:
        0 when a date was mapped, 1 when an error was reported, 2 for bad
        week-length options or settings
    """
    args = build_parser().parse_args(argv)
    try:
        # pydantic.ValidationError is a ValueError too
        settings = get_settings()
        mapper = DateMapper(trimester_weeks=args.trimester_weeks, course_weeks=args.course_weeks)
    except ValueError as exc:
        print(f"coursemap: {exc}", file=sys.stderr)
        return 2

    setup_logger(level=args.log_level or settings.log_level, log_file=settings.log_file)

    logger.debug(f"Using {mapper!r}")

    trimester_start = args.trimester_start
    course_start = args.course_start
    target = args.target

    if trimester_start is None or course_start is None:
        print(f"\n{TerminalDisplay.BOLD}Enter your dates (YYYY-MM-DD):{TerminalDisplay.RESET}")
        if trimester_start is None:
            trimester_start = _prompt("Trimester start")
        if course_start is None:
            course_start = _prompt("Online course start")
        if target is None:
            target = _prompt("Trimester date to map", default_target_date())
    elif target is None:
        target = default_target_date()

    advisor = CourseDayAdvisor(mapper=mapper)

    if args.json:
        try:
            result = advisor.map_strings(trimester_start, course_start, target)
        except CourseMapError as exc:
            print(json.dumps({"error": exc.code, "message": advisor.message_for(exc)}))
            return 1
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    result = advisor.handle_submission(trimester_start, course_start, target)
    return 0 if result is not None else 1


if __name__ == "__main__":
    sys.exit(main())
