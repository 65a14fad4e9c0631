"""
Trimester to Online Course Day Mapper
=====================================

Maps a day of a fixed-length trimester onto the matching class day of a
fixed-length online course, keeping the same relative position in time.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────────────────┐      ┌─────────────────────────────────┐  │
│  │        dates             │      │          DateMapper             │  │
│  │ (parse, format, weekdays)│ ───▶ │  (proportional day mapping)     │  │
│  └──────────────────────────┘      └─────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns MappingResult
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│           (UI only - can be swapped without touching algorithm)         │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │                    TerminalDisplay                               │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     CourseDayAdvisor                                     │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

coursemap/
├── __init__.py          # This file - main exports
├── config.py            # Period lengths, messages, environment settings
├── errors.py            # InvalidFormat, InvalidRange, MissingInput, PeriodOutOfRange
├── logger.py            # loguru setup
├── dates.py             # Date parsing, formatting, weekday ranges
├── advisor.py           # CourseDayAdvisor orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── period.py        # Period, PeriodKind, CalendarDate
│   └── result.py        # MappingResult
│
├── engines/
│   └── mapper.py        # DateMapper, calculate_corresponding_date
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from datetime import date
    from coursemap import DateMapper

    mapper = DateMapper()   # 12-week trimester, 20-week course by default
    result = mapper.map_date(date(2024, 1, 8), date(2024, 2, 1), date(2024, 2, 14))
    print(result.course_date)

Running from command line:

    python -m coursemap --trimester-start 2024-01-08 --course-start 2024-02-01

"""

# Version
__version__ = "1.0.0"

# Main exports
from .advisor import CourseDayAdvisor, default_target_date
from .cli import main

# Date primitives
from .dates import (
    calculate_end_date,
    format_date,
    get_weekdays_between,
    iter_weekdays_between,
    parse_date,
)

# Engine exports
from .engines import (
    DateMapper,
    calculate_corresponding_date,
    round_half_up,
    validate_dates,
)

# Model exports
from .models import CalendarDate, MappingResult, Period, PeriodKind

# Error exports
from .errors import CourseMapError, InvalidFormat, InvalidRange, MissingInput, PeriodOutOfRange

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    TRIMESTER_WEEKS,
    COURSE_WEEKS,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "CourseDayAdvisor",
    "default_target_date",
    "main",
    # Dates
    "calculate_end_date",
    "format_date",
    "get_weekdays_between",
    "iter_weekdays_between",
    "parse_date",
    # Engines
    "DateMapper",
    "calculate_corresponding_date",
    "round_half_up",
    "validate_dates",
    # Models
    "CalendarDate",
    "MappingResult",
    "Period",
    "PeriodKind",
    # Errors
    "CourseMapError",
    "InvalidFormat",
    "InvalidRange",
    "MissingInput",
    "PeriodOutOfRange",
    # UI
    "TerminalDisplay",
    # Config
    "TRIMESTER_WEEKS",
    "COURSE_WEEKS",
    "Settings",
    "get_settings",
    "reset_settings",
]
