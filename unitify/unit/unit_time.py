"""Time unit definitions.

This module provides time-based units including seconds, minutes, and hours.
All time units are based on the Second class as the base unit, with a
constant factor converting each of them into seconds.

Classes:
    Second: Base time unit in seconds.
    Minute: Time unit representing 60 seconds.
    Hour: Time unit representing 3600 seconds (1 hour).

Type Aliases:
    Time: Union type for all time units (Second | Minute | Hour).

Example:
    >>> Hour().to_base(2.5)  # 9000.0 (seconds)
    >>> Minute().to_base(30)  # 1800.0 (seconds)
"""

from __future__ import annotations

from .unit_base import Dimension
from .unit_simple import SimpleUnit


class Second(SimpleUnit):
    """Time unit: Second (base unit of the Time family).

    The Second class represents time durations in seconds. All other time
    units (Minute, Hour) are derived from this class and convert to seconds
    for base-form arithmetic.

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root time unit.
        SCALE_TO_BASE (float): 1.0, no conversion needed for the base unit.
        SYMBOL (str): "s", the standard symbol for seconds.
    """

    IS_FAMILY_ROOT = True
    DIMENSION = Dimension.TIME
    SCALE_TO_BASE = 1.0
    SYMBOL = "s"
    ALIASES = ("seconds",)


class Minute(Second):
    """Time unit: Minute (60 seconds).

    Attributes:
        SCALE_TO_BASE (float): 60.0, conversion factor from minutes to seconds.
        SYMBOL (str): "min", the standard symbol for minutes.
    """

    SCALE_TO_BASE = 60.0
    SYMBOL = "min"
    ALIASES = ("minutes",)


class Hour(Second):
    """Time unit: Hour (3600 seconds).

    Attributes:
        SCALE_TO_BASE (float): 3600.0, conversion factor from hours to seconds.
        SYMBOL (str): "hr", the symbol used for hours in expression files.
    """

    SCALE_TO_BASE = 3600.0
    SYMBOL = "hr"
    ALIASES = ("hours",)


Time = Second | Minute | Hour  # Type alias for any time unit
