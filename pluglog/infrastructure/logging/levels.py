"""
pluglog Level Ordering Policy

Total order over severity levels plus the helpers the dispatcher and the
transports use to resolve caller-supplied level values.
"""

from typing import Any, Iterable, Optional, Tuple

from pluglog.models.exceptions import InvalidLogLevelError
from pluglog.models.interfaces import LogLevel


LEVEL_ORDER: Tuple[LogLevel, ...] = (
    LogLevel.TRACE,
    LogLevel.DEBUG,
    LogLevel.INFO,
    LogLevel.WARN,
    LogLevel.ERROR,
    LogLevel.FATAL,
)

# Levels that third-party backends can express natively
ADAPTER_LEVELS: Tuple[LogLevel, ...] = (
    LogLevel.DEBUG,
    LogLevel.INFO,
    LogLevel.WARN,
    LogLevel.ERROR,
    LogLevel.FATAL,
)

# Rank given to values outside LEVEL_ORDER by the lenient helpers
UNRANKED = -1

_RANKS = {level: index for index, level in enumerate(LEVEL_ORDER)}


def to_level(value: Any) -> Optional[LogLevel]:
    """
    Resolve a level member or level name to a LogLevel.

    Args:
        value: LogLevel member or string such as "info" or "WARN"

    Returns:
        Matching LogLevel, or None when the value is not a known level
    """
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, str):
        try:
            return LogLevel(value.strip().lower())
        except ValueError:
            return None
    return None


def rank(level: Any) -> int:
    """
    Position of a level in LEVEL_ORDER.

    Raises:
        InvalidLogLevelError: If the value is not a known level
    """
    resolved = to_level(level)
    if resolved is None:
        raise InvalidLogLevelError(
            f"Unknown log level: {level!r}",
            context={"level": repr(level), "valid_levels": [l.value for l in LEVEL_ORDER]}
        )
    return _RANKS[resolved]


def is_enabled(candidate: Any, threshold: Any) -> bool:
    """True when ``candidate`` is at least as severe as ``threshold``."""
    return rank(candidate) >= rank(threshold)


def rank_or_unranked(level: Any) -> int:
    """Lenient rank: unknown values sort below every known level."""
    resolved = to_level(level)
    if resolved is None:
        return UNRANKED
    return _RANKS[resolved]


def coerce_level(
    value: Any,
    allowed: Iterable[LogLevel] = ADAPTER_LEVELS,
    default: LogLevel = LogLevel.INFO
) -> LogLevel:
    """
    Normalise a level for a backend with a restricted vocabulary.

    Args:
        value: Caller-supplied level
        allowed: Levels the backend accepts
        default: Level used for anything outside ``allowed``

    Returns:
        The resolved level if allowed, otherwise ``default``
    """
    resolved = to_level(value)
    if resolved is not None and resolved in tuple(allowed):
        return resolved
    return default
