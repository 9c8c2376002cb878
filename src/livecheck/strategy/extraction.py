"""
Invocation of user-supplied extraction routines.

A routine receives the parsed YAML value and, when it declares a second
positional parameter, the matching pattern. Whatever it returns is normalized
into an ordered list of unique, non-blank version strings.

Routines can be plain callables, in which case the arity is read from the
signature, or wrapped explicitly in ``SingleArgExtractor`` /
``PatternAwareExtractor``.
"""

from __future__ import annotations

import inspect
import re
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, List, Optional, Tuple, Union

import structlog

from .errors import ArityError, InvalidReturnTypeError
from .tree import is_blank

logger = structlog.get_logger(__name__)

_POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


# --- Routine shapes ---


@dataclass(frozen=True, slots=True)
class SingleArgExtractor:
    """Routine that only looks at the parsed value."""

    func: Callable[[Any], Any]
    arity: ClassVar[int] = 1

    def __call__(self, parsed: Any) -> Any:
        return self.func(parsed)


@dataclass(frozen=True, slots=True)
class PatternAwareExtractor:
    """Routine that receives the parsed value and the matching pattern."""

    func: Callable[[Any, "re.Pattern[str]"], Any]
    arity: ClassVar[int] = 2

    def __call__(self, parsed: Any, pattern: "re.Pattern[str]") -> Any:
        return self.func(parsed, pattern)

    def bind(self, pattern: "re.Pattern[str]") -> SingleArgExtractor:
        """Fix the pattern up front, producing a single-argument routine."""
        if pattern is None:
            raise ArityError()
        return SingleArgExtractor(lambda parsed: self.func(parsed, pattern))


Routine = Union[SingleArgExtractor, PatternAwareExtractor, Callable[..., Any]]


def routine_arity(routine: Routine) -> Tuple[int, bool]:
    """
    Return ``(arity, pattern_required)`` for a routine.

    The arity is capped at 2. ``pattern_required`` is False when the second
    positional parameter has a default value. A routine that only takes
    ``*args`` counts as single-argument, as do callables whose signature
    cannot be inspected.
    """
    if isinstance(routine, (SingleArgExtractor, PatternAwareExtractor)):
        return routine.arity, routine.arity == 2

    try:
        sig = inspect.signature(routine)
    except (ValueError, TypeError):
        return 1, False

    positional = [p for p in sig.parameters.values() if p.kind in _POSITIONAL_KINDS]
    if not positional and any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in sig.parameters.values()):
        return 1, False
    if len(positional) < 2:
        return len(positional), False
    return 2, positional[1].default is inspect.Parameter.empty


# --- Raw result sum type ---


@dataclass(frozen=True, slots=True)
class Empty:
    """The routine returned nothing."""

    def strings(self) -> List[str]:
        return []


@dataclass(frozen=True, slots=True)
class Single:
    """The routine returned one string."""

    value: str

    def strings(self) -> List[str]:
        return [self.value]


@dataclass(frozen=True, slots=True)
class Many:
    """The routine returned a list of strings."""

    values: Tuple[str, ...]

    def strings(self) -> List[str]:
        return list(self.values)


RawResult = Union[Empty, Single, Many]


def to_raw_result(value: Any) -> RawResult:
    """
    Classify a routine's return value.

    ``None`` items inside a list are dropped. Anything other than None, a
    string or a list/tuple of strings raises ``InvalidReturnTypeError``.
    """
    if value is None:
        return Empty()
    if isinstance(value, str):
        return Single(value)
    if isinstance(value, (list, tuple)):
        items = tuple(item for item in value if item is not None)
        if all(isinstance(item, str) for item in items):
            return Many(items)
    raise InvalidReturnTypeError()


def normalize_versions(raw: RawResult) -> List[str]:
    """Drop blank strings and duplicates, keeping first-seen order."""
    seen: dict[str, None] = {}
    for item in raw.strings():
        if item.strip():
            seen.setdefault(item, None)
    return list(seen)


# --- Invoker ---


def extract(parsed: Any, pattern: Optional["re.Pattern[str]"], routine: Routine) -> List[str]:
    """
    Run ``routine`` against a parsed value and return the version strings it found.

    Args:
        parsed: Parsed YAML value
        pattern: Optional matching pattern, passed on to two-argument routines
        routine: Extraction routine

    Returns:
        Ordered list of unique, non-blank version strings

    Raises:
        ArityError: If the routine requires a pattern and none was given
        InvalidReturnTypeError: If the routine returned an unsupported value
    """
    if is_blank(parsed):
        return []

    arity, pattern_required = routine_arity(routine)
    if arity == 2 and pattern is None:
        if pattern_required:
            raise ArityError()
        value = routine(parsed)
    elif arity == 2:
        value = routine(parsed, pattern)
    elif arity == 0:
        value = routine()
    else:
        value = routine(parsed)

    versions = normalize_versions(to_raw_result(value))
    logger.debug("Extraction routine finished", arity=arity, versions=len(versions))
    return versions
