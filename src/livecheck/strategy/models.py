"""
Result models for strategy lookups.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..version import Version


@dataclass(slots=True)
class MatchData:
    """
    Versions found by a strategy for one URL.

    ``cached`` is None unless the content came from a fetcher or was handed
    in pre-fetched. ``to_dict`` leaves the key out entirely in that case.
    """

    url: str
    regex: Optional["re.Pattern[str]"] = None
    matches: Dict[str, Version] = field(default_factory=dict)
    cached: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"matches": dict(self.matches), "regex": self.regex, "url": self.url}
        if self.cached:
            data["cached"] = True
        return data

    @property
    def versions(self) -> list[Version]:
        return list(self.matches.values())

    def latest(self) -> Optional[Version]:
        """Return the highest version found, or None when there are no matches."""
        return max(self.matches.values(), default=None)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, MatchData):
            return self.to_dict() == other.to_dict()
        if isinstance(other, dict):
            return self.to_dict() == other
        return NotImplemented
