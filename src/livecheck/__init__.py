"""
livecheck - Find new upstream software versions.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config
from .strategy import MatchData, YamlStrategy
from .version import Version

__all__ = ["__version__", "Config", "MatchData", "Version", "YamlStrategy"]
