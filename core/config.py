"""
Matcher Configuration Module
Settings shared by the normalizer, matcher and report builder.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatcherConfig:
    normalize_colors: bool = True
    lowercase_keywords: bool = True
    collapse_whitespace: bool = True
    diff_context_lines: int = 3
    indent: int = 2

    @classmethod
    def from_mapping(cls, options: Dict[str, Any]) -> 'MatcherConfig':
        """Build a config from a plain dict, ignoring keys that are not settings."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            logger.warning(f"Ignoring unknown matcher settings: {', '.join(unknown)}")
        return cls(**{k: v for k, v in options.items() if k in known})


DEFAULT_CONFIG = MatcherConfig()


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a basic handler for scripts that want to see matcher logs."""
    logging.basicConfig(level=level, format='%(asctime)s %(name)s %(levelname)s %(message)s')
