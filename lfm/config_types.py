"""Typed configuration dataclasses for label-fuzzy-matcher.

Provides strongly-typed configuration objects that can be used throughout
the application for better type safety and IDE support.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, Any

from .match.scoring import ScoringConfig, SearchPrecision


@dataclass
class MatchingConfig:
    """Ranking and suggestion behaviour (aligned with _DEFAULTS)."""
    precision: str = "low"  # none | low | regular
    max_results: int = 20
    suggest_typos: bool = True
    suggest_limit: int = 3
    suggest_cutoff: float = 70.0  # 0-100 rapidfuzz similarity

    @property
    def search_precision(self) -> SearchPrecision:
        return SearchPrecision.parse(self.precision)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for backward compatibility."""
        return asdict(self)


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "INFO"
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary.

        Returns:
            Nested dict structure matching config format
        """
        return {
            "log_level": self.log_level,
            "matching": self.matching.to_dict(),
            "scoring": asdict(self.scoring),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance

        Raises:
            ValueError: If the precision name or the scoring weights are invalid
        """
        matching = MatchingConfig(**data.get("matching", {}))
        matching.precision = matching.search_precision.value
        scoring = ScoringConfig(**data.get("scoring", {})).validate()
        return cls(
            log_level=data.get("log_level", "INFO"),
            matching=matching,
            scoring=scoring,
        )


__all__ = [
    "AppConfig",
    "MatchingConfig",
]
