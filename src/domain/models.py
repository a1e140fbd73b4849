"""Domain models for the language ranking service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from config import settings


@dataclass(frozen=True, slots=True)
class LanguageRanking:
    rank: int
    prev_rank: int
    name: str
    rating: str
    change: str = settings.MISSING_VALUE

    @classmethod
    def placeholder(cls, name: str) -> "LanguageRanking":
        """Stand-in used when a requested language is not in the ranking list."""
        return cls(
            rank=0,
            prev_rank=0,
            name=name,
            rating=settings.MISSING_VALUE,
            change=settings.MISSING_VALUE,
        )

    def to_dict(self) -> dict:
        return {
            "rank": self.rank,
            "prev_rank": self.prev_rank,
            "name": self.name,
            "rating": self.rating,
            "change": self.change,
        }


@dataclass(frozen=True, slots=True)
class DateSelector:
    """Requested (year, month) period. Missing fields mean "current"."""

    year: Optional[int] = None
    month: Optional[int] = None

    def __post_init__(self) -> None:
        if self.month is not None and not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")

    @classmethod
    def current(cls) -> "DateSelector":
        return cls()

    @property
    def is_complete(self) -> bool:
        return self.year is not None and self.month is not None

    @property
    def is_partial(self) -> bool:
        return not self.is_complete and (self.year is not None or self.month is not None)


@dataclass(frozen=True, slots=True)
class LanguageInfo:
    description: str
    use_cases: Tuple[str, ...]
    frameworks: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class LanguageDetail:
    name: str
    rank: int
    rating: str
    description: str
    use_cases: Tuple[str, ...] = ()
    frameworks: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "rank": self.rank,
            "rating": self.rating,
            "description": self.description,
            "use_cases": list(self.use_cases),
            "frameworks": list(self.frameworks),
        }
