"""Outcome values for fetching and resolving a ranking list.

Failures are plain values rather than exceptions so the caller decides which
categories to surface:

 - ``FutureDateRejected``: the requested (year, month) lies after the current UTC month.
 - ``NetworkFailure``: transport error, timeout or non-success status.
 - ``ParseEmpty``: the page was retrieved but no ranking rows could be extracted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Union

from domain.models import LanguageRanking


@dataclass(frozen=True, slots=True)
class RawDocument:
    url: str
    text: str
    is_failure = False


@dataclass(frozen=True, slots=True)
class Rankings:
    url: str
    items: List[LanguageRanking] = field(default_factory=list)
    is_failure = False


@dataclass(frozen=True, slots=True)
class FutureDateRejected:
    year: int
    month: int
    today: date
    is_failure = True

    @property
    def reason(self) -> str:
        return (
            f"{self.year}-{self.month:02d} is later than the current period "
            f"{self.today.year}-{self.today.month:02d}"
        )


@dataclass(frozen=True, slots=True)
class NetworkFailure:
    url: str
    message: str
    is_failure = True

    @property
    def reason(self) -> str:
        return f"could not retrieve {self.url}: {self.message}"


@dataclass(frozen=True, slots=True)
class ParseEmpty:
    url: str
    is_failure = True

    @property
    def reason(self) -> str:
        return f"no ranking rows found at {self.url}"


FetchOutcome = Union[RawDocument, FutureDateRejected, NetworkFailure]
RankingOutcome = Union[Rankings, FutureDateRejected, NetworkFailure, ParseEmpty]
