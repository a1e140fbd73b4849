"""Combine a ranking record with static language metadata."""

from __future__ import annotations

from typing import Iterable, Optional

from domain import registry
from domain.models import LanguageDetail, LanguageRanking


def find_ranking(rankings: Iterable[LanguageRanking], name: str) -> Optional[LanguageRanking]:
    key = registry.normalize_name(name)
    for r in rankings:
        if registry.normalize_name(r.name) == key:
            return r
    return None


def enrich(name: str, ranking: Optional[LanguageRanking] = None) -> LanguageDetail:
    """Build a detail record; unknown names get a rank 0 placeholder and default metadata."""
    basis = ranking or LanguageRanking.placeholder(name)
    info = registry.lookup(name)
    return LanguageDetail(
        name=basis.name,
        rank=basis.rank,
        rating=basis.rating,
        description=info.description,
        use_cases=info.use_cases,
        frameworks=info.frameworks,
    )
