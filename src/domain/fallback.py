"""Built-in ranking snapshot served whenever live data is unavailable."""

from __future__ import annotations

from typing import List, Tuple

from domain.models import LanguageRanking

FALLBACK_RANKINGS: Tuple[LanguageRanking, ...] = (
    LanguageRanking(1, 1, "Python", "23.64%", "-0.21%"),
    LanguageRanking(2, 4, "C", "10.11%", "+1.01%"),
    LanguageRanking(3, 2, "C++", "8.95%", "-1.87%"),
    LanguageRanking(4, 3, "Java", "8.70%", "-1.02%"),
    LanguageRanking(5, 5, "C#", "7.26%", "+2.39%"),
    LanguageRanking(6, 6, "JavaScript", "2.96%", "-1.66%"),
    LanguageRanking(7, 9, "Visual Basic", "2.81%", "+0.85%"),
    LanguageRanking(8, 8, "SQL", "2.10%", "+0.11%"),
    LanguageRanking(9, 26, "Perl", "1.97%", "+1.33%"),
    LanguageRanking(10, 16, "R", "1.96%", "+0.91%"),
    LanguageRanking(11, 11, "Delphi/Object Pascal", "1.91%", "+0.48%"),
    LanguageRanking(12, 10, "Fortran", "1.60%", "-0.18%"),
    LanguageRanking(13, 15, "MATLAB", "1.52%", "+0.43%"),
    LanguageRanking(14, 24, "Ada", "1.49%", "+0.77%"),
    LanguageRanking(15, 7, "Go", "1.37%", "-0.80%"),
    LanguageRanking(16, 12, "PHP", "1.36%", "-0.03%"),
    LanguageRanking(17, 14, "Rust", "1.30%", "+0.01%"),
    LanguageRanking(18, 13, "Scratch", "1.11%", "-0.23%"),
    LanguageRanking(19, 17, "Assembly language", "1.04%", "-0.01%"),
    LanguageRanking(20, 23, "Kotlin", "0.92%", "+0.10%"),
)


def fallback_rankings() -> List[LanguageRanking]:
    """Return a fresh list so callers cannot alter the shared snapshot."""
    return list(FALLBACK_RANKINGS)
