"""Health score formula.

Score = 5.0 base + license tier + recency tier + popularity tier, clamped to
[0, 10] and rounded half-up to one decimal. Tiers are additive across
categories; within a category the first matching tier wins.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .models import UNKNOWN_LICENSE


BASE_SCORE = 5.0
MIN_SCORE = 0.0
MAX_SCORE = 10.0

PERMISSIVE_LICENSES = frozenset({"MIT", "ISC", "BSD-3-Clause"})


def license_adjustment(license: str | None) -> float:
    if license in PERMISSIVE_LICENSES:
        return 2.0
    if license == "Apache-2.0":
        return 1.5
    if not license or license == UNKNOWN_LICENSE:
        return -1.0
    return 0.0


def recency_adjustment(days_since_release: float) -> float:
    if days_since_release < 30:
        return 2.0
    if days_since_release < 180:
        return 1.0
    if days_since_release > 365:
        return -1.0
    return 0.0


def popularity_adjustment(weekly_downloads: int) -> float:
    if weekly_downloads > 1_000_000:
        return 1.0
    if weekly_downloads > 100_000:
        return 0.5
    return 0.0


def clamp_score(score: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def round_score(score: float) -> float:
    return float(Decimal(str(score)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def compute_health_score(
    *,
    license: str | None,
    days_since_release: float,
    weekly_downloads: int,
) -> float:
    """Return the bounded, rounded health score for the given signals."""
    score = BASE_SCORE
    score += license_adjustment(license)
    score += recency_adjustment(days_since_release)
    score += popularity_adjustment(weekly_downloads)
    return round_score(clamp_score(score))
