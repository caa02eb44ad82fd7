"""Map a TokenProfile to a discrete risk tier.

Rugcheck scores run 0-10000, lower is safer. A rugged token is always HIGH.
When no Rugcheck report was available the score defaults to 0 and the tier
comes out CLEAN: that means "no risk data", not "verified safe".
"""

from enum import Enum

from src.parsers.token_profile import TokenProfile


class RiskTier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    CLEAN = "clean"


# (min score inclusive, tier), checked top-down
SCORE_TIERS: tuple[tuple[int, RiskTier], ...] = (
    (5000, RiskTier.HIGH),
    (2000, RiskTier.MEDIUM),
    (500, RiskTier.LOW),
)


def classify(profile: TokenProfile) -> RiskTier:
    if profile.rugged:
        return RiskTier.HIGH

    for min_score, tier in SCORE_TIERS:
        if profile.risk_score >= min_score:
            return tier
    return RiskTier.CLEAN
