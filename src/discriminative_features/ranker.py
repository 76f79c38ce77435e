"""Pairwise discriminativeness ranking of terms between two classes.

Each term in either class is scored with an additively smoothed
likelihood ratio::

    ratio(t) = (P_numerator(t) + EPSILON) / (P_denominator(t) + EPSILON)

Ratios above 1 mark terms characteristic of the numerator class, ratios
below 1 terms characteristic of the denominator class. ``EPSILON`` is
added only here, never to the stored smoothed models, so a term missing
from one class is counted as probability 0 before the floor applies.
"""

from __future__ import annotations

from collections.abc import Callable

from .models import FeatureRanking, FeatureScore, SmoothedModel

EPSILON = 0.0001


def feature_ratio(
    term_id: int,
    numerator: SmoothedModel,
    denominator: SmoothedModel,
    epsilon: float = EPSILON,
) -> float:
    """Smoothed likelihood ratio of one term."""
    return (numerator.probability(term_id) + epsilon) / (
        denominator.probability(term_id) + epsilon
    )


def rank_features(
    numerator: SmoothedModel,
    denominator: SmoothedModel,
    label_of: Callable[[int], str],
    epsilon: float = EPSILON,
    top: int | None = None,
) -> FeatureRanking:
    """Score every term of either model and order the results.

    Features are sorted by descending ratio; equal ratios are ordered by
    ascending term ID. The order depends only on the two models, so
    repeated runs over the same corpus produce identical rankings.

    Args:
        numerator: Smoothed model of the class of interest.
        denominator: Smoothed model of the class it is compared against.
        label_of: Resolves a term ID to its display label.
        epsilon: Additive floor applied to both probabilities.
        top: Keep only the first ``top`` features when given.

    Raises:
        UnknownTermError: If ``label_of`` does not know a term ID.
    """
    terms = set(numerator.probabilities) | set(denominator.probabilities)
    scored = sorted(
        ((feature_ratio(t, numerator, denominator, epsilon), t) for t in terms),
        key=lambda pair: (-pair[0], pair[1]),
    )
    if top is not None:
        scored = scored[:top]

    return FeatureRanking(
        numerator=numerator.label,
        denominator=denominator.label,
        features=[FeatureScore(term_id=t, ratio=r, label=label_of(t)) for r, t in scored],
    )
