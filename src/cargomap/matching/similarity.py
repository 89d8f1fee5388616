"""Name similarity between a raw header and a field's known variants."""

from __future__ import annotations

from collections.abc import Iterable

from cargomap.catalog.field_catalog import DEFAULT_CATALOG, FieldCatalog
from cargomap.core.types import Header, Score
from cargomap.matching.normalizer import normalize, normalize_words
from cargomap.models.fields import FieldId

EXACT_SCORE = 1.0
CONTAINMENT_SCORE = 0.90
DEFAULT_MIN_CONTAINMENT = 4


def levenshtein(a: str, b: str) -> int:
    """Classic edit distance (insert, delete, substitute; cost 1 each).

    Two-row dynamic programming table, O(len(a) * len(b)) time.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current[j] = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution
            )
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> Score:
    """Normalized Levenshtein similarity of two already-normalized strings."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 0.0
    return max(0.0, 1.0 - levenshtein(a, b) / longest)


def score_variants(
    header: Header,
    variants: Iterable[str],
    min_containment: int = DEFAULT_MIN_CONTAINMENT,
) -> Score:
    """Best score of a header against a list of variants.

    Exact normalized match scores 1.0 and short-circuits. Containment either
    way scores 0.90 when the shorter side has at least ``min_containment``
    characters, or when the variant is a whole word of the header. Otherwise
    normalized Levenshtein similarity.
    """
    h = normalize(header)
    words = set(normalize_words(header).split())
    best = 0.0
    for variant in variants:
        v = normalize(variant)
        if h == v:
            return EXACT_SCORE
        # short variants ("ci", "id", "ruc") only contain as whole words, so "ci"
        # never matches inside "direccion"
        long_enough = min(len(h), len(v)) >= min_containment
        if (long_enough and (v in h or h in v)) or (v and v in words):
            best = max(best, CONTAINMENT_SCORE)
            continue
        best = max(best, similarity(h, v))
    return best


def score_name(
    header: Header,
    field: FieldId,
    catalog: FieldCatalog = DEFAULT_CATALOG,
    min_containment: int = DEFAULT_MIN_CONTAINMENT,
) -> Score:
    return score_variants(header, catalog.variants_for(field), min_containment)
