"""Candidate scoring and filtering.

Scores are per-character occurrence counts: for every character of the query,
count how often it appears in the candidate and sum the counts. Matching is
case-sensitive and ignores character order.
"""

from __future__ import annotations

from collections.abc import Sequence


def score(query: str, candidate: str) -> int:
    """Return the multiplicity score of ``candidate`` for ``query``.

    Repeated query characters are counted independently, so ``"pp"`` scores
    ``"apple"`` as 4.
    """
    return sum(candidate.count(ch) for ch in query)


def filter_candidates(
    query: str,
    candidates: Sequence[str],
    best_match_first: bool = False,
) -> list[str]:
    """Return candidates matching ``query`` in display order.

    An empty query returns every candidate in original order. Otherwise
    candidates with a zero score are dropped and the rest are sorted by score,
    ascending unless ``best_match_first`` is set. The sort is stable, so equal
    scores keep their original relative order in both directions.
    """
    if not query:
        return list(candidates)

    scored: list[tuple[int, str]] = []
    for candidate in candidates:
        candidate_score = score(query, candidate)
        if candidate_score > 0:
            scored.append((candidate_score, candidate))

    if best_match_first:
        scored.sort(key=lambda item: -item[0])
    else:
        scored.sort(key=lambda item: item[0])
    return [candidate for _, candidate in scored]
