"""Family search: rank registrants against a name and optional village.

Scoring ladder (additive; a record may collect several bonuses):
  +100   query name and registrant name contain one another
  +50    whole-name edit distance 0  (+35 at 1, +20 at 2)
  +30    per (query token, name token) pair that contain one another
  +20    per remaining token pair within edit distance 2
  +40    villages contain one another (only when both are given)
  +20    otherwise, villages within edit distance 2

Every rule that adds points also marks the record as a match, so a record
is returned exactly when its score is positive.  Results are ordered by
score, highest first; equal scores keep the input order.

A blank query name is a caller error.  It returns ``[]`` rather than
raising, so the serving layer can reject it with a 400 before calling in.

Safety rule: raw names and villages are never logged.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from relieflink.core.constants import (
    FULL_NAME_BASE_SCORE,
    FULL_NAME_DISTANCE_PENALTY,
    MAX_EDIT_DISTANCE,
    SUBSTRING_MATCH_SCORE,
    TOKEN_CONTAINMENT_SCORE,
    TOKEN_FUZZY_SCORE,
    VILLAGE_CONTAINMENT_SCORE,
    VILLAGE_FUZZY_SCORE,
)
from relieflink.matching.fuzzy import contains_either, is_near, levenshtein
from relieflink.registrations.records import MatchResult, RegistrantRecord

logger = logging.getLogger(__name__)


def _normalize(value: str) -> str:
    return value.lower().strip()


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def score_name(query_name: str, name: str) -> tuple[bool, int]:
    """Return ``(matched, score)`` for two already-normalized names."""
    score = 0
    matched = False

    # --- Substring containment (+100) ---
    if contains_either(query_name, name):
        score += SUBSTRING_MATCH_SCORE
        matched = True

    # --- Whole-name edit distance (+50 / +35 / +20) ---
    distance = levenshtein(query_name, name)
    if distance < MAX_EDIT_DISTANCE:
        score += FULL_NAME_BASE_SCORE - distance * FULL_NAME_DISTANCE_PENALTY
        matched = True

    # --- Token pairs (+30 / +20 each) ---
    for query_token in query_name.split():
        for name_token in name.split():
            if contains_either(query_token, name_token):
                score += TOKEN_CONTAINMENT_SCORE
                matched = True
            elif is_near(query_token, name_token, MAX_EDIT_DISTANCE):
                score += TOKEN_FUZZY_SCORE
                matched = True

    return matched, score


def score_village(query_village: str, village: str) -> tuple[bool, int]:
    """Return ``(matched, score)`` for two already-normalized villages.

    Either side empty means no village signal: ``(False, 0)``.
    """
    if not query_village or not village:
        return False, 0
    if contains_either(query_village, village):
        return True, VILLAGE_CONTAINMENT_SCORE
    if is_near(query_village, village, MAX_EDIT_DISTANCE):
        return True, VILLAGE_FUZZY_SCORE
    return False, 0


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

def search_registrations(
    records: Iterable[RegistrantRecord],
    query_name: str,
    query_village: str = "",
) -> list[MatchResult]:
    """Return registrants matching *query_name* (and *query_village*), best first.

    Parameters
    ----------
    records:
        Registrants to search.  Not modified.
    query_name:
        Name typed by the family member.  Case and surrounding whitespace
        are ignored.  Blank returns ``[]``.
    query_village:
        Optional village; adds a bonus when both sides name one.

    Returns
    -------
    list[MatchResult]
        New ``MatchResult`` objects sorted by descending score, ties in
        input order.
    """
    name_q = _normalize(query_name)
    if not name_q:
        logger.debug("Family search called with a blank name; returning no results")
        return []
    village_q = _normalize(query_village or "")

    results: list[MatchResult] = []
    scanned = 0
    for record in records:
        scanned += 1
        name_matched, score = score_name(name_q, _normalize(record.name))
        village_matched, village_score = score_village(village_q, _normalize(record.village))
        if name_matched or village_matched:
            results.append(MatchResult.from_record(record, score + village_score))

    # list.sort is stable: equal scores keep input order
    results.sort(key=lambda r: r.score, reverse=True)
    logger.debug(
        "Family search scanned %d registrations, %d matched (village filter: %s)",
        scanned,
        len(results),
        bool(village_q),
    )
    return results
