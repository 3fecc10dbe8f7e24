"""Rescue report clusterer.

Groups "trapped" reports whose descriptions share place vocabulary, so the
coordinator can send one team to reports that point at the same church,
bridge or valley road.

Algorithm
---------
1. Keep registrants with ``trapped`` set and a non-blank description.
2. Tokenize each description (see :func:`tokenize`).
3. Greedy single pass in input order.  Each unassigned report seeds a
   cluster whose vocabulary is its token set.  Every later unassigned
   report with at least two tokens in the vocabulary joins, and its
   tokens are added to the vocabulary, so one scan can chain
   A -> B -> C even when A and C share nothing.
4. Label each cluster with its four most frequent tokens.
5. Order clusters by size, largest first; equal sizes keep creation order.

The pass is order-dependent: the same reports in another order can group
differently, and re-clustering the flattened output can merge a chained
cluster with a report scanned before the chain formed.  Scan order and
tie-breaks are part of the dashboard's observable output.

Safety rule: report text is never logged.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from relieflink.core.constants import (
    LABEL_SEPARATOR,
    LABEL_TOKEN_COUNT,
    MIN_SHARED_TOKENS,
    MIN_TOKEN_LENGTH,
    STOPWORDS,
)
from relieflink.registrations.records import RegistrantRecord

logger = logging.getLogger(__name__)

_NON_LETTER = re.compile(r"[^a-z\s]")


# ---------------------------------------------------------------------------
# Output dataclass
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ReportCluster:
    """Trapped reports judged to describe nearby situations."""

    label: str
    reports: tuple[RegistrantRecord, ...] = field(default_factory=tuple)

    @property
    def count(self) -> int:
        return len(self.reports)

    def as_dict(self) -> dict:
        return {
            "label": self.label,
            "reports": [r.as_dict() for r in self.reports],
            "count": self.count,
        }


# ---------------------------------------------------------------------------
# Tokenization
# ---------------------------------------------------------------------------

def tokenize(text: str) -> list[str]:
    """Return the content words of a report description.

    Lowercases, strips everything outside ``a-z`` and whitespace, splits
    on whitespace, then drops tokens shorter than three letters and
    stopwords.  Order and repeats are preserved.
    """
    letters = _NON_LETTER.sub("", text.lower())
    return [
        token
        for token in letters.split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOPWORDS
    ]


def is_trapped_report(record: RegistrantRecord) -> bool:
    return record.trapped and bool(record.trapped_description.strip())


# ---------------------------------------------------------------------------
# Labelling
# ---------------------------------------------------------------------------

def cluster_label(token_lists: Iterable[list[str]]) -> str:
    """Join the most frequent tokens; ties go to the token seen first."""
    # dicts keep insertion order, and sorted() is stable
    freq: dict[str, int] = {}
    for tokens in token_lists:
        for token in tokens:
            freq[token] = freq.get(token, 0) + 1
    ranked = sorted(freq.items(), key=lambda item: item[1], reverse=True)
    return LABEL_SEPARATOR.join(token for token, _ in ranked[:LABEL_TOKEN_COUNT])


# ---------------------------------------------------------------------------
# Clustering
# ---------------------------------------------------------------------------

def cluster_trapped_reports(records: Iterable[RegistrantRecord]) -> list[ReportCluster]:
    """Group trapped reports that share vocabulary.

    Parameters
    ----------
    records:
        All current registrants.  Non-trapped registrants and trapped ones
        without a description are ignored.  Not modified.

    Returns
    -------
    list[ReportCluster]
        Largest cluster first; ``[]`` when nobody is reported trapped.
    """
    reports = [r for r in records if is_trapped_report(r)]
    if not reports:
        return []

    tokens = [tokenize(r.trapped_description) for r in reports]
    assigned = [False] * len(reports)
    clusters: list[ReportCluster] = []

    for i in range(len(reports)):
        if assigned[i]:
            continue
        assigned[i] = True
        members = [i]
        vocabulary = set(tokens[i])

        for j in range(i + 1, len(reports)):
            if assigned[j]:
                continue
            # Counted over the candidate's token list, repeats included
            shared = sum(1 for t in tokens[j] if t in vocabulary)
            if shared >= MIN_SHARED_TOKENS:
                assigned[j] = True
                members.append(j)
                vocabulary.update(tokens[j])

        clusters.append(
            ReportCluster(
                label=cluster_label(tokens[m] for m in members),
                reports=tuple(reports[m] for m in members),
            )
        )

    clusters.sort(key=lambda c: c.count, reverse=True)
    logger.debug(
        "Clustered %d trapped reports into %d clusters", len(reports), len(clusters)
    )
    return clusters
