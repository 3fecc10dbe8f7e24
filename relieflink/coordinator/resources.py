"""Camp stock allocation and cross-camp rebalancing suggestions.

Two pieces of dashboard bookkeeping live here:

* :func:`allocated_resources`: which stock counters a new registration
  draws down.  A need counts toward ``food``, ``water`` or ``medicine``
  when its upper-cased text contains that word, so ``"OTHER: baby food"``
  draws food.  Each counter moves at most once per registration.
* :func:`rebalancing_suggestions`: for every need, pair the camps that
  have registrants but no request for it with the camp that has the most
  requests.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from relieflink.coordinator.camps import Camp
from relieflink.core.constants import REBALANCED_NEEDS, STOCKED_RESOURCES
from relieflink.registrations.records import RegistrantRecord


@dataclass(frozen=True)
class ResourceSuggestion:
    """Move *need* supplies from ``from_camp`` toward ``to_camp``."""

    need: str
    from_camp: str
    to_camp: str
    count: int

    def as_dict(self) -> dict:
        return {"need": self.need, "from": self.from_camp, "to": self.to_camp, "count": self.count}


def allocated_resources(needs: Iterable[str]) -> list[str]:
    """Return the stock counters a registration with *needs* draws down."""
    upper = [n.upper() for n in needs]
    return [
        resource
        for resource in STOCKED_RESOURCES
        if any(resource.upper() in need for need in upper)
    ]


def _camp_names(camps: Iterable[Camp | str]) -> list[str]:
    return [c if isinstance(c, str) else c.name for c in camps]


def needs_by_camp(
    records: Iterable[RegistrantRecord],
    camps: Iterable[Camp | str],
) -> dict[str, dict[str, int]]:
    """Count requested needs per camp.

    Only camps listed in *camps* are tallied; registrations at other camps
    are skipped.  Every camp starts with a zero count for each rebalanced
    need, and other needs (``"OTHER: ..."``) are counted as written.
    """
    tally: dict[str, dict[str, int]] = {
        name: {need: 0 for need in REBALANCED_NEEDS} for name in _camp_names(camps)
    }
    for record in records:
        camp_tally = tally.get(record.camp)
        if camp_tally is None:
            continue
        for need in record.needs:
            camp_tally[need] = camp_tally.get(need, 0) + 1
    return tally


def rebalancing_suggestions(
    records: Sequence[RegistrantRecord],
    camps: Iterable[Camp | str],
) -> list[ResourceSuggestion]:
    """Suggest transfers toward the camp with the most requests per need.

    For each need in ``FOOD, WATER, MEDICINE, SHELTER``:

    * *requesting* camps have at least one request for the need;
    * *idle* camps have registrants but no request for it.

    When both exist, every idle camp is paired with the requesting camp
    holding the most requests (ties go to the earlier camp in *camps*).
    """
    names = _camp_names(camps)
    tally = needs_by_camp(records, names)
    registered = {r.camp for r in records}

    suggestions: list[ResourceSuggestion] = []
    for need in REBALANCED_NEEDS:
        requesting = [c for c in names if tally[c][need] > 0]
        idle = [c for c in names if tally[c][need] == 0 and c in registered]
        if not requesting or not idle:
            continue
        heaviest = max(requesting, key=lambda c: tally[c][need])
        for camp in idle:
            suggestions.append(
                ResourceSuggestion(need=need, from_camp=camp, to_camp=heaviest, count=tally[heaviest][need])
            )
    return suggestions
