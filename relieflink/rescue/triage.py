"""Medical emergency list shown next to the rescue clusters."""
from __future__ import annotations

from collections.abc import Iterable

from relieflink.registrations.records import RegistrantRecord


def medical_emergencies(records: Iterable[RegistrantRecord]) -> list[RegistrantRecord]:
    """Return injured registrants who described the injury, in input order."""
    return [r for r in records if r.injured and r.injury_description.strip()]
