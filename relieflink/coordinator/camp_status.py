"""Coordinator dashboard statistics.

``summarize`` rolls registrations, camp stock and the dispatch log up into
the headline counters and the per-camp tiles.  ``camp_freshness`` colours a
tile by how long ago its kiosk last registered anyone:

  fresh        last registration under 30 minutes ago
  aging        under 60 minutes
  stale        60 minutes or more
  unreported   no registration yet
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from relieflink.coordinator.camps import Camp, DispatchEntry
from relieflink.core.constants import AGING_CAMP_MINUTES, FRESH_CAMP_MINUTES
from relieflink.registrations.records import RegistrantRecord

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Output dataclasses
# ---------------------------------------------------------------------------

@dataclass
class CampStats:
    """Per-camp tile on the coordinator dashboard."""

    count: int = 0
    last_time: str | None = None
    medical_emergencies: int = 0
    food_remaining: int | None = None
    water_remaining: int | None = None
    medicine_remaining: int | None = None
    active_rescue: int = 0
    active_medical: int = 0

    def as_dict(self) -> dict:
        return {
            "count": self.count,
            "lastTime": self.last_time,
            "medicalEmergencies": self.medical_emergencies,
            "foodRemaining": self.food_remaining,
            "waterRemaining": self.water_remaining,
            "medicineRemaining": self.medicine_remaining,
            "activeRescue": self.active_rescue,
            "activeMedical": self.active_medical,
        }


@dataclass
class DashboardStats:
    """Headline counters plus the per-camp tiles."""

    total_survivors: int = 0
    total_registrations: int = 0
    trapped_count: int = 0
    medical_count: int = 0
    active_camps: int = 0
    camp_stats: dict[str, CampStats] = field(default_factory=dict)

    def as_dict(self) -> dict:
        return {
            "totalSurvivors": self.total_survivors,
            "totalRegistrations": self.total_registrations,
            "trappedCount": self.trapped_count,
            "medicalCount": self.medical_count,
            "activeCamps": self.active_camps,
            "campStats": {name: s.as_dict() for name, s in self.camp_stats.items()},
        }


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

def summarize(
    records: Iterable[RegistrantRecord],
    camps: Iterable[Camp] = (),
    dispatches: Iterable[DispatchEntry] = (),
) -> DashboardStats:
    """Aggregate registrations, camp stock and active dispatches.

    Camps that only appear in *camps* or *dispatches* get a tile with zero
    registrations and do not count towards ``active_camps``.
    """
    stats = DashboardStats()
    tiles = stats.camp_stats

    for record in records:
        stats.total_registrations += 1
        stats.total_survivors += record.family_count
        if record.trapped:
            stats.trapped_count += 1
        if record.injured:
            stats.medical_count += 1

        tile = tiles.setdefault(record.camp, CampStats())
        tile.count += 1
        if record.injured:
            tile.medical_emergencies += 1
        # ISO-8601 strings from one clock order lexicographically
        if record.timestamp and (tile.last_time is None or record.timestamp > tile.last_time):
            tile.last_time = record.timestamp

    stats.active_camps = len(tiles)

    for camp in camps:
        tile = tiles.setdefault(camp.name, CampStats())
        tile.food_remaining = camp.remaining("food")
        tile.water_remaining = camp.remaining("water")
        tile.medicine_remaining = camp.remaining("medicine")

    for dispatch in dispatches:
        if not dispatch.is_active:
            continue
        tile = tiles.setdefault(dispatch.camp_name, CampStats())
        if dispatch.type == "rescue":
            tile.active_rescue += 1
        elif dispatch.type == "medical":
            tile.active_medical += 1

    logger.debug(
        "Dashboard summary: %d registrations across %d active camps",
        stats.total_registrations,
        stats.active_camps,
    )
    return stats


# ---------------------------------------------------------------------------
# Freshness
# ---------------------------------------------------------------------------

def _as_utc(value: str | datetime) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def camp_freshness(last_time: str | datetime | None, now: datetime | None = None) -> str:
    """Return ``fresh``, ``aging``, ``stale`` or ``unreported`` for a camp tile.

    Naive datetimes are taken as UTC.

    Raises
    ------
    ValueError
        If *last_time* is a non-empty string that is not ISO 8601.
    """
    if last_time is None or (isinstance(last_time, str) and not last_time.strip()):
        return "unreported"

    now_utc = _as_utc(now or datetime.now(timezone.utc))
    minutes = (now_utc - _as_utc(last_time)).total_seconds() / 60
    if minutes < FRESH_CAMP_MINUTES:
        return "fresh"
    if minutes < AGING_CAMP_MINUTES:
        return "aging"
    return "stale"
