"""Camps, their stock, and rescue / medical dispatch capacity.

Each camp runs a fixed number of rescue and medical teams.  A new dispatch
is ``"Dispatched"`` while the camp still has a free team of that type and
``"Waiting for People"`` once every team is out.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from typing import Any

from relieflink.core.constants import (
    DEFAULT_RESOURCE_STOCK,
    DEFAULT_TEAM_SIZE,
    DISPATCH_ACTIVE,
    DISPATCH_TYPES,
    DISPATCH_WAITING,
    STOCKED_RESOURCES,
)

_STOCK_COLUMNS = tuple(
    f"{resource}_{part}" for resource in STOCKED_RESOURCES for part in ("total", "allocated")
)


@dataclass(frozen=True)
class Camp:
    """A relief camp with its team counts and stock levels."""

    name: str
    medical_team_count: int = DEFAULT_TEAM_SIZE
    rescue_team_count: int = DEFAULT_TEAM_SIZE
    food_total: int = DEFAULT_RESOURCE_STOCK
    food_allocated: int = 0
    water_total: int = DEFAULT_RESOURCE_STOCK
    water_allocated: int = 0
    medicine_total: int = DEFAULT_RESOURCE_STOCK
    medicine_allocated: int = 0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Camp:
        """Build a camp from a joined camps + camp_resources row.

        Unknown columns (``id``, ``camp_id``) are ignored.  NULL stock
        columns come from a camp without a resources row and read as 0, so
        such a camp reports nothing remaining.  Absent columns keep the
        defaults.
        """
        values = dict(row)
        for column in _STOCK_COLUMNS:
            if column in values and values[column] is None:
                values[column] = 0
        return cls(**_known_columns(cls, values))

    def remaining(self, resource: str) -> int:
        """Return ``total - allocated`` for ``food``, ``water`` or ``medicine``."""
        key = resource.lower()
        if key not in STOCKED_RESOURCES:
            raise ValueError(f"Unknown resource {resource!r}; expected one of {STOCKED_RESOURCES}")
        return getattr(self, f"{key}_total") - getattr(self, f"{key}_allocated")

    def team_size(self, dispatch_type: str) -> int:
        _check_dispatch_type(dispatch_type)
        return self.medical_team_count if dispatch_type == "medical" else self.rescue_team_count


@dataclass(frozen=True)
class DispatchEntry:
    """One row of the dispatch log."""

    type: str
    camp_name: str
    dispatch_location: str
    dispatch_reason: str
    status: str = DISPATCH_ACTIVE
    team_member_name: str = ""
    reported_by: str = ""
    dispatch_time: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> DispatchEntry:
        return cls(**_known_columns(cls, row))

    @property
    def is_active(self) -> bool:
        return self.status == DISPATCH_ACTIVE


def _known_columns(cls: type, row: Mapping[str, Any]) -> dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in row.items() if key in names and value is not None}


def _check_dispatch_type(dispatch_type: str) -> None:
    if dispatch_type not in DISPATCH_TYPES:
        raise ValueError(
            f"dispatch type must be one of {sorted(DISPATCH_TYPES)}, got {dispatch_type!r}"
        )


def active_dispatches(
    dispatches: Iterable[DispatchEntry],
    camp_name: str,
    dispatch_type: str,
) -> int:
    """Count teams of *dispatch_type* from *camp_name* currently out."""
    _check_dispatch_type(dispatch_type)
    return sum(
        1
        for d in dispatches
        if d.camp_name == camp_name and d.type == dispatch_type and d.is_active
    )


def dispatch_status(
    camp: Camp,
    dispatch_type: str,
    dispatches: Iterable[DispatchEntry],
) -> str:
    """Return the status a new dispatch of *dispatch_type* from *camp* gets.

    Raises
    ------
    ValueError
        If *dispatch_type* is not ``"rescue"`` or ``"medical"``.
    """
    active = active_dispatches(dispatches, camp.name, dispatch_type)
    if active < camp.team_size(dispatch_type):
        return DISPATCH_ACTIVE
    return DISPATCH_WAITING
