"""Registrant records shared by family search, clustering and the dashboard.

A ``RegistrantRecord`` is one kiosk registration.  The serving layer builds
records with :meth:`RegistrantRecord.from_mapping` from either shape it
handles:

* API JSON, camelCase (``trappedDescription``, ``familyCount``)
* storage rows, snake_case with 0/1 flags and ``needs`` as JSON text

and turns results back into API JSON with ``as_dict()``.

Safety rule: names, villages and descriptions are never logged.
"""
from __future__ import annotations

import json
import random
import time
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

# snake_case field -> camelCase API key
_API_KEYS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "village": "village",
    "camp": "camp",
    "family_count": "familyCount",
    "injured": "injured",
    "injury_description": "injuryDescription",
    "trapped": "trapped",
    "trapped_description": "trappedDescription",
    "needs": "needs",
    "timestamp": "timestamp",
    "rescue_dispatched": "rescueDispatched",
    "medical_dispatched": "medicalDispatched",
}

_BOOL_FIELDS = frozenset({"injured", "trapped", "rescue_dispatched", "medical_dispatched"})
_TEXT_FIELDS = frozenset({"village", "camp", "injury_description", "trapped_description", "timestamp"})


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RegistrantRecord:
    """A survivor registered at a camp kiosk."""

    id: str
    name: str
    village: str = ""
    camp: str = ""
    trapped: bool = False
    trapped_description: str = ""
    injured: bool = False
    injury_description: str = ""
    family_count: int = 1
    needs: tuple[str, ...] = field(default_factory=tuple)
    timestamp: str = ""
    rescue_dispatched: bool = False
    medical_dispatched: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RegistrantRecord:
        """Build a record from API JSON or a storage row.

        Keys may be snake_case or camelCase.  ``None`` and missing optional
        values fall back to the field defaults.

        Raises
        ------
        ValueError
            If ``id`` is missing or ``name`` is blank.
        """
        values: dict[str, Any] = {}
        for name, api_key in _API_KEYS.items():
            if name in data:
                value = data[name]
            elif api_key in data:
                value = data[api_key]
            else:
                continue
            if value is None:
                continue
            values[name] = value

        record_id = values.get("id")
        if record_id is None or not str(record_id).strip():
            raise ValueError("Registration id is required")
        name = values.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Registration {record_id}: name is required")

        kwargs: dict[str, Any] = {"id": str(record_id), "name": name}
        for key in _BOOL_FIELDS & values.keys():
            kwargs[key] = bool(values[key])
        for key in _TEXT_FIELDS & values.keys():
            kwargs[key] = str(values[key])
        if "family_count" in values:
            kwargs["family_count"] = _parse_family_count(values["family_count"])
        if "needs" in values:
            kwargs["needs"] = _parse_needs(values["needs"])
        return cls(**kwargs)

    def as_dict(self) -> dict[str, Any]:
        """Return the camelCase JSON representation used by the API."""
        out: dict[str, Any] = {}
        for f in fields(RegistrantRecord):
            value = getattr(self, f.name)
            out[_API_KEYS[f.name]] = list(value) if f.name == "needs" else value
        return out


@dataclass(frozen=True)
class MatchResult(RegistrantRecord):
    """A registrant returned by family search, with its relevance score."""

    score: int = 0

    @classmethod
    def from_record(cls, record: RegistrantRecord, score: int) -> MatchResult:
        values = {f.name: getattr(record, f.name) for f in fields(RegistrantRecord)}
        return cls(**values, score=score)

    def as_dict(self) -> dict[str, Any]:
        out = super().as_dict()
        out["score"] = self.score
        return out


# ---------------------------------------------------------------------------
# Field parsing
# ---------------------------------------------------------------------------

def _parse_family_count(value: Any) -> int:
    try:
        count = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"familyCount must be an integer, got {value!r}") from exc
    # The kiosk form treats 0 / blank as "just me"
    return count if count > 0 else 1


def _parse_needs(value: Any) -> tuple[str, ...]:
    """Accept a list of needs or its JSON encoding (storage rows)."""
    if isinstance(value, str):
        if not value.strip():
            return ()
        try:
            value = json.loads(value)
        except json.JSONDecodeError as exc:
            raise ValueError("needs must be a JSON list") from exc
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"needs must be a list, got {type(value).__name__}")
    return tuple(str(n) for n in value)


# ---------------------------------------------------------------------------
# Registration IDs
# ---------------------------------------------------------------------------

def new_registration_id() -> str:
    """Return a kiosk receipt ID such as ``RL-48213377-5120``.

    The middle part is the last eight digits of the millisecond clock, the
    suffix a random number in ``1000..9999``.
    """
    millis = str(int(time.time() * 1000))[-8:]
    suffix = random.randint(1000, 9999)
    return f"RL-{millis}-{suffix}"
