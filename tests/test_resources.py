"""Tests for relieflink/coordinator/resources.py: stock draw-down and rebalancing."""
from __future__ import annotations

from relieflink.coordinator.camps import Camp
from relieflink.coordinator.resources import (
    ResourceSuggestion,
    allocated_resources,
    needs_by_camp,
    rebalancing_suggestions,
)
from relieflink.core.constants import DEFAULT_CAMPS
from relieflink.registrations.records import RegistrantRecord


class TestAllocatedResources:
    def test_plain_needs(self):
        assert allocated_resources(["FOOD", "WATER"]) == ["food", "water"]

    def test_substring_and_case(self):
        assert allocated_resources(["OTHER: baby food", "medicine"]) == ["food", "medicine"]

    def test_each_counter_once(self):
        assert allocated_resources(["FOOD", "OTHER: dry food"]) == ["food"]

    def test_unstocked_needs(self):
        assert allocated_resources(["SHELTER"]) == []
        assert allocated_resources([]) == []


class TestNeedsByCamp:
    def test_seed_tally(self, seed_records):
        tally = needs_by_camp(seed_records, DEFAULT_CAMPS)

        assert tally["Meppadi Relief Camp"] == {"FOOD": 0, "WATER": 0, "MEDICINE": 0, "SHELTER": 0}
        assert tally["Chooralmala School Camp"]["MEDICINE"] == 2
        assert tally["Mananthavady Town Camp"]["FOOD"] == 2
        assert tally["Mananthavady Town Camp"]["WATER"] == 1
        assert tally["Sulthan Bathery Camp"]["SHELTER"] == 1

    def test_unlisted_camps_skipped_and_other_needs_counted(self):
        records = [
            RegistrantRecord(id="a", name="A", camp="Vythiri Camp", needs=("FOOD",)),
            RegistrantRecord(id="b", name="B", camp="Meppadi Relief Camp", needs=("OTHER: blankets",)),
        ]
        tally = needs_by_camp(records, [Camp(name="Meppadi Relief Camp")])

        assert list(tally) == ["Meppadi Relief Camp"]
        assert tally["Meppadi Relief Camp"]["OTHER: blankets"] == 1


class TestRebalancingSuggestions:
    def test_seed_suggestions(self, seed_records):
        suggestions = rebalancing_suggestions(seed_records, DEFAULT_CAMPS)

        food = [s for s in suggestions if s.need == "FOOD"]
        assert [s.from_camp for s in food] == [
            "Meppadi Relief Camp",
            "Chooralmala School Camp",
            "Kalpetta Government Camp",
            "Sulthan Bathery Camp",
        ]
        assert {s.to_camp for s in food} == {"Mananthavady Town Camp"}
        assert {s.count for s in food} == {2}

        medicine = [s for s in suggestions if s.need == "MEDICINE"]
        assert {s.to_camp for s in medicine} == {"Chooralmala School Camp"}
        assert len(suggestions) == 14

    def test_tie_goes_to_earlier_camp(self, seed_records):
        water = [s for s in rebalancing_suggestions(seed_records, DEFAULT_CAMPS) if s.need == "WATER"]
        # Kalpetta and Mananthavady both have one request; Kalpetta is listed first
        assert {s.to_camp for s in water} == {"Kalpetta Government Camp"}

    def test_camps_without_registrants_are_not_sources(self, seed_records):
        camps = list(DEFAULT_CAMPS) + ["Vythiri Camp"]
        suggestions = rebalancing_suggestions(seed_records, camps)
        assert all(s.from_camp != "Vythiri Camp" for s in suggestions)

    def test_no_requests_no_suggestions(self):
        records = [RegistrantRecord(id="a", name="A", camp="Meppadi Relief Camp")]
        assert rebalancing_suggestions(records, DEFAULT_CAMPS) == []

    def test_accepts_camp_objects(self, seed_records):
        camps = [Camp(name=name) for name in DEFAULT_CAMPS]
        assert rebalancing_suggestions(seed_records, camps) == rebalancing_suggestions(seed_records, DEFAULT_CAMPS)

    def test_as_dict(self):
        suggestion = ResourceSuggestion(need="FOOD", from_camp="A", to_camp="B", count=2)
        assert suggestion.as_dict() == {"need": "FOOD", "from": "A", "to": "B", "count": 2}
