from relieflink.registrations.records import RegistrantRecord
from relieflink.rescue.triage import medical_emergencies


def test_medical_emergencies_from_seed(seed_records):
    names = [r.name for r in medical_emergencies(seed_records)]
    assert names == ["Latha Suresh", "Mary Joseph"]


def test_injured_without_description_is_not_listed():
    records = [
        RegistrantRecord(id="a", name="A", injured=True, injury_description=""),
        RegistrantRecord(id="b", name="B", injured=True, injury_description="  "),
        RegistrantRecord(id="c", name="C", injured=False, injury_description="cut on arm"),
        RegistrantRecord(id="d", name="D", injured=True, injury_description="burns"),
    ]
    assert [r.id for r in medical_emergencies(records)] == ["d"]


def test_empty():
    assert medical_emergencies([]) == []
