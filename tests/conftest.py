from __future__ import annotations

import pytest

from relieflink.registrations.records import RegistrantRecord

# Field-kit demo data: storage rows as the kiosk database holds them
SEED_ROWS = [
    ("Rajan K", "Mundakkai", "Meppadi Relief Camp", 4, 0, "", 1,
     "my brother is near the Mundakkai church, could not cross the valley", "[]"),
    ("Latha Suresh", "Mundakkai", "Meppadi Relief Camp", 2, 1, "leg fracture", 1,
     "two neighbors stuck near the church in Mundakkai valley", "[]"),
    ("Biju Thomas", "Chooralmala", "Chooralmala School Camp", 3, 0, "", 0, "", '["MEDICINE"]'),
    ("Anitha Ravi", "Vellarimala", "Meppadi Relief Camp", 1, 0, "", 1,
     "husband near Mundakkai valley bridge, cannot cross", "[]"),
    ("Suresh Kumar", "Mananthavady", "Mananthavady Town Camp", 5, 0, "", 0, "", '["FOOD","WATER"]'),
    ("Mary Joseph", "Chooralmala", "Chooralmala School Camp", 2, 1, "head injury, MEDICAL EMERGENCY", 0, "",
     '["MEDICINE"]'),
    ("Pradeep Nair", "Kalpetta", "Kalpetta Government Camp", 4, 0, "", 0, "", "[]"),
    ("Suma Krishnan", "Vellarimala", "Meppadi Relief Camp", 3, 0, "", 1,
     "elderly woman still in house near the valley road Mundakkai", "[]"),
    ("Arun Mohan", "Mananthavady", "Mananthavady Town Camp", 2, 0, "", 0, "", '["FOOD"]'),
    ("Thankam Varghese", "Sulthan Bathery", "Sulthan Bathery Camp", 6, 0, "", 0, "", '["SHELTER"]'),
    ("Vineeth P", "Chooralmala", "Chooralmala School Camp", 1, 0, "", 1,
     "father near the Mananthavady bridge road", "[]"),
    ("Rekha Babu", "Kalpetta", "Kalpetta Government Camp", 3, 0, "", 0, "", '["WATER","MEDICINE"]'),
]

SEED_TIMESTAMPS = [
    "2024-07-30T06:00:00.000Z",
    "2024-07-30T06:10:00.000Z",
    "2024-07-30T06:20:00.000Z",
    "2024-07-30T06:30:00.000Z",
    "2024-07-30T06:40:00.000Z",
    "2024-07-30T06:50:00.000Z",
    "2024-07-30T07:00:00.000Z",
    "2024-07-30T07:10:00.000Z",
    "2024-07-30T07:20:00.000Z",
    "2024-07-30T07:30:00.000Z",
    "2024-07-30T07:40:00.000Z",
    "2024-07-30T07:50:00.000Z",
]


def _row(index: int) -> dict:
    name, village, camp, family, injured, injury, trapped, trapped_desc, needs = SEED_ROWS[index]
    n = index + 1
    return {
        "id": f"RL-0000100{n}-100{n}",
        "name": name,
        "village": village,
        "camp": camp,
        "family_count": family,
        "injured": injured,
        "injury_description": injury,
        "trapped": trapped,
        "trapped_description": trapped_desc,
        "needs": needs,
        "timestamp": SEED_TIMESTAMPS[index],
    }


@pytest.fixture
def seed_rows() -> list[dict]:
    return [_row(i) for i in range(len(SEED_ROWS))]


@pytest.fixture
def seed_records(seed_rows: list[dict]) -> list[RegistrantRecord]:
    return [RegistrantRecord.from_mapping(row) for row in seed_rows]
