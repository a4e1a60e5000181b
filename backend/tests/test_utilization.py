from datetime import date

from faculty_portal.services.occurrences import Occurrence
from faculty_portal.services.utilization import (
    aggregate_by_key,
    low_utilization_suggestions,
    share_percent,
    utilization_by_room,
    workload_by_faculty,
)

MONDAY = date(2024, 1, 1)


def sample_occurrences():
    return [
        Occurrence(date=MONDAY, time="09:00", room="R1", faculty_id="F1", faculty_email="a@x.edu"),
        Occurrence(date=MONDAY, time="10:00", room="R1", faculty_id="", faculty_email="b@x.edu"),
        Occurrence(date=MONDAY, time="11:00", room="R2", faculty_id="F1", faculty_email="a@x.edu"),
        Occurrence(date=MONDAY, time="12:00", room="", faculty_id="", faculty_email=""),
        Occurrence(date=MONDAY, time="13:00", room="   ", faculty_id="F3", faculty_email="c@x.edu"),
    ]


def test_room_utilization_counts_and_unknown_bucket():
    utilization = utilization_by_room(sample_occurrences())
    assert utilization == {"R1": 2, "R2": 1, "Unknown": 2}


def test_room_utilization_totals_match_occurrence_count():
    occurrences = sample_occurrences()
    assert sum(utilization_by_room(occurrences).values()) == len(occurrences)
    assert utilization_by_room([]) == {}


def test_faculty_workload_falls_back_to_email():
    workload = workload_by_faculty(sample_occurrences())
    assert workload == {"F1": 2, "b@x.edu": 1, "Unknown": 1, "F3": 1}


def test_aggregate_by_custom_key():
    counts = aggregate_by_key(sample_occurrences(), lambda item: item.time[:2])
    assert counts == {"09": 1, "10": 1, "11": 1, "12": 1, "13": 1}


def test_share_percent_rounds_to_one_decimal():
    assert share_percent(1, 3) == 33.3
    assert share_percent(0, 0) == 0.0


def test_low_utilization_suggestions_flag_rooms_below_threshold():
    suggestions = low_utilization_suggestions({"R1": 8, "R2": 1, "R3": 1})

    assert [item.room for item in suggestions] == ["R2", "R3"]
    assert suggestions[0].share_percent == 10.0
    assert suggestions[0].potential_improvement == 20.0
    assert suggestions[0].description == "Low utilization in room R2 (10.0%)"


def test_low_utilization_suggestions_empty_for_no_usage():
    assert low_utilization_suggestions({}) == []
