from datetime import date

import pytest

from daylio_matrix.core import MOOD_ATTRIBUTE, DiaryRecord, TimelineBuilder, discover_activities
from daylio_matrix.errors import ConfigurationMismatch


def test_builds_activity_and_mood_timelines(example_records):
    timelines = TimelineBuilder(["run", "read"]).add_all(example_records).build()

    assert timelines.activities == ("run", "read")
    assert timelines.activity("run").dates == [date(2021, 1, 1), date(2021, 1, 2)]
    assert timelines.activity("read").dates == [date(2021, 1, 2), date(2021, 1, 5)]
    assert timelines.activity("run").get(date(2021, 1, 1)) == ""
    assert timelines.mood.name == MOOD_ATTRIBUTE
    assert timelines.mood.get(date(2021, 1, 5)) == "rad"
    assert len(timelines) == 3


def test_first_date_is_cached():
    records = [
        DiaryRecord(date(2021, 2, 10), "meh", {"swim"}),
        DiaryRecord(date(2021, 2, 3), "good", {"swim"}),
    ]
    timelines = TimelineBuilder(["swim", "yoga"]).add_all(records).build()

    assert timelines.activity("swim").first_date == date(2021, 2, 3)
    assert timelines.activity("yoga").first_date is None
    assert timelines.activity("yoga").is_empty


def test_first_write_wins_on_duplicate_days():
    day = date(2021, 3, 1)
    records = [
        DiaryRecord(day, "good", {"run"}),
        DiaryRecord(day, "awful", {"read"}),
    ]
    timelines = TimelineBuilder(["run", "read"]).add_all(records).build()

    assert timelines.mood.get(day) == "good"
    assert len(timelines.mood) == 1
    # presence is still the union of both entries
    assert day in timelines.activity("run")
    assert day in timelines.activity("read")


def test_timelines_are_read_only(example_records):
    timelines = TimelineBuilder(["run", "read"]).add_all(example_records).build()

    with pytest.raises(TypeError):
        timelines.activity("run").entries[date(2021, 6, 1)] = ""


def test_unknown_tag_aborts_by_default(example_records):
    builder = TimelineBuilder(["run"])

    with pytest.raises(ConfigurationMismatch) as excinfo:
        builder.add_all(example_records)

    assert excinfo.value.tag == "read"
    assert excinfo.value.day == date(2021, 1, 2)


def test_unknown_tag_skip_policy_reports_and_continues(example_records):
    builder = TimelineBuilder(["run"], unknown_tag_policy="skip")
    timelines = builder.add_all(example_records).build()

    assert [m.tag for m in builder.mismatches] == ["read", "read"]
    assert timelines.activities == ("run",)
    # the mood of a record is kept even when its tags are not
    assert date(2021, 1, 5) in timelines.mood


def test_mood_is_a_reserved_activity_name():
    with pytest.raises(ConfigurationMismatch):
        TimelineBuilder(["run", "mood"])


def test_mood_tag_is_not_written_to_mood_timeline():
    builder = TimelineBuilder(["run"], unknown_tag_policy="skip")
    timelines = builder.add_all([DiaryRecord(date(2021, 1, 1), "rad", {"mood"})]).build()

    assert timelines.mood.get(date(2021, 1, 1)) == "rad"
    assert builder.mismatches[0].tag == "mood"


def test_rejects_bad_policy_and_duplicate_activities():
    with pytest.raises(ValueError):
        TimelineBuilder(["run"], unknown_tag_policy="ignore")
    with pytest.raises(ValueError):
        TimelineBuilder(["run", "run"])


def test_discover_activities_is_sorted(example_records):
    assert discover_activities(example_records) == ["read", "run"]
    assert discover_activities([]) == []


def test_discover_activities_ignores_record_order(example_records):
    assert discover_activities(reversed(example_records)) == discover_activities(example_records)
