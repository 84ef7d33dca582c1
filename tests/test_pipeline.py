import random
from datetime import date

import pandas as pd
import pytest

from daylio_matrix import ConfigurationMismatch, DiaryRecord, run_pipeline


def test_worked_example(example_records, moods):
    result = run_pipeline(example_records, moods)

    assert list(result.day_index) == [date(2021, 1, 1), date(2021, 1, 2), date(2021, 1, 5)]
    assert list(result.flat.columns) == ["date", "mood", *moods, "read", "run"]
    assert result.flat.iloc[1]["mood"] == 2
    assert result.cooccurrence.at["run", "read"] == 1.0
    assert result.cooccurrence.at["read", "run"] == 1.0
    assert result.configuration_mismatches == []
    assert result.domain_mismatches == []


def test_rerun_on_permuted_records_is_identical(diary, moods):
    records, activities = diary
    baseline = run_pipeline(records, moods, activities=activities)

    rng = random.Random(3)
    for _ in range(3):
        shuffled = list(records)
        rng.shuffle(shuffled)
        result = run_pipeline(shuffled, moods, activities=activities)

        assert result.day_index == baseline.day_index
        pd.testing.assert_frame_equal(result.flat, baseline.flat)
        pd.testing.assert_frame_equal(result.cooccurrence, baseline.cooccurrence)


def test_rerun_with_discovered_activities_is_identical(diary, moods):
    records, _ = diary
    baseline = run_pipeline(records, moods)

    rng = random.Random(11)
    for shuffled in [list(reversed(records)), rng.sample(records, len(records))]:
        result = run_pipeline(shuffled, moods)

        assert result.timelines.activities == baseline.timelines.activities
        pd.testing.assert_frame_equal(result.flat, baseline.flat)
        pd.testing.assert_frame_equal(result.cooccurrence, baseline.cooccurrence)


def test_mismatches_are_surfaced(moods):
    records = [
        DiaryRecord(date(2021, 1, 1), "good", {"run", "nap"}),
        DiaryRecord(date(2021, 1, 2), "blissful", {"run"}),
    ]
    result = run_pipeline(records, moods, activities=["run"], unknown_tag_policy="skip")

    assert [m.tag for m in result.configuration_mismatches] == ["nap"]
    assert [m.mood for m in result.domain_mismatches] == ["blissful"]
    assert result.flat["mood"].tolist() == [3, -1]

    summary = result.summary()
    assert summary["unknown_tags"] == 1
    assert summary["unknown_moods"] == 1
    assert summary["n_days"] == 2


def test_abort_policy_propagates(moods):
    records = [DiaryRecord(date(2021, 1, 1), "good", {"nap"})]

    with pytest.raises(ConfigurationMismatch):
        run_pipeline(records, moods, activities=["run"])


def test_empty_run(moods):
    result = run_pipeline([], moods)

    assert len(result.day_index) == 0
    assert list(result.flat.columns) == ["date", "mood", *moods]
    assert result.cooccurrence.empty
    assert result.summary()["n_pairs"] == 0
