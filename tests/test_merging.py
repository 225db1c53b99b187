import pytest

from goroflight.errors import MergeDateError
from goroflight.processing.merging import are_valid_for_merge, merge_records, perform_merge


def test_valid_for_merge_one_week_apart(record_factory):
    first = record_factory("2024-01-01", "2024-01-08")
    second = record_factory("2024-01-15", "2024-01-22")
    assert are_valid_for_merge(first, second) is True


def test_not_valid_for_merge_when_profile_differs(record_factory):
    first = record_factory("2024-01-01", "2024-01-08")
    second = record_factory("2024-01-15", "2024-01-22", departure="11:00")
    assert are_valid_for_merge(first, second) is False


def test_not_valid_for_merge_when_marker_differs(record_factory):
    first = record_factory("2024-01-01", "2024-01-08", "1......")
    second = record_factory("2024-01-15", "2024-01-22", ".2.....")
    assert are_valid_for_merge(first, second) is False


@pytest.mark.parametrize("second_start", ["2024-01-08", "2024-01-10", "2024-01-14", "2024-01-16"])
def test_not_valid_for_merge_when_not_exactly_a_week(record_factory, second_start):
    first = record_factory("2024-01-01", "2024-01-08")
    second = record_factory(second_start, "2024-01-29")
    assert are_valid_for_merge(first, second) is False


def test_merge_check_raises_on_bad_date(record_factory):
    first = record_factory("2024-01-01", "2024-01-08")
    second = record_factory("invalid-date", "2024-01-15")
    with pytest.raises(MergeDateError) as exc_info:
        are_valid_for_merge(first, second)
    assert exc_info.value.record == second


def test_merge_check_raises_even_when_profiles_differ(record_factory):
    first = record_factory("2024-01-01", "not-a-date")
    second = record_factory("2024-01-15", "2024-01-22", origin="WAW")
    with pytest.raises(MergeDateError):
        are_valid_for_merge(first, second)


def test_perform_merge_takes_end_of_second(record_factory):
    first = record_factory("2024-01-01", "2024-01-08")
    second = record_factory("2024-01-15", "2024-01-22", aircraft="321")
    merged = perform_merge(first, second)
    assert merged == record_factory("2024-01-01", "2024-01-22")
    assert first.end_date == "2024-01-08"


def test_merge_records_two(record_factory):
    records = [record_factory("2024-01-01", "2024-01-08"), record_factory("2024-01-15", "2024-01-22")]
    assert merge_records(records) == [record_factory("2024-01-01", "2024-01-22")]


def test_merge_records_non_mergeable_kept_in_order(record_factory):
    records = [
        record_factory("2024-01-01", "2024-01-31"),
        record_factory("2024-02-01", "2024-02-28", origin="MUC", destination="ZRH", airline="LX"),
    ]
    assert merge_records(records) == records


def test_merge_records_collapses_chain(record_factory):
    records = [
        record_factory("2024-01-01", "2024-01-01", "1......"),
        record_factory("2024-01-08", "2024-01-08", "1......"),
        record_factory("2024-01-15", "2024-01-15", "1......"),
    ]
    assert merge_records(records) == [record_factory("2024-01-01", "2024-01-15", "1......")]


def test_merge_records_chain_of_ranges(record_factory):
    records = [
        record_factory("2024-01-01", "2024-01-08"),
        record_factory("2024-01-15", "2024-01-22"),
        record_factory("2024-01-29", "2024-02-05"),
    ]
    assert merge_records(records) == [record_factory("2024-01-01", "2024-02-05")]


def test_merge_records_interleaved_chains(record_factory):
    records = [
        record_factory("2024-01-01", "2024-01-01", "1......"),
        record_factory("2024-01-03", "2024-01-03", "..3...."),
        record_factory("2024-01-08", "2024-01-08", "1......"),
        record_factory("2024-01-10", "2024-01-24", "..3...."),
        record_factory("2024-01-15", "2024-01-15", "1......"),
    ]
    assert merge_records(records) == [
        record_factory("2024-01-01", "2024-01-15", "1......"),
        record_factory("2024-01-03", "2024-01-24", "..3...."),
    ]


def test_merge_records_gap_breaks_chain(record_factory):
    records = [
        record_factory("2024-01-01", "2024-01-01", "1......"),
        record_factory("2024-01-08", "2024-01-08", "1......"),
        record_factory("2024-01-22", "2024-01-22", "1......"),
    ]
    assert merge_records(records) == [
        record_factory("2024-01-01", "2024-01-08", "1......"),
        record_factory("2024-01-22", "2024-01-22", "1......"),
    ]


def test_merge_records_aborts_batch_on_bad_date(record_factory):
    records = [
        record_factory("2024-01-01", "2024-01-08"),
        record_factory("2024-01-15", "2024-01-22"),
        record_factory("garbage", "2024-03-01"),
    ]
    with pytest.raises(MergeDateError):
        merge_records(records)


def test_merge_records_empty():
    assert merge_records([]) == []
