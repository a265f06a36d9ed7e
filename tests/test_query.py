from datetime import date

from ea_datagrabber.query import extract_argument, extract_prefix, filter_by_date, interpret
from ea_datagrabber.schemas import BlobRecord, DateRangeQuery


def record(name, embedded):
    return BlobRecord(url=f"Datasets/{name}", embedded_date=embedded)


def test_interpret_full_query():
    prefix, date_range = interpret("Datasets/Wholesale -sd 2023-01-01 -ed 2023-12-31")
    assert prefix == "Datasets/Wholesale"
    assert date_range.start_date == date(2023, 1, 1)
    assert date_range.end_date == date(2023, 12, 31)


def test_interpret_flags_any_order_and_case():
    prefix, date_range = interpret("Datasets/Wholesale -ED 2023-12-31 -Sd 2023-01-01")
    assert prefix == "Datasets/Wholesale"
    assert date_range.start_date == date(2023, 1, 1)
    assert date_range.end_date == date(2023, 12, 31)


def test_interpret_prefix_only():
    prefix, date_range = interpret("Datasets/Wholesale/BidsAndOffers")
    assert prefix == "Datasets/Wholesale/BidsAndOffers"
    assert date_range.is_unbounded


def test_malformed_value_leaves_bound_unset():
    prefix, date_range = interpret("Datasets/Wholesale -sd 2023-1-1 -ed 2023-12-31")
    assert prefix == "Datasets/Wholesale"
    assert date_range.start_date is None
    assert date_range.end_date == date(2023, 12, 31)


def test_unparseable_value_leaves_bound_unset():
    _, date_range = interpret("Datasets -sd 2023-13-01 -ed 2023-12-31")
    assert date_range.start_date is None
    assert date_range.end_date == date(2023, 12, 31)


def test_eleven_character_value_is_found():
    assert extract_argument("-sd", "x -sd 2023-01-011") == "2023-01-011"


def test_double_space_is_not_found():
    assert extract_argument("-sd", "x -sd  2023-01-01") is None


def test_flag_at_end_of_input():
    assert extract_argument("-ed", "Datasets -ed") is None


def test_missing_flag():
    assert extract_argument("-sd", "Datasets/Wholesale") is None


def test_prefix_empty_for_flags_only():
    assert extract_prefix("-sd 2023-01-01") == ""
    assert extract_prefix("") == ""
    assert extract_prefix("   ") == ""


def test_prefix_skips_leading_whitespace():
    assert extract_prefix("  Datasets/Foo -sd 2023-01-01") == "Datasets/Foo"


def test_prefix_keeps_inner_hyphen():
    assert extract_prefix("Datasets/Half-hourly_Prices -sd 2023-01-01") == "Datasets/Half-hourly_Prices"


RECORDS = [
    record("a_20230101.csv", date(2023, 1, 1)),
    record("b_20230102.csv", date(2023, 1, 2)),
    record("readme.txt", None),
    record("c_20231231.csv", date(2023, 12, 31)),
]


def test_unbounded_keeps_everything():
    assert filter_by_date(RECORDS, DateRangeQuery()) == RECORDS


def test_start_only_excludes_boundary_and_unset():
    kept = filter_by_date(RECORDS, DateRangeQuery(start_date=date(2023, 1, 1)))
    assert [r.embedded_date for r in kept] == [date(2023, 1, 2), date(2023, 12, 31)]


def test_end_only_excludes_boundary_and_unset():
    kept = filter_by_date(RECORDS, DateRangeQuery(end_date=date(2023, 12, 31)))
    assert [r.embedded_date for r in kept] == [date(2023, 1, 1), date(2023, 1, 2)]


def test_both_bounds_strict():
    date_range = DateRangeQuery(start_date=date(2023, 1, 1), end_date=date(2023, 12, 31))
    kept = filter_by_date(RECORDS, date_range)
    assert [r.url for r in kept] == ["Datasets/b_20230102.csv"]


def test_filter_preserves_order():
    shuffled = [RECORDS[3], RECORDS[1]]
    kept = filter_by_date(shuffled, DateRangeQuery(start_date=date(2022, 1, 1)))
    assert kept == shuffled


def test_flag_inside_prefix_is_ignored():
    prefix, date_range = interpret("Datasets/Reserves-sd_x -sd 2023-01-01")
    assert prefix == "Datasets/Reserves-sd_x"
    assert date_range.start_date == date(2023, 1, 1)


def test_end_flag_inside_prefix_is_ignored():
    prefix, date_range = interpret("Datasets/Offers-edited -ed 2023-12-31 -sd 2023-01-01")
    assert prefix == "Datasets/Offers-edited"
    assert date_range.start_date == date(2023, 1, 1)
    assert date_range.end_date == date(2023, 12, 31)


def test_flag_after_tab_is_found():
    assert extract_argument("-ed", "Datasets\t-ED 2023-12-31") == "2023-12-31"
