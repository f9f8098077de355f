import pytest

from mls_schedule_view.fields import (
    ANCHOR_OFFSET,
    DAYS,
    InvalidDayField,
    clock_label,
    day_string,
    decode_days,
    decode_time_range,
)
from mls_schedule_view.rows import RowKind, classify_row


class TestDecodeDays:
    def test_multiple(self):
        assert decode_days("MWF") == {"M", "W", "F"}
        assert decode_days("TH") == {"T", "H"}

    def test_single(self):
        assert decode_days("S") == {"S"}

    def test_surrounding_whitespace(self):
        assert decode_days("  MW\xa0") == {"M", "W"}

    def test_unknown_code(self):
        with pytest.raises(InvalidDayField):
            decode_days("MX")

    def test_lowercase_is_unknown(self):
        with pytest.raises(InvalidDayField):
            decode_days("mw")

    def test_tba(self):
        with pytest.raises(InvalidDayField):
            decode_days("TBA")

    def test_empty(self):
        with pytest.raises(InvalidDayField):
            decode_days("")
        with pytest.raises(InvalidDayField):
            decode_days("   ")

    def test_is_value_error(self):
        assert issubclass(InvalidDayField, ValueError)


class TestDecodeTimeRange:
    def test_morning(self):
        assert decode_time_range("0900 - 1030") == (90, 180)

    def test_anchor_is_zero(self):
        assert decode_time_range("0730 - 0830") == (0, 60)

    def test_before_anchor_is_negative(self):
        assert decode_time_range("0700 - 0800") == (-30, 30)

    def test_evening(self):
        assert decode_time_range("1915 - 2100") == (705, 810)

    def test_no_range_check(self):
        # 25:99 is taken at face value
        assert decode_time_range("2599 - 0000") == (25 * 60 + 99 - ANCHOR_OFFSET, -ANCHOR_OFFSET)

    def test_missing_delimiter(self):
        start, end = decode_time_range("09300-1100")
        assert (start, end) == (120, 0)
        assert isinstance(start, int) and isinstance(end, int)

    def test_non_numeric_tokens(self):
        assert decode_time_range("TBA") == (0, 0)
        assert decode_time_range("abcd - efgh") == (0, 0)

    def test_partially_numeric_token(self):
        # hour parses, minute slice does not
        assert decode_time_range("09xx - 1030") == (0, 180)

    def test_leading_digits(self):
        # '9:' reads as 9, '30' as 30
        assert decode_time_range("9:30 - 1030") == (120, 180)

    def test_empty(self):
        assert decode_time_range("") == (0, 0)


class TestLabels:
    def test_clock_label(self):
        assert clock_label(0) == "07:30"
        assert clock_label(90) == "09:00"
        assert clock_label(825) == "21:15"

    def test_clock_label_out_of_range(self):
        assert clock_label(-450) == "00:00"
        assert clock_label(-480) == "-00:30"

    def test_day_string_calendar_order(self):
        assert day_string({"F", "M", "W"}) == "MWF"
        assert day_string(frozenset(DAYS)) == "MTWHFS"


class TestClassifyRow:
    def test_new_record(self):
        row = ["1234", "CCPROG1", "S11", "MW", "0915 - 1045", "GK210", "45", "40", ""]
        assert classify_row(row) is RowKind.NEW_RECORD

    def test_continuation(self):
        row = ["", "", "", "F", "1300 - 1430", "GK304", "", "", ""]
        assert classify_row(row) is RowKind.CONTINUATION

    def test_whitespace_first_cell_is_continuation(self):
        row = ["  \xa0", "", "", "F", "1300 - 1430", "", "", "", ""]
        assert classify_row(row) is RowKind.CONTINUATION

    def test_blank_row(self):
        assert classify_row([""] * 9) is RowKind.CONTINUATION

    def test_wrong_width(self):
        assert classify_row(["DELA CRUZ, JUAN"]) is RowKind.IGNORABLE
        assert classify_row([]) is RowKind.IGNORABLE
        assert classify_row(["1"] * 10) is RowKind.IGNORABLE
