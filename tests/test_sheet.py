import dataclasses

import pytest

from sheets.row import new_row
from sheets.sheet import (
    FormattedSheet,
    HeadedSheet,
    Sheets,
    compare_sheets,
    fields,
    group_by,
    group_by2,
    new_headed_sheet,
    new_sheet,
    select_matched_rows,
    select_matched_rows_from,
    select_rows,
    select_rows_from,
    select_rows_func,
)


def three_rows():
    return new_sheet(new_row(1, 2, 3), new_row(4, 5, 6), new_row(3, 2, 1))


def test_sheet_plain_format():
    assert format(new_sheet(new_row(1, 2, 3), new_row(4, 5, 6)), "") == "123456"
    mixed = new_sheet(new_row(1, 2, "hi"), new_row(1, 2, "hi"))
    assert str(mixed) == "12hi12hi"


def test_compare_sheets():
    t1 = new_sheet(new_row(1, 2, 3), new_row(4, 5, 6))
    t2 = new_sheet(new_row(1, 2, 3), new_row(4, 5, 6))
    assert compare_sheets(t1, t2) is True
    t3 = new_sheet(new_row(1, 2, 3), new_row(4, 5, 7))
    assert compare_sheets(t1, t3) is False


def test_compare_sheets_row_count_differs():
    assert compare_sheets(new_sheet(new_row(1)), new_sheet(new_row(1), new_row(2))) is False


def test_column():
    sheet = new_sheet(new_row(1, 2, 3), new_row(4, 5, 6))
    assert format(sheet.column(2), "\t") == "2\t5"


def test_column_zero_rejected():
    with pytest.raises(ValueError):
        new_sheet(new_row(1)).column(0)


def test_select_columns():
    sheet = new_sheet(new_row(1, 2, 3), new_row(4, 5, 6))
    assert format(sheet.select_columns(2, 3), "\n") == "23\n56"


def test_select_rows():
    s = three_rows()
    assert format(select_rows(s, 1, 2), "\n") == "123\n321"
    assert format(select_rows(s, 0, 1), "\n") == "123"


def test_select_rows_reiterable():
    selected = select_rows(three_rows(), 1, 2)
    first_output = format(selected, "\n")
    second_output = format(selected, "\n")
    assert first_output == "123\n321"
    assert second_output == "123\n321"


def test_select_rows_from():
    s = three_rows()
    assert format(select_rows_from(s, s.select_columns(2), 0, 2), "\n") == "123\n321"
    assert format(select_rows_from(s, s, 0, 1), "\n") == "123"


def test_select_matched_rows():
    s = new_sheet(new_row(1, 2, 3), new_row(3, 2, 1), new_row(4, 5, 6), new_row(3, 2, 1))
    assert format(select_matched_rows(s, new_row(3, 2, 1)), "\n") == "321\n321"


def test_select_matched_rows_from():
    s = new_sheet(new_row(1, 2, 3), new_row(3, 2, 1), new_row(4, 5, 6), new_row(3, 2, 5))
    result = select_matched_rows_from(s, s.select_columns(2, 1), new_row(2, 3))
    assert format(result, "\n") == "321\n325"


def test_select_rows_func():
    result = select_rows_func(three_rows(), lambda r: r.at(2) > 2)
    assert format(result, ",") == "123,456"


def test_headed_sheet_format():
    headed = HeadedSheet(
        new_row("age", "height", "weight"),
        new_sheet(new_row(1, 2, 3), new_row(4, 5, 6), new_row(7, 8, 9)),
    )
    assert format(headed, "\t") == "ageheightweight\n123\n|456\n|789"


def test_headed_sheet_pads_short_header():
    headed = HeadedSheet(new_row("a", "b"), new_sheet(new_row(1, 2)))
    assert str(headed) == "        ab\n12"


def test_formatted_sheet_holds_parts():
    header = new_row("x")
    sheet = new_sheet(new_row(1))
    formatters = new_row(str)
    formatted = FormattedSheet(header, sheet, formatters)
    assert formatted.header is header
    assert formatted.sheet is sheet
    assert list(formatted.formatters) == [str]


def test_sheets_entry_format():
    ss = Sheets()
    ss["test"] = new_sheet(new_row(1, 2, 3), new_row(4, 5, 6))
    assert format(ss["test"], "\n") == "123\n456"
    assert str(ss) == '"test"\n123456'


def test_group_by():
    ss = new_sheet(new_row(1, 2, 3), new_row(4, 5, 6))
    grouped = group_by(ss, lambda _r: True)
    assert list(grouped) == ["1"]
    assert format(grouped["1"], "\n") == "123\n456"


def test_group_by2():
    ss = new_sheet(new_row(1, 2, 3), new_row(4, 5, 6))
    groups = group_by2(
        ss,
        new_row(
            lambda r: r.at(0) == 1,
            lambda r: r.at(0) == 2,
            lambda r: r.at(0) == 3,
            lambda r: r.at(0) == 4,
        ),
    )
    assert format(groups, ",") == "123,,,456"


@dataclasses.dataclass
class Person:
    name: str
    age: int


def test_fields_of_dataclass():
    assert list(fields(Person("alice", 60))) == [("name", "alice"), ("age", 60)]


def test_fields_rejects_plain_value():
    with pytest.raises(TypeError):
        fields(5)


def test_new_headed_sheet_from_fields():
    headed = new_headed_sheet(fields(Person("alice", 60)))
    assert list(headed.header) == ["name", "age"]
    assert [list(r) for r in headed.sheet] == [["alice", 60]]