"""
Unit Tests for Value Formatting
"""

from datetime import date

import pytest

from doculoom.core.models import Casing, DataType, ElementFormat, ListStyle
from doculoom.data.formatter import format_content, parse_date, parse_number, to_fraction


class TestNumbers:
    """Tests for number parsing and formatting."""

    @pytest.mark.parametrize("raw,expected", [("12.5", 12.5), ("$1,200", 1200.0), ("abc", None), ("-3", -3.0)])
    def test_parse_number_when_raw_then_leading_number(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("value,expected", [(2.5, "2 1/2"), (0.25, "1/4"), (3.0, "3"), (0.999, "1")])
    def test_to_fraction_when_value_then_mixed_number(self, value, expected):
        assert to_fraction(value, 16) == expected

    def test_format_when_dollar_unit_then_prefixed(self):
        fmt = ElementFormat(data_type=DataType.NUMBER, unit="$")

        assert format_content("12.5", fmt) == "$12.50"

    def test_format_when_other_unit_then_suffixed(self):
        fmt = ElementFormat(data_type=DataType.NUMBER, unit="kg", decimal_places=1)

        assert format_content("3", fmt) == "3.0 kg"

    def test_format_when_fractions_then_mixed_number(self):
        fmt = ElementFormat(data_type=DataType.NUMBER, use_fractions=True, unit="in")

        assert format_content("1.75", fmt) == "1 3/4 in"

    def test_format_when_not_a_number_then_unchanged(self):
        assert format_content("n/a", ElementFormat(data_type=DataType.NUMBER)) == "n/a"


class TestDates:
    """Tests for date parsing and formatting."""

    @pytest.mark.parametrize("raw", ["2024-03-05", "03/05/2024", "Mar 5, 2024", "5 March 2024"])
    def test_parse_date_when_known_format_then_date(self, raw):
        assert parse_date(raw) == date(2024, 3, 5)

    @pytest.mark.parametrize("pattern,expected", [
        ("MM/DD/YYYY", "3/5/2024"),
        ("DD/MM/YYYY", "05/03/2024"),
        ("YYYY-MM-DD", "2024-03-05"),
        ("MMM D, YYYY", "Mar 5, 2024"),
        ("MMMM D, YYYY", "March 5, 2024"),
    ])
    def test_format_when_date_pattern_then_rendered(self, pattern, expected):
        fmt = ElementFormat(data_type=DataType.DATE, date_format=pattern)

        assert format_content("2024-03-05", fmt) == expected

    def test_format_when_unparseable_date_then_unchanged(self):
        assert format_content("someday", ElementFormat(data_type=DataType.DATE)) == "someday"


class TestTextAndBooleans:
    """Tests for casing, lists and boolean labels."""

    @pytest.mark.parametrize("raw,expected", [("yes", "In stock"), ("TRUE", "In stock"), ("0", "Sold out")])
    def test_format_when_boolean_then_labels(self, raw, expected):
        fmt = ElementFormat(data_type=DataType.BOOLEAN, true_label="In stock", false_label="Sold out")

        assert format_content(raw, fmt) == expected

    def test_format_when_boolean_without_labels_then_yes_no(self):
        assert format_content("on", ElementFormat(data_type=DataType.BOOLEAN)) == "Yes"

    def test_format_when_title_casing_then_each_word(self):
        assert format_content("brass DESK lamp", ElementFormat(casing=Casing.TITLE)) == "Brass Desk Lamp"

    def test_format_when_html_casing_then_tags_untouched(self):
        fmt = ElementFormat(casing=Casing.UPPER)

        assert format_content("<b>bold</b> &amp; plain", fmt) == "<b>BOLD</b> &amp; PLAIN"

    def test_format_when_list_style_then_lines_become_items(self):
        fmt = ElementFormat(list_style=ListStyle.DECIMAL)

        assert format_content("one\n\ntwo", fmt) == "<ol><li>one</li><li>two</li></ol>"

    def test_format_when_empty_then_empty_string(self):
        assert format_content(None, ElementFormat()) == ""

    def test_format_when_no_format_then_unchanged(self):
        assert format_content("As Is") == "As Is"
