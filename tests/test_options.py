import pytest
from charfreq.errors import InvalidOption
from charfreq.options import Options, SortBy


class TestSortBy:
    def test_parse_names(self):
        assert SortBy.parse("character") is SortBy.CHARACTER
        assert SortBy.parse("char") is SortBy.CHARACTER
        assert SortBy.parse("COUNT") is SortBy.COUNT
        assert SortBy.parse(SortBy.COUNT) is SortBy.COUNT

    def test_parse_unknown(self):
        with pytest.raises(InvalidOption) as e:
            SortBy.parse("frequency")
        assert e.value.option == "sort_by"


class TestOptions:
    def test_defaults(self):
        o = Options()
        assert o.sort_by is SortBy.CHARACTER
        assert o.show_top_n is None
        assert not o.as_percentage
        assert not o.include_whitespace
        assert o.encoding == "utf-8"
        assert o.errors == "strict"
        assert o.precision == 2

    def test_sort_by_string(self):
        assert Options(sort_by="count").sort_by is SortBy.COUNT

    @pytest.mark.parametrize(
        "name",
        [
            "show_top_n",
            "min_count",
            "max_count",
            "exact_count",
            "more_than_count",
            "less_than_count",
        ],
    )
    @pytest.mark.parametrize("value", [0, -3, 1.5, True])
    def test_non_positive_counts(self, name, value):
        with pytest.raises(InvalidOption) as e:
            Options(**{name: value})
        assert e.value.option == name

    @pytest.mark.parametrize("name", ["min_percentage", "max_percentage"])
    @pytest.mark.parametrize("value", [0, -1.0, 100.5])
    def test_out_of_range_percentages(self, name, value):
        with pytest.raises(InvalidOption):
            Options(**{name: value})

    def test_percentage_bounds(self):
        o = Options(min_percentage=0.01, max_percentage=100)
        assert o.max_percentage == 100

    def test_contradictory_counts(self):
        with pytest.raises(InvalidOption):
            Options(min_count=5, max_count=2)

    def test_contradictory_percentages(self):
        with pytest.raises(InvalidOption):
            Options(min_percentage=50, max_percentage=10)

    def test_unknown_encoding(self):
        with pytest.raises(InvalidOption):
            Options(encoding="not-a-codec")

    def test_unknown_error_handler(self):
        with pytest.raises(InvalidOption):
            Options(errors="surrogateescape")

    def test_negative_precision(self):
        with pytest.raises(InvalidOption):
            Options(precision=-1)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Options().show_top_n = 3

    def test_non_text_encoding(self):
        with pytest.raises(InvalidOption) as e:
            Options(encoding="rot13")
        assert e.value.option == "encoding"

    def test_contradictory_strict_counts(self):
        with pytest.raises(InvalidOption):
            Options(more_than_count=2, less_than_count=2)
