"""Tests for the column analyzer."""

import pytest

from file2ddl.analysis.analyzer import Analyzer, ColumnState, analyze
from file2ddl.core.errors import ConfigurationError, StructuralError
from file2ddl.core.models.base import ColumnType, QuoteMode


def _types(result) -> dict[str, str]:
    return {name: str(column_type) for name, column_type in result.columns()}


class TestColumnState:
    def test_promotion_is_monotone(self, postgresql):
        state = ColumnState(index=0, name="v", rank=postgresql.most_specific)
        values = ["1", "40000", "7", "t", "2"]

        for value in values:
            state.observe(value, postgresql)

        assert state.rank == max(postgresql.infer_rank(v) for v in values)
        assert postgresql.candidate(state.rank).name == "integer"

    def test_observe_reports_promotion(self, postgresql):
        state = ColumnState(index=0, name="v", rank=postgresql.most_specific)
        assert state.observe("12", postgresql) is True
        assert state.observe("13", postgresql) is False
        assert state.observe("true", postgresql) is False

    def test_tracks_bounded_text_length(self, postgresql):
        state = ColumnState(index=0, name="v", rank=postgresql.most_specific)
        for value in ["ab", "abcde"]:
            state.observe(value, postgresql)

        assert state.column_type(postgresql) == ColumnType(name="varchar", length=5)

    def test_length_ignores_values_of_other_ranks(self, postgresql):
        state = ColumnState(index=0, name="v", rank=postgresql.most_specific)
        for value in ["abc", "1234567"]:
            state.observe(value, postgresql)

        assert state.column_type(postgresql) == ColumnType(name="varchar", length=3)

    def test_no_length_for_fixed_types(self, postgresql):
        state = ColumnState(index=0, name="v", rank=postgresql.most_specific)
        state.observe("2024-01-01", postgresql)

        assert state.column_type(postgresql) == ColumnType(name="date")


class TestAnalyze:
    def test_infers_each_column(self, postgresql):
        lines = [
            "id,flag,amount,when,label",
            "1,true,1.5,2024-01-01,x",
            "2,f,2,2024-01-02 10:00:00,yz",
        ]
        result = analyze(lines, ",", catalog=postgresql)

        assert result.column_names == ["id", "flag", "amount", "when", "label"]
        assert _types(result) == {
            "id": "smallint",
            "flag": "boolean",
            "amount": "numeric",
            "when": "date",
            "label": "varchar(2)",
        }
        assert result.rows_scanned == 2
        assert result.dialect == "postgresql"

    def test_date_is_less_specific_than_timestamp(self, postgresql):
        lines = ["when", "2024-01-02 10:00:00", "2024-01-03T11:00:00"]
        assert _types(analyze(lines, ",", catalog=postgresql)) == {"when": "timestamp"}

        lines.append("2024-01-04")
        assert _types(analyze(lines, ",", catalog=postgresql)) == {"when": "date"}

    def test_header_only_keeps_most_specific_type(self, postgresql):
        result = analyze(["a,b"], ",", catalog=postgresql)
        assert _types(result) == {"a": "boolean", "b": "boolean"}
        assert result.rows_scanned == 0

    def test_empty_input(self, postgresql):
        result = analyze([], ",", catalog=postgresql)
        assert result.column_names == []
        assert result.column_types == []

    def test_default_catalog_from_settings(self):
        result = analyze(["n", "32768"], ",")
        assert _types(result) == {"n": "integer"}

    def test_accepts_any_iterable(self, postgresql):
        lines = (line for line in ["n", "1", "2"])
        assert _types(analyze(lines, ",", catalog=postgresql)) == {"n": "smallint"}

    def test_quoted_header_and_rows(self, postgresql):
        lines = ['"last, first",age', '"Doe, Jane",41', '"Roe, Richard",39']
        result = analyze(lines, ",", QuoteMode.DOUBLE, catalog=postgresql)

        assert result.column_names == ["last, first", "age"]
        assert _types(result) == {"last, first": "varchar(12)", "age": "smallint"}

    def test_long_digit_string_is_bounded_text(self, postgresql):
        result = analyze(["n", "1" * 5000], ",", catalog=postgresql)
        assert _types(result) == {"n": "varchar(5000)"}

    def test_text_column_after_long_value(self, postgresql):
        lines = ["note", "short", "x" * 70000, "tiny"]
        assert _types(analyze(lines, ",", catalog=postgresql)) == {"note": "text"}


class TestArity:
    def test_short_row(self, postgresql):
        with pytest.raises(StructuralError) as exc_info:
            analyze(["a,b,c", "1,2"], ",", catalog=postgresql)

        err = exc_info.value
        assert err.line_number == 2
        assert err.expected == 3
        assert err.actual == 2
        assert str(err) == "line 2 has 2 fields, expected 3"

    def test_long_row_later_in_file(self, postgresql):
        with pytest.raises(StructuralError, match="line 4 has 4 fields, expected 3"):
            analyze(["a,b,c", "1,2,3", "4,5,6", "7,8,9,10"], ",", catalog=postgresql)

    def test_stops_at_first_bad_row(self, postgresql):
        consumed = []

        def lines():
            for line in ["a,b", "1,2", "3", "4,5", "6"]:
                consumed.append(line)
                yield line

        with pytest.raises(StructuralError) as exc_info:
            analyze(lines(), ",", catalog=postgresql)

        assert exc_info.value.line_number == 3
        assert consumed == ["a,b", "1,2", "3"]

    def test_arity_counts_tokenized_fields(self, postgresql):
        lines = ["a,b", '"1,2",3']
        with pytest.raises(StructuralError):
            analyze(lines, ",", QuoteMode.NONE, catalog=postgresql)

        result = analyze(lines, ",", QuoteMode.DOUBLE, catalog=postgresql)
        assert result.column_names == ["a", "b"]

    def test_empty_line_is_a_row(self, postgresql):
        with pytest.raises(StructuralError, match="line 3 has 1 fields, expected 2"):
            analyze(["a,b", "1,2", ""], ",", catalog=postgresql)


class TestConfiguration:
    def test_expected_columns_match(self, postgresql):
        result = analyze(["a,b,c", "1,2,3"], ",", expected_columns=3, catalog=postgresql)
        assert len(result.column_types) == 3

    def test_expected_columns_mismatch(self, postgresql):
        consumed = []

        def lines():
            for line in ["a,b,c", "1,2"]:
                consumed.append(line)
                yield line

        with pytest.raises(ConfigurationError, match="header line has 3 fields, expected 5"):
            analyze(lines(), ",", expected_columns=5, catalog=postgresql)
        assert consumed == ["a,b,c"]

    def test_expected_columns_with_empty_input(self, postgresql):
        with pytest.raises(ConfigurationError, match="header line has 0 fields, expected 2"):
            analyze([], ",", expected_columns=2, catalog=postgresql)

    @pytest.mark.parametrize("count", [0, -1])
    def test_expected_columns_must_be_positive(self, postgresql, count):
        with pytest.raises(ConfigurationError, match="must be positive"):
            Analyzer(postgresql, ",", expected_columns=count)

    @pytest.mark.parametrize("delimiter", ["", ",,", "::"])
    def test_delimiter_must_be_single_character(self, postgresql, delimiter):
        with pytest.raises(ConfigurationError, match="single character"):
            Analyzer(postgresql, delimiter)

    def test_unknown_quote_mode(self, postgresql):
        with pytest.raises(ConfigurationError, match="unsupported quote mode: backtick"):
            Analyzer(postgresql, ",", quote_mode="backtick")

    @pytest.mark.parametrize(
        "delimiter,mode",
        [('"', QuoteMode.DOUBLE), ("'", QuoteMode.SINGLE)],
    )
    def test_delimiter_cannot_be_quote_character(self, postgresql, delimiter, mode):
        with pytest.raises(ConfigurationError, match="quote character"):
            Analyzer(postgresql, delimiter, mode)

    def test_quote_character_as_delimiter_without_quoting(self, postgresql):
        result = analyze(['a"b', '1"2'], '"', QuoteMode.NONE, catalog=postgresql)
        assert result.column_names == ["a", "b"]
