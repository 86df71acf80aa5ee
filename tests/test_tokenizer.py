"""Tests for the argument tokenizer."""

import pytest
from hypothesis import given, strategies as st

from modparams import iter_args, next_arg, normalize_name
from modparams.tokenizer import names_match, skip_spaces


class TestIterArgs:
    """Tests for splitting argument strings into pairs."""

    def test_basic_pairs(self):
        """Test the canonical mixed example."""
        assert list(iter_args('foo=bar wiz="a b c" baz')) == [
            ("foo", "bar"),
            ("wiz", "a b c"),
            ("baz", None),
        ]

    def test_comma_values_untouched(self):
        """Test commas belong to the value."""
        assert list(iter_args("foo=bar,bar2 baz=fuz wiz")) == [
            ("foo", "bar,bar2"),
            ("baz", "fuz"),
            ("wiz", None),
        ]

    def test_leading_and_repeated_whitespace(self):
        """Test whitespace runs separate tokens and are skipped."""
        assert list(iter_args(" \t a=1 \n  b  ")) == [("a", "1"), ("b", None)]

    def test_empty_and_blank(self):
        """Test no tokens from empty input."""
        assert list(iter_args("")) == []
        assert list(iter_args("   ")) == []

    def test_empty_value(self):
        """Test name= yields an empty value, not an absent one."""
        assert list(iter_args("a=")) == [("a", "")]
        assert list(iter_args('a=""')) == [("a", "")]

    def test_value_keeps_later_equals(self):
        """Test only the first = splits."""
        assert list(iter_args("a=b=c")) == [("a", "b=c")]

    def test_leading_equals_is_part_of_name(self):
        """Test an "=" at the start of a token does not split it."""
        assert list(iter_args("=5 x")) == [("=5", None), ("x", None)]
        assert list(iter_args("=a=b")) == [("=a", "b")]
        assert list(iter_args('"=5"')) == [("=5", None)]

    def test_fully_quoted_token(self):
        """Test a token quoted from its first character."""
        assert list(iter_args('"foo=bar baz" next')) == [("foo", "bar baz"), ("next", None)]

    def test_quoted_flag(self):
        """Test a quoted token without a value."""
        assert list(iter_args('"flag" x=1')) == [("flag", None), ("x", "1")]

    def test_unterminated_quote_runs_to_end(self):
        """Test an unclosed quote swallows the rest of the input."""
        assert list(iter_args('a="b c d')) == [("a", "b c d")]

    def test_inner_quotes_kept(self):
        """Test quotes not at the value start are preserved."""
        assert list(iter_args('a=x"y z"')) == [("a", 'x"y z"')]

    def test_input_not_modified(self):
        """Test the source text can be tokenized repeatedly."""
        text = 'foo=bar wiz="a b c"'
        first = list(iter_args(text))
        second = list(iter_args(text))
        assert first == second
        assert text == 'foo=bar wiz="a b c"'

    @given(st.lists(
        st.tuples(
            st.text(alphabet="abcxyz_-", min_size=1, max_size=8),
            st.one_of(st.none(), st.text(alphabet="abc123,.:", max_size=8)),
        ),
        max_size=6,
    ))
    def test_unquoted_pairs_round_trip(self, pairs):
        """Test joining simple pairs and tokenizing recovers them."""
        text = " ".join(name if value is None else f"{name}={value}" for name, value in pairs)
        assert list(iter_args(text)) == pairs

    @given(st.text(alphabet="abc d=", max_size=10))
    def test_quoted_values_round_trip(self, value):
        """Test any quote-free value survives quoting."""
        pairs = list(iter_args(f'n="{value}"'))
        assert pairs == [("n", value)]


class TestNextArg:
    """Tests for single-step extraction."""

    def test_returns_next_position(self):
        """Test the returned position points at the next token."""
        text = "a=1   b"
        name, value, pos = next_arg(text, 0)
        assert (name, value) == ("a", "1")
        assert text[pos:] == "b"

    def test_skip_spaces(self):
        """Test whitespace skipping helper."""
        assert skip_spaces("  x") == 2
        assert skip_spaces("x") == 0
        assert skip_spaces("   ") == 3


class TestNames:
    """Tests for hyphen/underscore normalisation."""

    def test_normalize(self):
        """Test hyphens become underscores."""
        assert normalize_name("my-opt-name") == "my_opt_name"

    def test_input_side_only(self):
        """Test only the given name is normalised."""
        assert names_match("my-opt", "my_opt")
        assert names_match("my_opt", "my_opt")
        assert not names_match("my_opt", "my-opt")

    def test_case_sensitive(self):
        """Test names are compared case-sensitively."""
        assert not names_match("My_opt", "my_opt")

    @pytest.mark.parametrize("given_name", ["my", "my_opt_x", ""])
    def test_prefixes_do_not_match(self, given_name):
        """Test matching is exact, not prefix-based."""
        assert not names_match(given_name, "my_opt")
