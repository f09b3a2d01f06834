"""Tests for the rule compiler."""
import logging
import string

import pytest
from lexfsm_text import ALPHABET, check_symbol, compile_rule

_PRINTABLE = string.printable + "\0"


def _accepted(pattern):
    rule = compile_rule(pattern)
    return {c for c in _PRINTABLE if rule(c)}


class TestLiterals:
    """Test cases for plain characters."""

    def test_single_literal(self):
        assert _accepted("a") == {"a"}

    def test_alternatives(self):
        assert _accepted("+*/") == {"+", "*", "/"}

    def test_empty_pattern_matches_nothing(self):
        assert _accepted("") == set()

    def test_rule_is_reusable(self):
        """A compiled rule gives the same answer on every call."""
        rule = compile_rule("xy")

        assert [rule("x") for _ in range(3)] == [True, True, True]
        assert [rule("z") for _ in range(3)] == [False, False, False]

    def test_check_symbol(self):
        assert check_symbol("abc", "b") is True
        assert check_symbol("abc", "d") is False

    def test_non_str_pattern_raises(self):
        with pytest.raises(TypeError, match="must be str"):
            compile_rule(b"a")


class TestRanges:
    """Test cases for X-Y ranges over ALPHABET."""

    def test_lowercase_range(self):
        """a-z accepts every lowercase letter and nothing else."""
        rule = compile_rule("a-z")

        assert all(rule(c) for c in string.ascii_lowercase)
        assert not rule("A")
        assert not rule("5")
        assert not rule("_")

    def test_partial_range(self):
        assert _accepted("c-f") == set("cdef")

    def test_single_element_range(self):
        assert _accepted("q-q") == {"q"}

    def test_range_spans_alphabet_segments(self):
        """Bounds are positions in ALPHABET, not character codes."""
        assert _accepted("y-B") == set("yzAB")
        assert _accepted("Z-1") == set("Z01")

    def test_digit_range(self):
        assert _accepted("0-9") == set(string.digits)

    def test_several_ranges(self):
        assert _accepted("a-zA-Z_") == set(string.ascii_letters + "_")

    def test_reversed_range_is_empty(self):
        """Only the literal lower bound survives."""
        assert _accepted("z-a") == {"z"}

    def test_bound_outside_alphabet_is_empty(self):
        assert _accepted("_-z") == {"_"}
        assert _accepted("a-_") == {"a"}

    def test_leading_hyphen_consumes_next_char(self):
        """With no lower bound the range is empty and swallows its upper bound."""
        assert _accepted("-a") == set()
        assert _accepted("-ab") == {"b"}

    def test_trailing_hyphen_matches_nothing(self):
        """An open range at the end adds nothing."""
        assert _accepted("a-") == {"a"}
        assert _accepted("-") == set()

    def test_range_after_escape_uses_escaped_char(self):
        """The lower bound is the last pattern character consumed."""
        assert _accepted("\\d-f") == set(string.digits) | set("def")

    def test_chained_ranges(self):
        assert _accepted("a-c-e") == set("abcde")

    def test_alphabet_order(self):
        assert ALPHABET == string.ascii_lowercase + string.ascii_uppercase + string.digits


class TestWildcardAndNegation:
    """Test cases for . and ^."""

    def test_dot_accepts_anything(self):
        rule = compile_rule(".")

        assert all(rule(c) for c in _PRINTABLE)

    def test_negated_literal(self):
        """^a accepts every symbol except a."""
        assert _accepted("^a") == set(_PRINTABLE) - {"a"}

    def test_negated_range(self):
        assert _accepted("^0-9") == set(_PRINTABLE) - set(string.digits)

    def test_negated_dot_rejects_everything(self):
        assert _accepted("^.") == set()

    def test_dot_short_circuits(self):
        """Nothing after the dot matters."""
        assert _accepted(".^") == set(_PRINTABLE)

    def test_literal_before_dot(self):
        assert _accepted("^a.") == set()

    def test_negation_applies_to_later_alternatives_only(self):
        """a^b accepts a, rejects b, accepts everything else."""
        rule = compile_rule("a^b")

        assert rule("a") is True
        assert rule("b") is False
        assert rule("c") is True

    def test_caret_alone_accepts_everything(self):
        assert _accepted("^") == set(_PRINTABLE)


class TestEscapes:
    """Test cases for backslash shorthands."""

    def test_digit_class(self):
        """\\d accepts 0-9 and rejects letters."""
        rule = compile_rule("\\d")

        assert all(rule(c) for c in string.digits)
        assert not rule("a")

    def test_word_class(self):
        assert _accepted("\\w") == set(string.ascii_letters)

    def test_space_class_excludes_newline(self):
        assert _accepted("\\s") == {" ", "\t"}

    def test_control_characters(self):
        assert _accepted("\\n") == {"\n"}
        assert _accepted("\\t") == {"\t"}
        assert _accepted("\\0") == {"\0"}

    @pytest.mark.parametrize("char", ["\\", "^", "-", "."])
    def test_escaped_specials(self, char):
        assert _accepted("\\" + char) == {char}

    def test_negated_escape(self):
        assert _accepted("^\\s\\n") == set(_PRINTABLE) - {" ", "\t", "\n"}

    def test_lone_trailing_backslash_matches_nothing(self):
        """A trailing backslash does not crash and contributes no match."""
        assert _accepted("\\") == set()
        assert _accepted("a\\") == {"a"}

    def test_unknown_escape_matches_nothing(self):
        assert _accepted("\\q") == set()
        assert _accepted("\\qx") == {"x"}


class TestWarnings:
    """Malformed tails are logged but never raise."""

    def test_trailing_backslash_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="lexfsm_text.rules"):
            compile_rule("ab\\")

        assert "bad escape" in caplog.text

    def test_open_range_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="lexfsm_text.rules"):
            compile_rule("a-")

        assert "open range" in caplog.text

    def test_valid_rule_is_quiet(self, caplog):
        with caplog.at_level(logging.WARNING, logger="lexfsm_text.rules"):
            compile_rule("^a-z\\d\\s.")

        assert caplog.text == ""
