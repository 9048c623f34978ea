import pytest

from simple_hashtag.core.configuration import AnyOf, Single
from simple_hashtag.core import configuration
from simple_hashtag.domain.parser import parse
from simple_hashtag.errors import InvalidArgument


def test_parse_splits_on_default_delimiter():
    assert parse("Fun,Happy") == ["Fun", "Happy"]

def test_parse_keeps_raw_whitespace_and_blanks():
    # Normalization belongs to TagList
    assert parse("Fun, ,Happy, Fun") == ["Fun", " ", "Happy", " Fun"]
    assert parse("a,,b") == ["a", "", "b"]
    assert parse("a,") == ["a", ""]

def test_parse_quoted_token_keeps_delimiter():
    assert parse('Round, "Square,Cube"') == ["Round", "Square,Cube"]

def test_parse_quoted_token_first_and_middle():
    assert parse('"Square,Cube" , Round') == ["Square,Cube", " Round"]
    assert parse('a, "b,c", d') == ["a", "b,c", " d"]

def test_parse_single_quotes():
    assert parse("Round, 'Square,Cube'") == ["Round", "Square,Cube"]

def test_parse_quote_inside_token_is_literal():
    assert parse('6" nails, hammer') == ['6" nails', " hammer"]

def test_parse_quotes_not_closing_the_token_are_literal():
    assert parse('"a"b, c') == ['"a"b', " c"]

def test_parse_unterminated_quote_keeps_rest_as_text():
    assert parse('a, "b, c') == ["a", ' "b, c']

def test_parse_unterminated_quote_at_start():
    assert parse('"open') == ['"open']

def test_parse_empty_and_missing_input():
    assert parse(None) == []
    assert parse("") == []
    assert parse("   ") == []

def test_parse_passes_sequences_through():
    assert parse(["a,b", " c "]) == ["a,b", " c "]
    assert parse(("x",)) == ["x"]

def test_parse_rejects_unsupported_types():
    with pytest.raises(InvalidArgument):
        parse(42)
    with pytest.raises(InvalidArgument):
        parse(b"a,b")

def test_parse_with_explicit_multi_character_delimiter():
    assert parse("a; b;c", delimiter=Single("; ")) == ["a", "b;c"]

def test_parse_with_any_of_delimiters():
    delimiter = AnyOf((",", ";", "|"))
    assert parse("a,b;c|d", delimiter=delimiter) == ["a", "b", "c", "d"]
    assert parse('a;"b|c",d', delimiter=delimiter) == ["a", "b|c", "d"]

def test_parse_any_of_prefers_longest_candidate():
    delimiter = AnyOf((";", "; "))
    assert parse("a; b;c", delimiter=delimiter) == ["a", "b", "c"]

def test_parse_uses_process_configuration():
    configuration.setup(delimiter="|")
    assert parse("a|b,c") == ["a", "b,c"]

def test_parse_space_delimiter_with_quotes():
    assert parse('big "red apple" pie', delimiter=Single(" ")) == ["big", "red apple", "pie"]
