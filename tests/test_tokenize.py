import pytest

from ftkit.tokenize import tokenize


def test_simple_words():
    assert tokenize("ls -l /tmp") == ["ls", "-l", "/tmp"]


def test_empty_string_has_no_tokens():
    assert tokenize("") == []


def test_leading_spaces_and_tabs_are_skipped():
    assert tokenize("  \techo\t hi") == ["echo", "hi"]


def test_quoted_token_kept_whole():
    assert tokenize("'a b'") == ["'a b'"]


def test_double_quoted_argument():
    assert tokenize('grep "x y"') == ["grep", '"x y"']


def test_unterminated_quote_runs_to_end():
    assert tokenize("echo 'abc") == ["echo", "'abc"]


def test_backslash_escapes_following_blank():
    assert tokenize("a\\ b c") == ["a\\ b", "c"]


def test_trailing_blank_gives_empty_token():
    assert tokenize("cat ") == ["cat", ""]


@pytest.mark.parametrize("line", ["one", "one two", "x\ty\tz", "cmd 'q r' s"])
def test_tokens_contain_no_unquoted_outer_blanks(line):
    tokens = tokenize(line)
    assert all(token == token.strip(" \t") for token in tokens)
    assert "".join(tokens) == line.replace(" ", "").replace("\t", "") or any(
        "'" in t for t in tokens
    )