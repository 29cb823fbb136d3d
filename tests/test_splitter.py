import pytest

from minishell.splitter import count_words, split_words


def test_plain_words():
    assert split_words("ls -l /tmp") == ["ls", "-l", "/tmp"]


def test_extra_spaces_are_ignored():
    assert split_words("   echo    hi   ") == ["echo", "hi"]


@pytest.mark.parametrize("line", ["", " ", "     "])
def test_empty_lines(line):
    assert split_words(line) == []
    assert count_words(line) == 0


def test_double_quotes_keep_spaces():
    assert split_words('echo "a  b" c') == ["echo", '"a  b"', "c"]


def test_single_quotes_keep_spaces():
    assert split_words("echo 'x y'z w") == ["echo", "'x y'z", "w"]


def test_adjacent_quotes_form_one_word():
    assert split_words("\"a b\"'c d'") == ["\"a b\"'c d'"]


def test_tabs_are_not_separators():
    assert split_words("a\tb c") == ["a\tb", "c"]


def test_unclosed_quote_runs_to_end():
    assert split_words('echo "a b') == ["echo", '"a b']


@pytest.mark.parametrize(
    "line",
    ["ls", "echo 'a b' \"c d\" e", "  x  y  z ", "cat < in | wc >> out", "''  \"\""],
)
def test_count_matches_split(line):
    assert count_words(line) == len(split_words(line))


@pytest.mark.parametrize("line", ["echo hi there", "a 'b c' d", " p  q "])
def test_words_have_no_outer_spaces_and_appear_in_order(line):
    words = split_words(line)
    position = 0
    for word in words:
        assert word
        assert not word.startswith(" ") and not word.endswith(" ")
        found = line.find(word, position)
        assert found >= position
        position = found + len(word)