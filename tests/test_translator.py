import pytest

from classicalgos.translator import BUCKETS, Dictionary, bucket_of, run


@pytest.mark.parametrize("word", ["", "a", "hello", "zzzzzzzzzzzzzz", "mundo"])
def test_bucket_in_range_and_deterministic(word):
    bucket = bucket_of(word)
    assert 0 <= bucket < BUCKETS
    assert bucket == bucket_of(word)


@pytest.mark.parametrize("word, expected", [("", 69), ("a", 50)])
def test_bucket_count_fixed(word, expected):
    assert BUCKETS == 83
    assert bucket_of(word) == expected


def test_lookup_known_and_unknown():
    d = Dictionary()
    d.add("world", "mundo inteiro")
    assert d.lookup("world") == ["mundo", "inteiro"]
    assert d.lookup("planet") is None


def test_later_entry_wins():
    d = Dictionary()
    d.add("cat", "gato")
    d.add("cat", "felino")
    assert d.lookup("cat") == ["felino"]


def test_translation_splits_on_spaces_only():
    d = Dictionary()
    d.add("x", "  um   dois ")
    assert d.lookup("x") == ["um", "dois"]


def test_translate_line_keeps_unknown_words():
    d = Dictionary()
    d.add("hello", "ola")
    assert d.translate_line("hello there") == "ola there "


def test_translate_line_break_token():
    d = Dictionary()
    assert d.translate_line("a @ b") == "a \nb "


def test_translate_lines():
    d = Dictionary()
    d.add("hello", "ola")
    assert d.translate(["hello\n", "hello hello\n"]) == "ola \nola ola \n\n"


def test_run_worked_example():
    text = "2 2\nhello\nola\nworld\nmundo inteiro\nhello world\nfoo hello\n"
    assert run(text) == "ola mundo inteiro \nfoo ola \n\n"


def test_run_last_line_without_newline():
    text = "1 1\nyes\nsim\nyes no"
    assert run(text) == "sim no \n"


def test_run_rejects_missing_header():
    with pytest.raises(ValueError):
        run("")


def test_run_rejects_missing_terms():
    with pytest.raises(ValueError):
        run("2 0\nhello\nola\n")