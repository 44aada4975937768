from folio.services import bad_words
from folio.services.bad_words import (
    FALLBACK_BAD_WORDS,
    build_pattern,
    contains_bad_words,
    find_bad_word,
    load_bad_words,
    parse_word_list,
    set_bad_words,
)


def test_parse_word_list_skips_comments_and_blanks():
    text = "# header\n\nSpam\n  scam  \n# another\n"
    assert parse_word_list(text) == ["spam", "scam"]


def test_load_bad_words_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# list\nfoo\nbar\n", encoding="utf-8")
    assert load_bad_words(path) == ["foo", "bar"]


def test_load_bad_words_missing_file_uses_fallback(tmp_path):
    assert load_bad_words(tmp_path / "missing.txt") == FALLBACK_BAD_WORDS


def test_load_bad_words_empty_file_uses_fallback(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("# nothing here\n", encoding="utf-8")
    assert load_bad_words(path) == FALLBACK_BAD_WORDS


def test_shipped_list_loads():
    words = load_bad_words(bad_words.DEFAULT_BAD_WORDS_FILE)
    assert "spam" in words
    assert all(w == w.lower() and not w.startswith("#") for w in words)


def test_whole_word_case_insensitive():
    assert find_bad_word("This is SPAM content") == "spam"
    assert find_bad_word("spam, scam!") == "spam"
    assert find_bad_word("spammer's delight") is None
    assert not contains_bad_words("")


def test_longest_term_wins():
    pattern = build_pattern(["self", "self-harm"])
    assert pattern.search("no self-harm here").group(0) == "self-harm"


def test_set_bad_words_replaces_list():
    set_bad_words(["Kumquat"])
    assert contains_bad_words("a kumquat tree")
    assert not contains_bad_words("spam")


def test_empty_list_matches_nothing():
    set_bad_words([])
    assert not contains_bad_words("spam scam")
