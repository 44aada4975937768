"""Prohibited-word list and whole-word matching."""
import logging
import re
from pathlib import Path

from folio.core.config import settings

logger = logging.getLogger("folio.moderation")

DEFAULT_BAD_WORDS_FILE = Path(__file__).with_name("bad_words.txt")

# Used only when the word list file cannot be read
FALLBACK_BAD_WORDS = [
    "spam", "scam", "fraud", "phishing", "malware", "harassment", "hate",
    "violence", "terrorism", "pornography", "nsfw", "obscene", "vulgar",
    "murder", "kill", "suicide", "self-harm", "rape", "extortion", "blackmail",
    "ponzi", "ass",
]

_bad_words_cache: list[str] | None = None
_bad_words_pattern: re.Pattern | None = None


def parse_word_list(text: str) -> list[str]:
    words = []
    for line in text.splitlines():
        word = line.strip().lower()
        if word and not word.startswith("#"):
            words.append(word)
    return words


def load_bad_words(path: str | Path | None = None) -> list[str]:
    """Read the word list from disk, falling back to the embedded list."""
    file_path = Path(path or settings.BAD_WORDS_FILE or DEFAULT_BAD_WORDS_FILE)
    try:
        words = parse_word_list(file_path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.warning("[Moderation] Could not load %s, using fallback list: %s", file_path, e)
        return list(FALLBACK_BAD_WORDS)
    if not words:
        logger.warning("[Moderation] %s is empty, using fallback list", file_path)
        return list(FALLBACK_BAD_WORDS)
    return words


def get_bad_words() -> list[str]:
    global _bad_words_cache
    if _bad_words_cache is None:
        _bad_words_cache = load_bad_words()
        logger.info("[Moderation] Loaded %d prohibited terms", len(_bad_words_cache))
    return _bad_words_cache


def build_pattern(words: list[str]) -> re.Pattern | None:
    if not words:
        return None
    # Longest first so "self-harm" wins over a shorter prefix term
    alternation = "|".join(re.escape(w) for w in sorted(set(words), key=len, reverse=True))
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


def _get_pattern() -> re.Pattern | None:
    global _bad_words_pattern
    if _bad_words_pattern is None:
        _bad_words_pattern = build_pattern(get_bad_words())
    return _bad_words_pattern


def set_bad_words(words: list[str] | None) -> None:
    """Replace the process-wide list. None reloads from disk on next use."""
    global _bad_words_cache, _bad_words_pattern
    _bad_words_cache = [w.strip().lower() for w in words if w.strip()] if words is not None else None
    _bad_words_pattern = None


def find_bad_word(content: str) -> str | None:
    """Return the first prohibited term found as a whole word, if any."""
    if not content or not isinstance(content, str):
        return None
    pattern = _get_pattern()
    if pattern is None:
        return None
    match = pattern.search(content)
    return match.group(0).lower() if match else None


def contains_bad_words(content: str) -> bool:
    return find_bad_word(content) is not None
