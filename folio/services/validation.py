"""Input sanitization and the content acceptability gate.

Every piece of user text goes through ``sanitize_input`` before it is stored.
The ``validate_*`` functions never raise: they return a ``ValidationResult``
whose ``error`` is meant to be shown to the user verbatim.
"""
import re
from dataclasses import dataclass

from folio.core.config import settings
from folio.core.errors import ValidationCode
from folio.services.bad_words import contains_bad_words

_TAG_RE = re.compile(r"<[^>]*>")
_DANGEROUS_RES = [
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"\bon\w+\s*=", re.IGNORECASE),  # inline event handlers: onclick=
    re.compile(r"data:", re.IGNORECASE),
    re.compile(r"vbscript:", re.IGNORECASE),
    re.compile(r"file:", re.IGNORECASE),
]

ALLOWED_HTML_TAGS = ("b", "strong", "i", "em", "u", "code", "pre", "a", "p", "br")
_DISALLOWED_TAG_RE = re.compile(rf"<(?!/?(?:{'|'.join(ALLOWED_HTML_TAGS)})\b)[^>]*>", re.IGNORECASE)
_ALLOWED_TAG_RE = re.compile(r"<(/?)([a-z]+)\b([^>]*)>", re.IGNORECASE)
_HREF_RE = re.compile(r"""href\s*=\s*["']?([^"'\s>]+)["']?""", re.IGNORECASE)

SPAM_KEYWORDS = [
    "buy now", "click here", "limited time", "act now",
    "make money", "get rich", "free money", "guaranteed",
    "no credit check", "winner", "congratulations", "prize",
]
MAX_CAPS_RATIO = 0.7
MIN_WORDS_FOR_CAPS_CHECK = 3
MAX_LINKS = 3
_REPEATED_CHARS_RE = re.compile(r"(.)\1{4,}")
_LINK_RE = re.compile(r"https?://", re.IGNORECASE)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
EMAIL_DOMAINS = ["outlook.com", "gmail.com", "yahoo.com"]

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 15
USERNAME_RE = re.compile(r"^[a-zA-Z0-9_]+$")
RESERVED_USERNAMES = ["admin", "administrator", "root", "system", "null", "undefined", "api", "www"]

DISPLAY_NAME_MAX_LENGTH = 50
HANDLE_MAX_LENGTH = 20


@dataclass
class ValidationResult:
    valid: bool
    error: str | None = None
    code: ValidationCode | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(True)

    @classmethod
    def fail(cls, code: ValidationCode, error: str) -> "ValidationResult":
        return cls(False, error, code)


def _strip_once(text: str) -> str:
    text = _TAG_RE.sub("", text)
    for pattern in _DANGEROUS_RES:
        text = pattern.sub("", text)
    return text.strip()


def sanitize_input(value) -> str:
    """Strip markup and script-bearing URI schemes from plain-text input.

    Removing one pattern can expose another (``javajavascript:script:``),
    so the passes repeat until the text stops changing.
    """
    if not isinstance(value, str):
        return ""
    text = value
    while True:
        stripped = _strip_once(text)
        if stripped == text:
            return text
        text = stripped


def _rewrite_allowed_tag(match: re.Match) -> str:
    closing, tag, attrs = match.group(1), match.group(2).lower(), match.group(3)
    if closing:
        return f"</{tag}>"
    if tag != "a":
        return f"<{tag}>"
    href = _HREF_RE.search(attrs)
    if href and href.group(1).lower().startswith(("http://", "https://")):
        return f'<a href="{href.group(1)}" target="_blank" rel="noopener noreferrer">'
    return ""


def sanitize_html(html) -> str:
    """Keep only inline formatting tags; anchors only with http(s) links."""
    if not isinstance(html, str):
        return ""
    sanitized = _DISALLOWED_TAG_RE.sub("", html)
    return _ALLOWED_TAG_RE.sub(_rewrite_allowed_tag, sanitized)


def sanitize_image_url(url) -> str | None:
    """Only inline image uploads or same-origin paths are accepted."""
    if not url or not isinstance(url, str):
        return None
    trimmed = url.strip()
    if trimmed.startswith("data:image/") or (trimmed.startswith("/") and not trimmed.startswith("//")):
        return trimmed
    return None


def check_content_moderation(content: str) -> ValidationResult:
    """Spam heuristics. Empty content is left to the emptiness check."""
    if not content or not isinstance(content, str):
        return ValidationResult.ok()

    lower_content = content.lower()
    for keyword in SPAM_KEYWORDS:
        if keyword in lower_content:
            return ValidationResult.fail(ValidationCode.SPAM_HEURISTIC_FAILED, "Content contains prohibited keywords")

    if _REPEATED_CHARS_RE.search(content):
        return ValidationResult.fail(ValidationCode.SPAM_HEURISTIC_FAILED, "Content contains too many repeated characters")

    words = content.split()
    if len(words) >= MIN_WORDS_FOR_CAPS_CHECK:
        upper = sum(1 for ch in content if ch.isupper())
        if upper / len(content) > MAX_CAPS_RATIO:
            return ValidationResult.fail(ValidationCode.SPAM_HEURISTIC_FAILED, "Content contains excessive capitalization")

    if len(_LINK_RE.findall(content)) > MAX_LINKS:
        return ValidationResult.fail(ValidationCode.SPAM_HEURISTIC_FAILED, "Too many links in content")

    return ValidationResult.ok()


def validate_text(
    content,
    max_length: int,
    *,
    noun: str = "Tweet",
    identity: tuple[str, ...] = (),
) -> ValidationResult:
    """Run the full gate: emptiness, sanitize, length, spam, prohibited words.

    ``identity`` strings (author, handle) are checked for prohibited words
    together with the body.
    """
    if not content or not isinstance(content, str):
        return ValidationResult.fail(ValidationCode.EMPTY_CONTENT, f"{noun} content is required")

    sanitized = sanitize_input(content)
    if not sanitized:
        return ValidationResult.fail(ValidationCode.EMPTY_CONTENT, f"{noun} cannot be empty")

    if len(sanitized) > max_length:
        return ValidationResult.fail(ValidationCode.TOO_LONG, f"{noun} must be {max_length} characters or less")

    moderation = check_content_moderation(sanitized)
    if not moderation.valid:
        return moderation

    to_check = " ".join([sanitized, *(sanitize_input(part) for part in identity if part)])
    if contains_bad_words(to_check):
        return ValidationResult.fail(
            ValidationCode.PROHIBITED_WORD,
            "Content contains inappropriate language and cannot be posted.",
        )

    return ValidationResult.ok()


def validate_tweet_content(content, max_length: int | None = None, *, author: str = "", handle: str = "") -> ValidationResult:
    return validate_text(
        content,
        max_length or settings.TWEET_MAX_LENGTH,
        noun="Tweet",
        identity=(author, handle),
    )


def validate_comment_content(content, max_length: int | None = None, *, author: str = "") -> ValidationResult:
    return validate_text(
        content,
        max_length or settings.COMMENT_MAX_LENGTH,
        noun="Comment",
        identity=(author,),
    )


def validate_display_name(name) -> ValidationResult:
    cleaned = sanitize_input(name)
    if not cleaned:
        return ValidationResult.fail(ValidationCode.INVALID_IDENTITY, "Display name is required")
    if len(cleaned) > DISPLAY_NAME_MAX_LENGTH:
        return ValidationResult.fail(
            ValidationCode.INVALID_IDENTITY,
            f"Display name must be {DISPLAY_NAME_MAX_LENGTH} characters or less",
        )
    if contains_bad_words(cleaned):
        return ValidationResult.fail(ValidationCode.PROHIBITED_WORD, "Display name contains inappropriate language")
    return ValidationResult.ok()


def validate_handle(handle) -> ValidationResult:
    cleaned = sanitize_input(handle).lstrip("@")
    if not cleaned or len(cleaned) > HANDLE_MAX_LENGTH:
        return ValidationResult.fail(
            ValidationCode.INVALID_IDENTITY,
            f"Handle must be between 1 and {HANDLE_MAX_LENGTH} characters",
        )
    if not USERNAME_RE.match(cleaned):
        return ValidationResult.fail(
            ValidationCode.INVALID_IDENTITY,
            "Handle can only contain letters, numbers, and underscores",
        )
    return ValidationResult.ok()


def validate_username(username) -> ValidationResult:
    if not username or not isinstance(username, str):
        return ValidationResult.fail(ValidationCode.INVALID_IDENTITY, "Username is required")
    cleaned = username.strip().lstrip("@")
    if len(cleaned) < USERNAME_MIN_LENGTH:
        return ValidationResult.fail(
            ValidationCode.INVALID_IDENTITY, f"Username must be at least {USERNAME_MIN_LENGTH} characters"
        )
    if len(cleaned) > USERNAME_MAX_LENGTH:
        return ValidationResult.fail(
            ValidationCode.INVALID_IDENTITY, f"Username must be {USERNAME_MAX_LENGTH} characters or less"
        )
    if not USERNAME_RE.match(cleaned):
        return ValidationResult.fail(
            ValidationCode.INVALID_IDENTITY, "Username can only contain letters, numbers, and underscores"
        )
    if cleaned.lower() in RESERVED_USERNAMES:
        return ValidationResult.fail(ValidationCode.INVALID_IDENTITY, "This username is reserved")
    return ValidationResult.ok()


def validate_email_format(email) -> ValidationResult:
    if not email or not isinstance(email, str):
        return ValidationResult.fail(ValidationCode.INVALID_IDENTITY, "Email is required")
    if not EMAIL_RE.match(email.strip()):
        return ValidationResult.fail(ValidationCode.INVALID_IDENTITY, "Invalid email format")
    return ValidationResult.ok()


def validate_email_domain(email) -> ValidationResult:
    result = validate_email_format(email)
    if not result.valid:
        return result
    domain = email.strip().split("@")[1].lower()
    if domain not in EMAIL_DOMAINS:
        return ValidationResult.fail(
            ValidationCode.INVALID_IDENTITY, f"Only {', '.join(EMAIL_DOMAINS)} emails are allowed"
        )
    return ValidationResult.ok()
