import pytest

from folio.core.errors import ValidationCode
from folio.services.validation import (
    check_content_moderation,
    sanitize_html,
    sanitize_image_url,
    sanitize_input,
    validate_comment_content,
    validate_display_name,
    validate_email_domain,
    validate_email_format,
    validate_handle,
    validate_tweet_content,
    validate_username,
)


class TestSanitizeInput:
    def test_strips_tags(self):
        assert sanitize_input("<b>Hello</b> <script>alert(1)</script>world") == "Hello alert(1)world"

    def test_strips_script_schemes_and_handlers(self):
        assert sanitize_input("javascript:alert(1)") == "alert(1)"
        assert sanitize_input("img onerror=boom") == "img boom"
        assert sanitize_input("VBScript:x data:y file:z") == "x y z"

    def test_keeps_words_containing_on(self):
        assert sanitize_input("done = true") == "done = true"

    def test_trims(self):
        assert sanitize_input("   hi   ") == "hi"

    def test_non_string_is_empty(self):
        assert sanitize_input(None) == ""
        assert sanitize_input(42) == ""

    @pytest.mark.parametrize(
        "value",
        [
            "javajavascript:script:alert(1)",
            "<<b>script>x",
            "  <p> on onclick= click</p> ",
            "dadata:ta:text",
            "plain text",
            "",
        ],
    )
    def test_idempotent(self, value):
        once = sanitize_input(value)
        assert sanitize_input(once) == once


class TestSanitizeHtml:
    def test_keeps_allowed_tags(self):
        assert sanitize_html("<b>bold</b> <em>it</em>") == "<b>bold</b> <em>it</em>"

    def test_drops_other_tags(self):
        assert sanitize_html("<div><script>x</script><i>y</i></div>") == "x<i>y</i>"

    def test_rewrites_http_links(self):
        out = sanitize_html('<a href="https://example.com" onclick="x()">go</a>')
        assert out == '<a href="https://example.com" target="_blank" rel="noopener noreferrer">go</a>'

    def test_drops_script_links(self):
        assert sanitize_html('<a href="javascript:alert(1)">go</a>') == "go</a>"


class TestSanitizeImageUrl:
    def test_data_image_and_relative_paths(self):
        assert sanitize_image_url("data:image/png;base64,AAA") == "data:image/png;base64,AAA"
        assert sanitize_image_url(" /uploads/a.png ") == "/uploads/a.png"

    def test_rejects_everything_else(self):
        assert sanitize_image_url("https://evil.example/x.png") is None
        assert sanitize_image_url("//evil.example/x.png") is None
        assert sanitize_image_url("data:text/html,<b>") is None
        assert sanitize_image_url(None) is None


class TestSpamHeuristics:
    def test_keyword(self):
        result = check_content_moderation("Click here to win")
        assert not result.valid
        assert result.code == ValidationCode.SPAM_HEURISTIC_FAILED

    def test_repeated_characters(self):
        assert not check_content_moderation("sooooo good").valid
        assert check_content_moderation("soooo good").valid

    def test_caps_ratio_needs_three_words(self):
        assert not check_content_moderation("THIS IS LOUD").valid
        assert check_content_moderation("HELLO WORLD").valid

    def test_too_many_links(self):
        links = " ".join(f"https://example.com/{i}" for i in range(4))
        assert not check_content_moderation(links).valid
        assert check_content_moderation(" ".join(f"https://example.com/{i}" for i in range(3))).valid


class TestValidateTweetContent:
    def test_accepts_clean_content(self):
        assert validate_tweet_content("Hello world", author="Clean User", handle="clean").valid

    def test_missing_content(self):
        result = validate_tweet_content(None)
        assert result.code == ValidationCode.EMPTY_CONTENT
        assert result.error == "Tweet content is required"

    def test_empty_after_sanitize(self):
        result = validate_tweet_content("<p></p>")
        assert result.code == ValidationCode.EMPTY_CONTENT
        assert result.error == "Tweet cannot be empty"

    def test_length_boundary(self):
        at_limit = "ab " * 93 + "a"
        assert len(at_limit) == 280
        assert validate_tweet_content(at_limit).valid
        too_long = validate_tweet_content(at_limit + "b")
        assert too_long.code == ValidationCode.TOO_LONG
        assert too_long.error == "Tweet must be 280 characters or less"

    def test_length_is_measured_after_sanitizing(self):
        content = "<b>" + "word " * 55 + "</b>"
        assert len(content) > 280
        assert validate_tweet_content(content).valid

    def test_spam_is_rejected(self):
        result = validate_tweet_content("buy now!!!")
        assert result.code == ValidationCode.SPAM_HEURISTIC_FAILED

    @pytest.mark.parametrize("content", ["This is SPAM content", "spam", "what a Scam.", "(fraud)"])
    def test_prohibited_word_any_case_or_punctuation(self, content):
        result = validate_tweet_content(content)
        assert result.code == ValidationCode.PROHIBITED_WORD
        assert result.error == "Content contains inappropriate language and cannot be posted."

    def test_prohibited_word_needs_word_boundary(self):
        assert validate_tweet_content("spammer's delight").valid

    def test_author_and_handle_are_checked(self):
        assert validate_tweet_content("Hi there", author="Spam King").code == ValidationCode.PROHIBITED_WORD
        assert validate_tweet_content("Hi there", handle="badword").code == ValidationCode.PROHIBITED_WORD


class TestValidateCommentContent:
    def test_comment_limit(self):
        assert validate_comment_content("word " * 100).valid
        result = validate_comment_content("ab " * 170)
        assert result.error == "Comment must be 500 characters or less"

    def test_author_checked(self):
        result = validate_comment_content("Nice post", author="scam bot")
        assert result.code == ValidationCode.PROHIBITED_WORD


class TestIdentityValidators:
    def test_display_name(self):
        assert validate_display_name("Clean User").valid
        assert not validate_display_name("").valid
        assert not validate_display_name("x" * 51).valid
        assert validate_display_name("Fraud Inc").code == ValidationCode.PROHIBITED_WORD

    def test_handle(self):
        assert validate_handle("@clean_user1").valid
        assert not validate_handle("").valid
        assert not validate_handle("a" * 21).valid
        assert not validate_handle("bad handle").valid

    def test_username(self):
        assert validate_username("younes_dev").valid
        assert not validate_username("ab").valid
        assert not validate_username("a" * 16).valid
        assert not validate_username("no-dashes").valid
        assert validate_username("Admin").error == "This username is reserved"

    def test_email(self):
        assert validate_email_format("reader@example.com").valid
        assert not validate_email_format("not-an-email").valid
        assert not validate_email_format("").valid
        assert validate_email_domain("reader@gmail.com").valid
        assert not validate_email_domain("reader@example.com").valid
