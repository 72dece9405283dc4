"""Tests for front matter block detection."""

import pytest

from front_matter_extractor.detector import Detection, detect, strip_bom


def test_detect_default_delimiters():
    """Test locating a block delimited by ---."""
    text = "---\nfoo: bar\n---\n\nbaz"
    detection = detect(text, "---", "---")

    assert detection == Detection(data_start=3, data_end=12, body_start=17, lang=None)
    assert detection.metadata(text) == "foo: bar"
    assert detection.body(text) == "\nbaz"
    assert detection.data_start < detection.data_end


def test_detect_language_tag():
    """Test reading the language from the header line."""
    text = '--- TOML \nfoo = "bar"\n---\nbaz'
    detection = detect(text, "---", "---")

    assert detection.lang == "toml"
    assert detection.metadata(text) == 'foo = "bar"'
    assert detection.body(text) == "baz"


def test_detect_empty_block():
    """Test a header line directly followed by the footer line."""
    detection = detect("---\n---", "---", "---")

    assert detection is not None
    assert detection.data_start == detection.data_end
    assert detection.body("---\n---") == ""


@pytest.mark.parametrize(
    "text",
    [
        "",
        "foobar",
        "\n---",
        "---\n",
        "---\n ---",
        "---\n \n ---",
        " ---\nfoo: bar\n---\n",
    ],
)
def test_detect_no_front_matter(text):
    """Test documents without a complete block."""
    assert detect(text, "---", "---") is None
    assert detect(text, "---", "---", strict=False) is None


def test_detect_ambiguous_header():
    """Test a header extended by the delimiter's own character."""
    text = "----\n \n---"
    assert detect(text, "---", "---") is None

    detection = detect(text, "---", "---", strict=False)
    assert detection is not None
    assert detection.lang == "-"
    assert detection.body(text) == ""


def test_detect_ambiguous_footer():
    """Test a footer extended by the delimiter's own character."""
    text = "---\n10\n----"
    assert detect(text, "---", "---") is None

    detection = detect(text, "---", "---", strict=False)
    assert detection.metadata(text) == "10"
    assert detection.body(text) == "-"


def test_detect_header_followed_by_other_character():
    """Test that only a repeat of the last delimiter character is ambiguous."""
    text = "---yaml\nfoo: bar\n---\nbaz"
    detection = detect(text, "---", "---")

    assert detection.lang == "yaml"
    assert detection.body(text) == "baz"


def test_detect_footer_trailing_characters():
    """Test text after the footer on the same line."""
    assert detect("---\nfoo\n---bar\nbaz", "---", "---") is None

    text = "---\nfoo\n---bar\nbaz"
    detection = detect(text, "---", "---", strict=False)
    assert detection.body(text) == "bar\nbaz"

    # Trailing whitespace is tolerated in strict mode
    text = "---\nfoo\n---  \t\nbaz"
    detection = detect(text, "---", "---")
    assert detection.body(text) == "baz"


@pytest.mark.parametrize("blank", ["\u00a0", "\u2003", "\u3000", "\ufeff", "\v"])
def test_detect_footer_unicode_whitespace(blank):
    """Test Unicode blanks after the footer are tolerated in strict mode."""
    text = "---\nfoo\n---" + blank + "\nbaz"
    detection = detect(text, "---", "---")
    assert detection.body(text) == "baz"


@pytest.mark.parametrize("control", ["\x1c", "\x1d", "\x1e", "\x1f", "\x85"])
def test_detect_footer_separator_characters(control):
    """Test separator control characters after the footer are not blanks."""
    text = "---\nfoo\n---" + control + "\nbaz"
    assert detect(text, "---", "---") is None
    assert detect(text, "---", "---", strict=False).body(text) == control + "\nbaz"


def test_detect_footer_without_newline():
    """Test a footer at the end of the document."""
    text = "---\nfoo: bar\n---"
    detection = detect(text, "---", "---")

    assert detection.body_start == len(text)
    assert detection.body(text) == ""


def test_detect_crlf():
    """Test documents using CRLF line endings."""
    text = "---\r\nfoo: bar\r\n---\r\n\r\nbaz"
    detection = detect(text, "---", "---")

    assert detection.lang is None
    assert detection.metadata(text) == "foo: bar"
    assert detection.body(text) == "\r\nbaz"


def test_detect_custom_delimiters():
    """Test different header and footer delimiters."""
    text = "~~~\nfoo: bar\n^^^\nbaz"

    detection = detect(text, "~~~", "^^^")
    assert detection.metadata(text) == "foo: bar"
    assert detection.body(text) == "baz"

    assert detect(text, "~~~", "~~~") is None


@pytest.mark.parametrize("delimiter", ["---\n", "\n\n\n"])
def test_detect_delimiters_with_newlines(delimiter):
    """Test delimiters that end with a line break."""
    text = delimiter + "\n" + delimiter + "\nfoo"
    assert detect(text, delimiter, delimiter) is not None


def test_strip_bom():
    """Test removing a single leading byte-order mark."""
    assert strip_bom("\ufeff---") == "---"
    assert strip_bom("\ufeff\ufeff---") == "\ufeff---"
    assert strip_bom("---\ufeff") == "---\ufeff"
    assert strip_bom("") == ""
