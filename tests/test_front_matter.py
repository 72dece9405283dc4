"""Tests for the front matter text utilities."""

import pytest

from front_matter_extractor.errors import ConfigError
from front_matter_extractor.utils.front_matter import split_front_matter, strip_front_matter


def test_strip_front_matter():
    """Test stripping front matter."""
    content = """---
title: Test Document
author: Test Author
---

# Header 1

Content here.
"""
    result = strip_front_matter(content)
    assert result.startswith("\n# Header 1")
    assert "title: Test Document" not in result


def test_strip_front_matter_without_front_matter():
    """Test content without front matter is returned unchanged."""
    content = "# Header 1\n\n---\ntitle: not front matter\n---\n"
    assert strip_front_matter(content) == content


def test_split_front_matter():
    """Test splitting front matter without parsing it."""
    content = '--- toml\r\ntitle = "Test"\r\n---\r\nBody'
    metadata, body = split_front_matter(content)

    assert metadata == 'title = "Test"'
    assert body == "Body"


def test_split_front_matter_options():
    """Test loose mode and custom delimiters."""
    content = "+++\ntitle = 'Test'\n+++Body"
    assert split_front_matter(content, delims="+++") == ("", content)
    assert split_front_matter(content, loose=True, delims="+++") == ("title = 'Test'", "Body")


def test_split_front_matter_bom():
    """Test a leading byte-order mark is dropped."""
    assert split_front_matter("\ufeff---\na: 1\n---\nBody") == ("a: 1", "Body")
    assert split_front_matter("\ufeffBody") == ("", "Body")


def test_split_front_matter_invalid_delimiters():
    """Test invalid delimiters raise a configuration error."""
    with pytest.raises(ConfigError):
        split_front_matter("---\n---", delims=[1, 2])
