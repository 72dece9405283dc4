"""Exceptions raised by front-matter-extractor."""

from typing import Optional


class FrontMatterError(Exception):
    """Base exception for all front matter errors."""


class ConfigError(FrontMatterError):
    """Raised when an argument or option has an invalid type or shape."""


class ParserNotFoundError(FrontMatterError):
    """Raised when no parser is available for a language tag."""

    def __init__(self, lang: str, message: Optional[str] = None) -> None:
        detail = message or f"No parser found for the language: {lang}"
        super().__init__(detail)
        self.lang = lang
