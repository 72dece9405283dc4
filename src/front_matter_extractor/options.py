"""Option normalization for extraction and presence checks."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Tuple, Union

from front_matter_extractor.errors import ConfigError

DEFAULT_DELIMITER = "---"
DEFAULT_LANG = "yaml"

Delimiters = Union[str, Sequence[Optional[str]], None]
ParserOverride = Union[Callable[..., Any], Mapping, None]


def format_delimiters(delims: Delimiters) -> Tuple[str, str]:
    """Normalize a delimiter option into a (header, footer) pair.

    A single string is used for both ends. In a sequence, a missing or None
    entry takes the value of the other one; if both are missing the default
    ``---`` is used.

    Raises:
        ConfigError: If the option is not a string or a sequence of at most
            two strings
    """
    if delims is None or isinstance(delims, str):
        pair = [delims, None]
    elif isinstance(delims, (list, tuple)):
        if len(delims) > 2:
            raise ConfigError('The option "delims" accepts at most two delimiters.')
        pair = list(delims) + [None] * (2 - len(delims))
    else:
        raise ConfigError('The option "delims" is invalid.')

    header, footer = pair
    if header is None:
        header = footer if footer is not None else DEFAULT_DELIMITER
    if footer is None:
        footer = header

    for delimiter in (header, footer):
        if not isinstance(delimiter, str):
            raise ConfigError('The option "delims" is invalid.')
        if not delimiter:
            raise ConfigError('The option "delims" must not contain empty delimiters.')

    return header, footer


def format_lang(lang: Optional[str]) -> str:
    """Normalize the default language tag."""
    if lang is None:
        return DEFAULT_LANG
    if not isinstance(lang, str):
        raise ConfigError('The option "lang" must be a string.')
    return lang.strip().lower()


def format_parsers(parsers: ParserOverride) -> ParserOverride:
    """Validate a parser override: a function or a mapping of functions."""
    if parsers is None or callable(parsers):
        return parsers
    if isinstance(parsers, Mapping):
        for lang, parse in parsers.items():
            if not callable(parse):
                raise ConfigError(f'The parser for "{lang}" in the option "parsers" is not callable.')
        return parsers
    raise ConfigError('The option "parsers" must be a function or a mapping of functions.')


@dataclass(frozen=True)
class MatterOptions:
    """Normalized extraction options."""

    loose: bool = False
    lang: str = DEFAULT_LANG
    delims: Tuple[str, str] = (DEFAULT_DELIMITER, DEFAULT_DELIMITER)
    parsers: ParserOverride = None

    @property
    def strict(self) -> bool:
        return not self.loose

    @property
    def header(self) -> str:
        return self.delims[0]

    @property
    def footer(self) -> str:
        return self.delims[1]

    @classmethod
    def build(
        cls,
        loose: bool = False,
        lang: Optional[str] = None,
        delims: Delimiters = None,
        parsers: ParserOverride = None,
    ) -> "MatterOptions":
        """Create options from raw keyword values, raising ConfigError on bad input."""
        return cls(
            loose=bool(loose),
            lang=format_lang(lang),
            delims=format_delimiters(delims),
            parsers=format_parsers(parsers),
        )
