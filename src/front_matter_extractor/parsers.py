"""Metadata parsers and language dispatch."""

import importlib
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Callable, Dict, Iterator, Optional

from front_matter_extractor.errors import ParserNotFoundError
from front_matter_extractor.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParserConfig:
    """Settings handed to every parse function."""

    loose: bool = False


ParseFunction = Callable[[str, ParserConfig], Any]

# Format libraries, imported on first use
_MODULE_NAMES: Dict[str, str] = {
    "yaml": "yaml",
    "toml": "tomlkit",
}
_modules: Dict[str, ModuleType] = {}


def load_module(name: str) -> ModuleType:
    """Get or import the library backing a built-in parser.

    Args:
        name: Built-in language name ("yaml" or "toml")

    Returns:
        The imported module

    Raises:
        KeyError: If there is no built-in parser for the name
    """
    if name in _modules:
        return _modules[name]

    module_name = _MODULE_NAMES[name]
    logger.debug(f"Loading {name} module: {module_name}")
    module = importlib.import_module(module_name)
    _modules[name] = module
    return module


def parse_yaml(text: str, config: Optional[ParserConfig] = None) -> Any:
    """Parse YAML front matter, returning None if it is malformed."""
    yaml = load_module("yaml")
    try:
        return yaml.safe_load(text)
    except (yaml.YAMLError, ValueError) as e:
        logger.debug(f"Invalid YAML front matter: {e}")
        return None


def parse_toml(text: str, config: Optional[ParserConfig] = None) -> Any:
    """Parse TOML front matter, returning None if it is malformed."""
    tomlkit = load_module("toml")
    try:
        return tomlkit.loads(text).unwrap()
    except ValueError as e:
        logger.debug(f"Invalid TOML front matter: {e}")
        return None


class ParserRegistry(MutableMapping):
    """Mapping from language tag to parse function.

    Tags are case-insensitive and stored lower-cased. Registration is not
    synchronized; concurrent writers must coordinate themselves.
    """

    def __init__(self, parsers: Optional[Mapping] = None) -> None:
        self._parsers: Dict[str, ParseFunction] = {}
        if parsers:
            self.update(parsers)

    def __getitem__(self, lang: str) -> ParseFunction:
        return self._parsers[lang.lower()]

    def __setitem__(self, lang: str, parse: ParseFunction) -> None:
        if not callable(parse):
            raise TypeError(f"Parser for {lang!r} must be callable")
        self._parsers[lang.lower()] = parse

    def __delitem__(self, lang: str) -> None:
        del self._parsers[lang.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._parsers)

    def __len__(self) -> int:
        return len(self._parsers)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({sorted(self._parsers)})"

    def register(self, lang: str, parse: ParseFunction) -> ParseFunction:
        """Add or replace the parser for a language; returns the parser."""
        self[lang] = parse
        return parse

    def copy(self) -> "ParserRegistry":
        return self.__class__(self._parsers)


def create_default_registry() -> ParserRegistry:
    """Create a registry seeded with the built-in YAML and TOML parsers."""
    return ParserRegistry({"yaml": parse_yaml, "toml": parse_toml})


default_registry = create_default_registry()


def resolve_parser(
    lang: str,
    parsers: Any = None,
    registry: Optional[ParserRegistry] = None,
) -> ParseFunction:
    """Find the parse function for a language tag.

    A function given as ``parsers`` always wins. Otherwise the tag is looked
    up in the ``parsers`` mapping, then in the registry.

    Args:
        lang: Language tag
        parsers: Per-call override, a function or a mapping of functions
        registry: Registry to fall back on (the default registry if None)

    Returns:
        Parse function

    Raises:
        ParserNotFoundError: If no parser is available for the tag
    """
    if callable(parsers):
        return parsers

    if parsers is not None and parsers.get(lang) is not None:
        return parsers[lang]

    if registry is None:
        registry = default_registry

    parse = registry.get(lang)
    if parse is None:
        raise ParserNotFoundError(lang)

    logger.debug(f"Resolved parser for {lang}: {getattr(parse, '__name__', parse)!r}")
    return parse
