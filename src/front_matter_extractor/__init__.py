"""Extract YAML/TOML front matter from text documents."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("front-matter-extractor")
except PackageNotFoundError:  # pragma: no cover - during source-only use
    __version__ = "unknown"

from front_matter_extractor.detector import Detection, detect
from front_matter_extractor.errors import ConfigError, FrontMatterError, ParserNotFoundError
from front_matter_extractor.matter import MatterResult, extract, has_front_matter, test
from front_matter_extractor.options import MatterOptions
from front_matter_extractor.parsers import (
    ParserConfig,
    ParserRegistry,
    create_default_registry,
    default_registry,
    load_module,
    parse_toml,
    parse_yaml,
    resolve_parser,
)
from front_matter_extractor.reader import read_file, read_file_async

__all__ = [
    "__version__",
    "ConfigError",
    "Detection",
    "FrontMatterError",
    "MatterOptions",
    "MatterResult",
    "ParserConfig",
    "ParserNotFoundError",
    "ParserRegistry",
    "create_default_registry",
    "default_registry",
    "detect",
    "extract",
    "has_front_matter",
    "load_module",
    "parse_toml",
    "parse_yaml",
    "read_file",
    "read_file_async",
    "resolve_parser",
    "test",
]
