"""Front matter extraction and presence checks."""

from dataclasses import dataclass
from typing import Any, Optional

from front_matter_extractor.detector import detect, strip_bom
from front_matter_extractor.errors import ConfigError
from front_matter_extractor.options import Delimiters, MatterOptions, ParserOverride, format_delimiters
from front_matter_extractor.parsers import ParserConfig, ParserRegistry, resolve_parser
from front_matter_extractor.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class MatterResult:
    """Result of a front matter extraction."""

    source: str  # input text without byte-order mark
    body: str  # suffix of source following the front matter block
    data: Any = None
    path: Optional[str] = None  # set when read from a file


def format_string(text: Any) -> str:
    """Check the document type and strip a leading byte-order mark."""
    if not isinstance(text, str):
        raise ConfigError(f"The document must be of type str, not {type(text).__name__}.")
    return strip_bom(text)


def extract_with_options(
    text: str,
    options: MatterOptions,
    registry: Optional[ParserRegistry] = None,
) -> MatterResult:
    """Extract front matter using already normalized options.

    Args:
        text: Document text
        options: Normalized options
        registry: Parser registry (the default registry if None)

    Returns:
        Extraction result
    """
    text = format_string(text)
    result = MatterResult(source=text, body=text)
    if not text:
        return result

    detection = detect(text, options.header, options.footer, strict=options.strict)
    if detection is None:
        logger.debug("No front matter found")
        return result

    metadata = detection.metadata(text)
    if metadata:
        lang = detection.lang or options.lang
        parse = resolve_parser(lang, options.parsers, registry)
        result.data = parse(metadata, ParserConfig(loose=options.loose))

    result.body = detection.body(text)
    return result


def extract(
    text: str,
    *,
    loose: bool = False,
    lang: Optional[str] = None,
    delims: Delimiters = None,
    parsers: ParserOverride = None,
    registry: Optional[ParserRegistry] = None,
) -> MatterResult:
    """Split a document into its front matter data and body.

    Args:
        text: Document text
        loose: Accept delimiters followed by other characters
        lang: Language used when the header line names none (default "yaml")
        delims: Delimiter, or (header, footer) pair (default "---")
        parsers: Parse function, or mapping from language to parse function,
            taking precedence over the registry
        registry: Parser registry (the default registry if None)

    Returns:
        Extraction result; ``data`` is None and ``body`` is the whole text
        if there is no front matter

    Raises:
        ConfigError: If the text or an option is invalid
        ParserNotFoundError: If no parser is found for the front matter language
    """
    options = MatterOptions.build(loose=loose, lang=lang, delims=delims, parsers=parsers)
    return extract_with_options(text, options, registry)


def test(text: Any, *, loose: bool = False, delims: Delimiters = None) -> bool:
    """Check whether a document starts with a front matter block.

    Never parses the metadata. Invalid input or delimiters give False.

    Args:
        text: Document text
        loose: Accept delimiters followed by other characters
        delims: Delimiter, or (header, footer) pair (default "---")

    Returns:
        True if a front matter block is present
    """
    if not isinstance(text, str) or not text:
        return False

    try:
        header, footer = format_delimiters(delims)
    except ConfigError:
        return False

    return detect(strip_bom(text), header, footer, strict=not loose) is not None


has_front_matter = test
