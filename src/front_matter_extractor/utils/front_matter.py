"""Front matter text utilities that do not parse the metadata."""

from typing import Tuple

from front_matter_extractor.detector import detect, strip_bom
from front_matter_extractor.options import Delimiters, format_delimiters


def split_front_matter(
    content: str,
    loose: bool = False,
    delims: Delimiters = None,
) -> Tuple[str, str]:
    """Split front matter from Markdown content without parsing it.

    Args:
        content: Markdown content with possible front matter
        loose: Accept delimiters followed by other characters
        delims: Delimiter, or (header, footer) pair

    Returns:
        Tuple of (metadata_text, remaining_content)
    """
    header, footer = format_delimiters(delims)
    content = strip_bom(content)

    detection = detect(content, header, footer, strict=not loose)
    if detection is None:
        # No front matter found
        return "", content

    return detection.metadata(content), detection.body(content)


def strip_front_matter(
    content: str,
    loose: bool = False,
    delims: Delimiters = None,
) -> str:
    """Strip front matter from Markdown content.

    Args:
        content: Markdown content with possible front matter
        loose: Accept delimiters followed by other characters
        delims: Delimiter, or (header, footer) pair

    Returns:
        Content with front matter removed
    """
    _, body = split_front_matter(content, loose=loose, delims=delims)
    return body
