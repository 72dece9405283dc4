"""Front matter block detection.

A block starts at the very first character of the document with the header
delimiter, runs until a line starting with the footer delimiter, and may
carry a language tag on the header line::

    --- toml
    title = "Hello"
    ---
    body text

In strict mode a delimiter must be followed by a line break (or trailing
whitespace only), so that e.g. ``----`` never matches the ``---`` delimiter.
"""

from dataclasses import dataclass
from typing import Optional

from front_matter_extractor.utils.logging import get_logger

logger = get_logger(__name__)

BYTE_ORDER_MARK = "\ufeff"

# Characters treated as blanks around delimiters and metadata
WHITESPACE = (
    " \t\n\r\v\f\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


@dataclass(frozen=True)
class Detection:
    """Location of a front matter block inside a document."""

    data_start: int  # index of the newline ending the header line
    data_end: int  # index of the newline preceding the footer
    body_start: int
    lang: Optional[str] = None

    def metadata(self, text: str) -> str:
        """Return the trimmed metadata text of the block."""
        return text[self.data_start : self.data_end].strip(WHITESPACE)

    def body(self, text: str) -> str:
        """Return the part of the document after the block."""
        return text[self.body_start :]


def strip_bom(text: str) -> str:
    """Remove a single leading byte-order mark."""
    if text.startswith(BYTE_ORDER_MARK):
        return text[1:]
    return text


def _is_ambiguous(text: str, index: int, delimiter: str) -> bool:
    # The delimiter run continues, e.g. "----" read against "---".
    return text[index] != "\n" and text[index] == delimiter[-1]


def detect(text: str, header: str, footer: str, strict: bool = True) -> Optional[Detection]:
    """Locate the front matter block of a document.

    Args:
        text: Document text (byte-order mark already removed)
        header: Opening delimiter
        footer: Closing delimiter
        strict: Reject delimiters that are followed by other characters

    Returns:
        The block location, or None if the document has no front matter
    """
    if not text.startswith(header):
        return None

    if strict and len(text) > len(header) and _is_ambiguous(text, len(header), header):
        logger.debug("Header delimiter is followed by a repeated delimiter character")
        return None

    data_start = text.find("\n", len(header))
    if data_start < 0:
        return None

    data_end = text.find("\n" + footer, data_start)
    if data_end < 0:
        return None

    body_start = data_end + 1 + len(footer)
    if strict and body_start < len(text):
        if _is_ambiguous(text, body_start, footer):
            logger.debug("Footer delimiter is followed by a repeated delimiter character")
            return None
        # Only whitespace may follow the footer on its line
        while body_start < len(text) and text[body_start] != "\n":
            if text[body_start] not in WHITESPACE:
                logger.debug(f"Unexpected character after footer delimiter at {body_start}")
                return None
            body_start += 1

    # In loose mode the body may start right after the footer
    if body_start < len(text) and text[body_start] == "\n":
        body_start += 1

    lang = text[len(header) : data_start].strip(WHITESPACE).lower() or None

    return Detection(
        data_start=data_start,
        data_end=data_end,
        body_start=body_start,
        lang=lang,
    )
