"""Text source helpers for uploaded files.

Uploaded bytes go through a best-effort decoding chain before they reach
the engine: strict UTF-8, then Windows-1251 (legacy Cyrillic files), then
UTF-8 with replacement characters. The chain only checks whether decoding
raised; it does not validate that the result is the right encoding.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)

TEXT_CONTENT_TYPE = "text/plain"
TEXT_EXTENSION = ".txt"

# Tried in order; the first strict decode that succeeds wins
STRICT_ENCODINGS = ("utf-8-sig", "cp1251")

FALLBACK_ENCODING = "utf-8"


class UnsupportedFileError(ValueError):
    """Raised when an upload is not a plain text file."""


def is_text_upload(filename: Optional[str], content_type: Optional[str]) -> bool:
    """
    Check whether an upload should be treated as plain text.

    Either the declared content type or the ``.txt`` extension is enough,
    since browsers report inconsistent types for text files.
    """
    if content_type and content_type.split(";")[0].strip().lower() == TEXT_CONTENT_TYPE:
        return True

    return bool(filename) and filename.lower().endswith(TEXT_EXTENSION)


def decode_text_bytes(data: bytes) -> str:
    """
    Decode uploaded bytes to text.

    Args:
        data: Raw file content.

    Returns:
        Decoded text. Never raises; undecodable bytes become U+FFFD.
    """
    for encoding in STRICT_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            logger.debug("Upload is not valid %s", encoding)

    logger.warning("Falling back to lossy %s decoding", FALLBACK_ENCODING)
    return data.decode(FALLBACK_ENCODING, errors="replace")


def read_text_upload(
    data: bytes,
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
) -> str:
    """
    Validate and decode an uploaded text file.

    Raises:
        UnsupportedFileError: If the upload is not a ``.txt``/``text/plain`` file.
    """
    if not is_text_upload(filename, content_type):
        raise UnsupportedFileError("Please upload a valid .txt file")

    return decode_text_bytes(data)
