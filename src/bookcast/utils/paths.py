"""Path helpers."""

import re

# Undecodable filename bytes surface as lone surrogates (PEP 383)
_SURROGATES = re.compile("[\ud800-\udfff]")


def split_extension(filename: str) -> tuple[str, str]:
    """Split a filename at its last dot.

    Unlike ``Path.suffix``, a leading dot counts, so ``".mp3"`` has the
    extension ``".mp3"`` and an empty stem.

    Returns:
        Tuple of (stem, extension); extension keeps its case and dot
    """
    idx = filename.rfind(".")
    if idx < 0:
        return filename, ""
    return filename[:idx], filename[idx:]


def printable(text: str) -> str:
    """Replace lone surrogates from undecodable filenames with U+FFFD."""
    return _SURROGATES.sub("\ufffd", text)
