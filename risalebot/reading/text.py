"""Turkish text normalization for command matching."""

import re

# Turkish capitals whose lowercase differs from the default Unicode mapping
_TURKISH_UPPER = str.maketrans({"İ": "i", "I": "ı"})

# One-way fold of Turkish letters to their closest ASCII base letter
_TURKISH_FOLD = str.maketrans({
    "ı": "i",
    "ş": "s",
    "ç": "c",
    "ğ": "g",
    "ö": "o",
    "ü": "u",
})

_MARKDOWN_CHARS = re.compile(r"[~_*`]+")
_WHITESPACE = re.compile(r"\s+")


def turkish_lower(text: str) -> str:
    """Lowercase text using Turkish casing rules (İ→i, I→ı)."""
    return text.translate(_TURKISH_UPPER).lower()


def normalize_text(text: str) -> str:
    """Normalize user input for command matching.

    Steps, in order: Turkish lowercase, strip one leading ``/``, fold
    Turkish letters to ASCII, drop markdown control characters, collapse
    whitespace and trim.

    Args:
        text: Raw message text.

    Returns:
        The normalized text, possibly empty.
    """
    normalized = turkish_lower(text or "")
    if normalized.startswith("/"):
        normalized = normalized[1:]
    normalized = normalized.translate(_TURKISH_FOLD)
    normalized = _MARKDOWN_CHARS.sub(" ", normalized)
    normalized = _WHITESPACE.sub(" ", normalized)
    return normalized.strip()


def sanitize_whatsapp(text: str | None) -> str:
    """Remove WhatsApp markdown characters that could break formatting."""
    return re.sub(r"[*_~`]", "", str(text or ""))
