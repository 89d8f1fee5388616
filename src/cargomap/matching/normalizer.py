"""Canonical forms for header text and cell values.

Both normalizers are total and idempotent: they accept any input (None
included) and applying them twice gives the same result as applying once.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_PLACEHOLDER = re.compile(
    r"^(?:(?:col|column|columna|colum|campo|field|unnamed|untitled|sinnombre)\d*|\d*)$"
)


def _fold(text: Any) -> str:
    s = "" if text is None else str(text)
    s = unicodedata.normalize("NFKD", s.lower())
    return "".join(ch for ch in s if not unicodedata.combining(ch))


def normalize(text: Any) -> str:
    """Lowercase, strip diacritics, keep only [a-z0-9].

    "Ship-To", "ship_to" and "SHIP TO" all become "shipto".
    """
    return _NON_ALNUM.sub("", _fold(text))


def normalize_words(text: Any) -> str:
    """Like normalize() but keeps word boundaries as single spaces."""
    return _NON_ALNUM.sub(" ", _fold(text)).strip()


def normalize_value(value: Any) -> str:
    """Trim a cell value and collapse inner whitespace; case is preserved."""
    if value is None:
        return ""
    return " ".join(str(value).split())


def is_placeholder_header(header: Any) -> bool:
    """True for headers that carry no name evidence.

    Empty headers, bare numbers, and spreadsheet fillers such as "Column1",
    "Unnamed: 3" or "Campo 7".
    """
    return bool(_PLACEHOLDER.match(normalize(header)))
