from __future__ import annotations

import unicodedata


def fold_text(text: str) -> str:
    """
    Fold text for case- and accent-insensitive comparison.

    Decomposes to NFD, drops combining marks, then casefolds.
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def compare_folded(a: str, b: str) -> int:
    """Three-way comparison of two strings after fold_text."""
    fa = fold_text(a)
    fb = fold_text(b)
    return (fa > fb) - (fa < fb)
