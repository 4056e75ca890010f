#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/utils/translations.py
"""Localized fixed strings used in rendered output."""

from __future__ import annotations

TRANSLATIONS: dict[str, dict[str, str]] = {
    "Footnotes": {
        "de": "Fußnoten",
        "es": "Notas al pie de página",
        "fr": "Notes de bas de page",
    },
    "See section %s": {
        "de": "siehe Abschnitt %s",
        "es": "Vea la sección %s",
        "fr": "cf. section %s",
    },
}


def translate(key: str, language: str) -> str:
    """Return ``key`` translated to ``language``, or ``key`` itself.

    English strings are the keys, so English and unknown languages get the
    key back unchanged.

    """
    return TRANSLATIONS.get(key, {}).get(language, key)
