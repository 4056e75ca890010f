#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/utils/text.py
"""Typographic text substitutions.

Smart quotes and special strings are emitted as HTML entities, which every
MediaWiki installation renders.

"""

from __future__ import annotations

import re

# Opening quotes follow the start of the run, whitespace or an opening bracket
_OPEN_DOUBLE = re.compile(r'(?:^|(?<=[\s(\[{—–-]))"(?=\S)')
_OPEN_SINGLE = re.compile(r"(?:^|(?<=[\s(\[{—–-]))'(?=\S)")
_APOSTROPHE = re.compile(r"(?<=\w)'(?=\w)")

_SPECIAL_STRINGS: tuple[tuple[re.Pattern[str], str], ...] = (
    # Also matches the escaped form left by escape_wiki_text
    (re.compile(r"\\\\?-"), "&shy;"),
    (re.compile(r"(?<!-)---(?!-)"), "&mdash;"),
    (re.compile(r"(?<!-)--(?!-)"), "&ndash;"),
    (re.compile(r"\.\.\."), "&hellip;"),
)

_LINE_END = re.compile(r"[ \t]*\n")


def educate_quotes(text: str) -> str:
    """Replace straight quotes with typographic quote entities.

    Parameters
    ----------
    text : str
        Raw text run

    Returns
    -------
    str
        Text with ``&ldquo;``/``&rdquo;``/``&lsquo;``/``&rsquo;`` entities

    Examples
    --------
        >>> educate_quotes('He said "it\\'s fine"')
        'He said &ldquo;it&rsquo;s fine&rdquo;'

    """
    if not text or ('"' not in text and "'" not in text):
        return text

    text = _APOSTROPHE.sub("&rsquo;", text)
    text = _OPEN_DOUBLE.sub("&ldquo;", text)
    text = _OPEN_SINGLE.sub("&lsquo;", text)
    text = text.replace('"', "&rdquo;")
    text = text.replace("'", "&rsquo;")
    return text


def convert_special_strings(text: str) -> str:
    r"""Convert ``\-``, ``---``, ``--`` and ``...`` to HTML entities.

    Examples
    --------
        >>> convert_special_strings("1--2 --- wait...")
        '1&ndash;2 &mdash; wait&hellip;'

    """
    for pattern, replacement in _SPECIAL_STRINGS:
        text = pattern.sub(replacement, text)
    return text


def preserve_breaks(text: str) -> str:
    """Turn every line ending into a hard break (two trailing spaces)."""
    return _LINE_END.sub("  \n", text)
