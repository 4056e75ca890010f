#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/utils/escape.py
"""Escaping of plain text runs for wiki output.

The replacements are order sensitive. The ``#`` and ``![`` rules insert
backslashes first, and those are protected along with every literal
backtick, asterisk, underscore and backslash.

"""

from __future__ import annotations

import re

_PROTECTED_CHARS = re.compile(r"[`*_\\]")
_LINE_START_HASH = re.compile(r"\n#")
_IMAGE_BANG = re.compile(r"!(?=\[)")
_PARAGRAPH_START_HASH = re.compile(r"\A#")


def escape_wiki_text(text: str) -> str:
    r"""Escape characters of a text run that would read as markup.

    A ``#`` opening a line inside the run is escaped, but not one at the
    very start of the run: whether that position begins a line is only known
    to the owning paragraph, see :func:`escape_paragraph_start`.

    Parameters
    ----------
    text : str
        Raw text run

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_wiki_text("*bold* and a_b")
        '\\*bold\\* and a\\_b'
        >>> escape_wiki_text("one\n#two")
        'one\n\\\\#two'
        >>> escape_wiki_text("see ![x]")
        'see \\\\![x]'

    """
    if not text:
        return text

    text = _LINE_START_HASH.sub("\n\\\\#", text)
    text = _IMAGE_BANG.sub("\\\\!", text)
    text = _PROTECTED_CHARS.sub(lambda match: "\\" + match.group(0), text)
    return text


def escape_paragraph_start(contents: str) -> str:
    r"""Escape a ``#`` opening rendered paragraph contents.

    Examples
    --------
        >>> escape_paragraph_start("#1 rule")
        '\\#1 rule'

    """
    return _PARAGRAPH_START_HASH.sub("\\\\#", contents, count=1)
