#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/utils/io_utils.py
"""I/O utilities for delivering rendered markup."""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Union, cast

from org2wiki.exceptions import OutputWriteError


def _is_binary_stream(output: object) -> bool:
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a file path or an open stream.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes] or IO[str]
        Destination. Paths are written as UTF-8; binary streams receive
        UTF-8 bytes; text streams receive the string unchanged.

    Raises
    ------
    OutputWriteError
        If the destination cannot be written
    TypeError
        If ``output`` is neither a path nor a writable stream

    Examples
    --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> write_content("== Title ==", buffer)
        >>> buffer.getvalue()
        '== Title =='

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(
                f"Could not write output to {output_path}: {e}", output_path=str(output_path), original_error=e
            ) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    try:
        if _is_binary_stream(output):
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
    except OSError as e:
        raise OutputWriteError(f"Could not write output to stream: {e}", original_error=e) from e


__all__ = ["write_content"]
