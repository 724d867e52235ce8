#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdreflow/utils/io_utils.py
"""I/O utilities for reading Markdown sources and writing rendered output."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from mdreflow.exceptions import OutputWriteError


def write_content(content: Union[str, bytes], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write content to a path or file-like object.

    Parameters
    ----------
    content : str or bytes
        Content to write. Text is encoded as UTF-8 for binary destinations.
    output : str, Path, IO[bytes], or IO[str]
        Output destination

    Raises
    ------
    OutputWriteError
        If a file path cannot be written
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("# Title\\n", buffer)
        >>> buffer.getvalue()
        b'# Title\\n'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            if isinstance(content, str):
                output_path.write_text(content, encoding="utf-8")
            else:
                output_path.write_bytes(content)
        except OSError as exc:
            raise OutputWriteError(
                f"Could not write output to {output_path}", file_path=str(output_path), original_error=exc
            ) from exc
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO):
        is_binary_mode = False
    elif isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        binary_output = cast(IO[bytes], output)
        binary_output.write(content.encode("utf-8") if isinstance(content, str) else content)
    else:
        text_output = cast(IO[str], output)
        text_output.write(content.decode("utf-8") if isinstance(content, bytes) else content)


def read_text_content(source: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
    """Load Markdown text from a path, stream, bytes or string.

    A ``str`` is treated as a path only when it names an existing file;
    otherwise it is taken to be the Markdown text itself.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Input to read

    Returns
    -------
    str
        Decoded text

    """
    if isinstance(source, Path):
        return source.read_text(encoding="utf-8")
    if isinstance(source, bytes):
        return source.decode("utf-8")
    if isinstance(source, str):
        if "\n" not in source and len(source) < 4096:
            candidate = Path(source)
            try:
                if candidate.is_file():
                    return candidate.read_text(encoding="utf-8")
            except OSError:
                pass
        return source
    data = source.read()
    return data.decode("utf-8") if isinstance(data, bytes) else data


__all__ = ["read_text_content", "write_content"]
