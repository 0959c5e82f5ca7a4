"""Placeholder substitution for template files.

Each file is rewritten line by line into a staging copy which then
atomically replaces the original, so a reader never sees a half-written
file.
"""

from __future__ import annotations

import asyncio
import os
import shutil
import tempfile
from pathlib import Path

from .models import ProjectInfo, token_values


def replace_tokens(line: str, info: ProjectInfo) -> str:
    """Replace every occurrence of every placeholder in *line*.

    Placeholders are applied in the fixed order of ``PLACEHOLDER_TOKENS``.

    Examples::

        replace_tokens("{{USERNAME}}/{{USERNAME}}", info)  -> "bob/bob"
    """
    for token, value in token_values(info):
        line = line.replace(token, value)
    return line


def rewrite_file(source: Path, staging_dir: Path, info: ProjectInfo) -> bool:
    """Synchronous worker behind :func:`replace_in_file`."""
    # A private subdirectory keeps equal base names from different template
    # directories apart while the batch runs.
    work_dir = Path(tempfile.mkdtemp(dir=staging_dir))
    output_path = work_dir / source.name
    try:
        with (
            source.open("r", encoding="utf-8", newline=None) as reader,
            output_path.open("w", encoding="utf-8", newline="\n") as writer,
        ):
            for line in reader:
                writer.write(replace_tokens(line.rstrip("\n"), info) + "\n")
        shutil.copymode(source, output_path)
        os.replace(output_path, source)
        return True
    except UnicodeDecodeError:
        return False
    finally:
        shutil.rmtree(work_dir, ignore_errors=True)


async def replace_in_file(
    file_path: str | Path,
    staging_dir: str | Path,
    info: ProjectInfo,
) -> bool:
    """Rewrite *file_path* with every placeholder expanded.

    Line boundaries are preserved: each input line produces exactly one
    output line terminated by ``\\n``, and the file mode is kept.  The work
    runs in a worker thread.

    Args:
        file_path: Template file to rewrite in place.
        staging_dir: Directory on the same filesystem for the in-progress copy.
        info: Values for the placeholders.

    Returns:
        ``True`` if the file was rewritten, ``False`` if it is not UTF-8
        text and was left untouched.

    Raises:
        OSError: Any filesystem failure, including ``FileNotFoundError``
            for a missing source.  Classification is up to the caller.
    """
    return await asyncio.to_thread(rewrite_file, Path(file_path), Path(staging_dir), info)
