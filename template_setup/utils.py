"""Shared helpers for the template setup.

Provides the error policy (benign absence vs. fatal I/O failure), the
staging-directory context manager, and the move/remove primitives used by
the reorganizer, the sync writer and the self-cleanup step.
"""

from __future__ import annotations

import os
import shutil
import tempfile
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from .prompts import Prompter

BENIGN_ERRORS: tuple[type[OSError], ...] = (FileNotFoundError, FileExistsError)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SetupError(Exception):
    """Raised when the setup cannot continue and must exit non-zero."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.exit_code = exit_code
        super().__init__(message)


# ---------------------------------------------------------------------------
# Error policy
# ---------------------------------------------------------------------------


def is_benign(exc: BaseException) -> bool:
    """Return ``True`` for a missing target or an already existing one."""
    return isinstance(exc, BENIGN_ERRORS)


@contextmanager
def tolerate_absence(prompter: Prompter, what: str | Path | None = None) -> Iterator[None]:
    """Swallow benign filesystem errors, re-raise everything else.

    A swallowed error is reported as ``File <what> not found.`` (or the
    error's own filename when *what* is omitted).
    """
    try:
        yield
    except BENIGN_ERRORS as exc:
        target = what if what is not None else (exc.filename or exc)
        prompter.print_warning(f"File {target} not found.")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


@contextmanager
def staging_directory(parent: Path, prefix: str) -> Iterator[Path]:
    """Create a uniquely named directory under *parent* and remove it on exit.

    The directory lives beside the files being rewritten so that the final
    ``os.replace`` never crosses a filesystem boundary.
    """
    path = Path(tempfile.mkdtemp(prefix=prefix, dir=parent))
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


def remove_path(path: Path) -> None:
    """Delete a file, symlink or directory tree.

    Raises:
        FileNotFoundError: If nothing exists at *path*.
    """
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def replace_path(source: Path, destination: Path) -> None:
    """Move *source* to *destination*, replacing whatever is there.

    The source is checked first, so a missing source never costs the
    destination.  An existing destination directory is moved aside, the
    source moved in, and only then the old copy deleted.

    Raises:
        FileNotFoundError: If *source* does not exist.
    """
    if not source.exists() and not source.is_symlink():
        raise FileNotFoundError(2, "No such file or directory", str(source))

    destination.parent.mkdir(parents=True, exist_ok=True)

    if destination.is_dir() and not destination.is_symlink():
        backup = destination.with_name(f"{destination.name}.old-{uuid.uuid4().hex[:8]}")
        os.replace(destination, backup)
        try:
            os.replace(source, destination)
        except OSError:
            os.replace(backup, destination)
            raise
        shutil.rmtree(backup)
        return

    if destination.exists() and source.is_dir() and not source.is_symlink():
        destination.unlink()
    os.replace(source, destination)
