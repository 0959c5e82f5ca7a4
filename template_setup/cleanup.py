"""Removal of files that have no place in the generated project."""

from __future__ import annotations

from pathlib import Path

from .config import SetupConfig
from .prompts import Prompter
from .utils import remove_path, tolerate_absence


def remove_packaging_artifacts(config: SetupConfig, prompter: Prompter) -> list[Path]:
    """Delete the template repository's own packaging artifacts.

    Each artifact is attempted independently; missing ones are skipped
    silently.

    Returns:
        The artifacts that were actually removed.
    """
    removed: list[Path] = []
    for path in config.artifact_paths():
        if not path.exists() and not path.is_symlink():
            continue
        with tolerate_absence(prompter, path):
            remove_path(path)
            removed.append(path)
    return removed


def remove_setup_script(config: SetupConfig, prompter: Prompter) -> bool:
    """Offer to keep the setup script; delete it unless the answer is yes.

    Returns:
        ``True`` if the script was removed.
    """
    if prompter.confirm("Would you like to keep this setup script?"):
        prompter.print("Okay.")
        return False

    prompter.print_info("Removing setup script...")
    with tolerate_absence(prompter, config.script_path):
        remove_path(config.script_path)
        return True
    return False
