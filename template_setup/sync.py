"""Optional template-sync configuration.

Either wires up the recurring sync with the upstream template (ignore list
plus CI label) or removes the sync workflow altogether.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from .config import (
    TEMPLATE_SYNC_IGNORE,
    TEMPLATE_SYNC_LABEL,
    TEMPLATE_SYNC_LABEL_NAME,
    SetupConfig,
)
from .prompts import Prompter
from .utils import remove_path, replace_path, tolerate_absence


def missing_ignore_entries(ignore_path: Path) -> list[str]:
    """Return the entries of the sync ignore block not yet in *ignore_path*."""
    wanted = [entry for entry in TEMPLATE_SYNC_IGNORE.splitlines() if entry]
    if not ignore_path.is_file():
        return wanted
    present = {line.strip() for line in ignore_path.read_text(encoding="utf-8").splitlines()}
    return [entry for entry in wanted if entry not in present]


def has_sync_label(settings_path: Path) -> bool:
    """Check whether *settings_path* already defines the template-sync label.

    A settings file that is missing, not valid YAML, or without a ``labels``
    list counts as not having the label.
    """
    if not settings_path.is_file():
        return False
    try:
        settings = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except yaml.YAMLError:
        return False
    if not isinstance(settings, dict):
        return False
    labels = settings.get("labels")
    if not isinstance(labels, list):
        return False
    return any(
        isinstance(label, dict) and label.get("name") == TEMPLATE_SYNC_LABEL_NAME
        for label in labels
    )


def enable_sync(config: SetupConfig, prompter: Prompter) -> None:
    """Write the ignore list and the CI label, then publish the ignore file."""
    prompter.print_info("Writing ignore file...")

    with tolerate_absence(prompter):
        entries = missing_ignore_entries(config.sync_ignore_path)
        if entries:
            with config.sync_ignore_path.open("a", encoding="utf-8") as handle:
                handle.write("\n" + "\n".join(entries))

        if not has_sync_label(config.settings_path):
            with config.settings_path.open("a", encoding="utf-8") as handle:
                handle.write(TEMPLATE_SYNC_LABEL)

        replace_path(config.sync_ignore_path, config.final_sync_ignore_path)
        prompter.print_info(f"You can view more configuration here: {config.sync_docs_url}")


def disable_sync(config: SetupConfig, prompter: Prompter) -> None:
    """Remove the sync workflow and every sync ignore file, template or root."""
    prompter.print_info("Removing syncing workflow...")

    with tolerate_absence(prompter, config.sync_workflow_path):
        remove_path(config.sync_workflow_path)

    for ignore_path in (config.sync_ignore_path, config.final_sync_ignore_path):
        if ignore_path.exists():
            remove_path(ignore_path)


def configure_sync(config: SetupConfig, prompter: Prompter) -> bool:
    """Ask whether to stay in sync with the template and act on the answer.

    Returns:
        ``True`` if syncing was enabled.
    """
    if prompter.confirm("Would you like to keep up-to-date with the template?"):
        enable_sync(config, prompter)
        return True

    disable_sync(config, prompter)
    return False
