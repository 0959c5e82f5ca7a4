"""Template tree processing and relocation.

Walks the template root, expands placeholders in every regular file as one
awaited batch, records the repository owner, and finally moves the tree
into the project root.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from .config import SetupConfig
from .models import ProjectInfo
from .prompts import Prompter
from .substitution import replace_in_file
from .utils import is_benign, remove_path, replace_path, tolerate_absence


def list_template_files(template_root: Path) -> list[Path]:
    """Return every regular file under *template_root*, in sorted walk order.

    Raises:
        FileNotFoundError: If *template_root* does not exist.
    """
    if not template_root.is_dir():
        raise FileNotFoundError(2, "No such file or directory", str(template_root))
    return [path for path in sorted(template_root.rglob("*")) if path.is_file()]


async def _process_one(
    path: Path, staging_dir: Path, info: ProjectInfo, prompter: Prompter
) -> Path | None:
    try:
        rewritten = await replace_in_file(path, staging_dir, info)
    except OSError as exc:
        if not is_benign(exc):
            raise
        prompter.print_warning(f"File {path} not found.")
        return None

    if not rewritten:
        prompter.print_warning(f"Skipping non-text file {path}.")
        return None
    return path


async def process_template(
    template_root: Path,
    staging_dir: Path,
    info: ProjectInfo,
    prompter: Prompter,
) -> list[Path]:
    """Expand placeholders in every file under *template_root*.

    One substitution is scheduled per file and the whole batch is awaited
    before returning, so nothing downstream sees a partially processed
    tree.

    Returns:
        The files that were rewritten.

    Raises:
        OSError: The first non-benign failure of any file.
    """
    files = list_template_files(template_root)
    results = await asyncio.gather(
        *(_process_one(path, staging_dir, info, prompter) for path in files)
    )
    return [path for path in results if path is not None]


def write_ownership(config: SetupConfig, info: ProjectInfo, prompter: Prompter) -> Path | None:
    """Append ``* @<username>`` to the ownership-declaration file.

    The line goes into the nested file inside the template's configuration
    folder.  Without that folder, a copy at the top of the template tree is
    appended to and moved straight to its final location under the project
    root.

    Returns:
        Path of the file that received the line, or ``None`` when neither
        location exists.
    """
    line = f"* @{info.username}"

    if config.ownership_path.parent.is_dir():
        _append(config.ownership_path, line)
        return config.ownership_path

    with tolerate_absence(prompter, config.fallback_ownership_path):
        if not config.fallback_ownership_path.is_file():
            raise FileNotFoundError(
                2, "No such file or directory", str(config.fallback_ownership_path)
            )
        _append(config.fallback_ownership_path, line)
        replace_path(config.fallback_ownership_path, config.final_ownership_path)
        return config.final_ownership_path
    return None


def relocate_tree(config: SetupConfig, prompter: Prompter) -> list[Path]:
    """Move the template tree into the project root.

    Every direct child except the hidden configuration folder is moved
    first, replacing same-named entries.  The project root's configuration
    folder is then replaced by the template's copy, provided the template
    has one, and the emptied template root is removed.

    Returns:
        Destination paths that were written.
    """
    template_root = config.template_path
    moved: list[Path] = []

    for child in sorted(template_root.iterdir()):
        if child.name == config.config_dir:
            continue
        destination = config.root_dir / child.name
        replace_path(child, destination)
        moved.append(destination)

    with tolerate_absence(prompter, config.template_config_path):
        replace_path(config.template_config_path, config.root_config_path)
        moved.append(config.root_config_path)

    remove_path(template_root)
    return moved


def _append(path: Path, text: str) -> None:
    with path.open("a", encoding="utf-8") as handle:
        handle.write(text)
