"""Interactive collection of project metadata."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

from .models import ProjectInfo
from .prompts import Prompter

# (field, question) in the order they are asked.
QUESTIONS: list[tuple[str, str]] = [
    ("name", "Name? (This will go on the LICENSE)"),
    ("email", "Email?"),
    ("username", "Username? (https://github.com/<username>)"),
    ("repository", "Repository? (https://github.com/<username>/<repo>)"),
    ("proj_name", "Project name?"),
    ("proj_short_desc", "Short description?"),
    ("proj_long_desc", "Long description?"),
    ("docs_url", "Documentation URL?"),
]


def collect_project_info(
    prompter: Prompter,
    cleanup: Callable[[], Any],
) -> ProjectInfo:
    """Ask every question, echo the answers and require confirmation.

    Answers are taken as typed; nothing is validated.

    Args:
        prompter: Console to converse on.
        cleanup: Called before exiting when the operator declines.

    Returns:
        The confirmed ``ProjectInfo``.

    Raises:
        SystemExit: With status 1 when the confirmation is anything but
            ``y``/``Y``.
    """
    answers = {field: prompter.ask(question) for field, question in QUESTIONS}
    info = ProjectInfo(**answers)

    prompter.print()
    prompter.print_summary_table(info.summary())

    if not prompter.confirm("Confirm?"):
        prompter.print_error("Aborted.")
        cleanup()
        sys.exit(1)

    return info
