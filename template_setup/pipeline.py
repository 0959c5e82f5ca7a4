"""Template setup orchestrator.

Runs the one-shot setup of a freshly cloned template repository:

Step 1: COLLECT  -- Ask for project metadata and confirm it.
Step 2: CLEANUP  -- Remove the template repository's packaging artifacts.
Step 3: REWRITE  -- Expand placeholders in every template file (one batch).
Step 4: OWNERS   -- Record the repository owner.
Step 5: SYNC     -- Configure or remove the template-sync workflow.
Step 6: RELOCATE -- Move the template tree into the project root.
Step 7: FINISH   -- Optionally delete this setup script.

Usage::

    python -m template_setup
"""

from __future__ import annotations

import asyncio
import sys
import traceback
from typing import Any

from rich.panel import Panel

from .cleanup import remove_packaging_artifacts, remove_setup_script
from .collector import collect_project_info
from .config import SetupConfig
from .models import ProjectInfo
from .prompts import Prompter
from .reorganizer import process_template, relocate_tree, write_ownership
from .sync import configure_sync
from .utils import SetupError, staging_directory


class TemplateSetup:
    """Drives the setup steps in order against one project root.

    Attributes:
        config: Layout of the project root being set up.
        prompter: The single console conversation with the operator.
        state: Results accumulated by each step.
    """

    def __init__(self, config: SetupConfig, prompter: Prompter | None = None) -> None:
        self.config = config
        self.prompter = prompter or Prompter()
        self.state: dict[str, Any] = {
            "artifacts_removed": [],
            "files_rewritten": [],
            "ownership_file": None,
            "sync_enabled": False,
            "relocated": [],
            "script_removed": False,
        }

    async def run(self) -> dict[str, Any]:
        """Execute every step.

        Returns:
            The accumulated state dictionary.

        Raises:
            SystemExit: With status 1 if the operator declines the summary.
            SetupError: On any filesystem failure other than a missing or
                already existing target.  Work done so far is not rolled back.
        """
        try:
            await self._run_steps()
        except OSError as exc:
            self.prompter.print_error(f"Setup failed: {exc}")
            self.prompter.console.print(traceback.format_exc(), style="dim", markup=False)
            raise SetupError(str(exc)) from exc
        finally:
            self.prompter.close()
        return self.state

    async def _run_steps(self) -> None:
        prompter = self.prompter
        config = self.config

        prompter.print_step("Project information")
        info: ProjectInfo = collect_project_info(prompter, prompter.close)
        self.state["project"] = info.model_dump()

        prompter.print_step("Writing files")
        self.state["artifacts_removed"] = remove_packaging_artifacts(config, prompter)

        with staging_directory(config.root_dir, config.staging_prefix) as staging_dir:
            self.state["files_rewritten"] = await process_template(
                config.template_path, staging_dir, info, prompter
            )

        self.state["ownership_file"] = write_ownership(config, info, prompter)

        prompter.print_step("Template sync")
        self.state["sync_enabled"] = configure_sync(config, prompter)

        prompter.print_step("Relocating files")
        self.state["relocated"] = relocate_tree(config, prompter)

        prompter.print_step("Finishing up")
        self.state["script_removed"] = remove_setup_script(config, prompter)

        prompter.console.print(
            Panel(
                "Done!\nIf you encounter any issues, please report it here: "
                f"{config.issues_url}",
                border_style="green",
            )
        )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for ``python -m template_setup``.

    Takes no arguments: the current directory is the project root and every
    setting is asked interactively.
    """
    setup = TemplateSetup(SetupConfig())
    try:
        asyncio.run(setup.run())
    except SetupError as exc:
        sys.exit(exc.exit_code)


if __name__ == "__main__":
    main()
