"""Interactive setup for a freshly cloned project template.

Asks for project metadata, expands the ``{{PLACEHOLDER}}`` markers in every
file of the ``template/`` directory, moves the tree into the project root and
optionally configures the template-sync workflow.

Quick usage::

    from template_setup import SetupConfig, TemplateSetup

    setup = TemplateSetup(SetupConfig(root_dir=Path("/path/to/clone")))
    state = await setup.run()
"""

from template_setup.config import SetupConfig
from template_setup.models import PLACEHOLDER_TOKENS, ProjectInfo
from template_setup.pipeline import TemplateSetup, main
from template_setup.prompts import Prompter
from template_setup.substitution import replace_in_file, replace_tokens

__all__ = [
    "PLACEHOLDER_TOKENS",
    "ProjectInfo",
    "Prompter",
    "SetupConfig",
    "TemplateSetup",
    "main",
    "replace_in_file",
    "replace_tokens",
]
