"""Shared pytest fixtures for the template setup test suite.

Provides reusable fixtures for:
- A scripted ``Prompter`` with captured console output
- A sample ``ProjectInfo``
- A cloned-template layout under ``tmp_path`` and its ``SetupConfig``
"""

from __future__ import annotations

import io
import shutil
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from template_setup.config import SETUP_SOURCE_DIR, SetupConfig
from template_setup.models import ProjectInfo
from template_setup.prompts import Prompter


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------


def scripted_prompter(*answers: str) -> Prompter:
    """A ``Prompter`` that reads *answers* line by line and records output."""
    stream = io.StringIO("".join(f"{answer}\n" for answer in answers))
    console = Console(file=io.StringIO(), width=200, color_system=None)
    return Prompter(input_stream=stream, console=console)


@pytest.fixture
def make_prompter() -> Callable[..., Prompter]:
    return scripted_prompter


@pytest.fixture
def prompter() -> Prompter:
    """A prompter with no scripted answers."""
    return scripted_prompter()


# ---------------------------------------------------------------------------
# Project data
# ---------------------------------------------------------------------------


INFO_ANSWERS: list[str] = [
    "Ada Lovelace",
    "ada@x.org",
    "ada",
    "engine",
    "Engine",
    "An analytical engine.",
    "A longer description of the analytical engine.",
    "https://engine.example.org",
]


@pytest.fixture
def info_answers() -> list[str]:
    """Answers to the eight project questions, in order."""
    return list(INFO_ANSWERS)


@pytest.fixture
def project_info() -> ProjectInfo:
    return ProjectInfo(
        name="Ada Lovelace",
        email="ada@x.org",
        username="ada",
        repository="engine",
        proj_name="Engine",
        proj_short_desc="An analytical engine.",
        proj_long_desc="A longer description of the analytical engine.",
        docs_url="https://engine.example.org",
    )


# ---------------------------------------------------------------------------
# Cloned template layout
# ---------------------------------------------------------------------------


SETTINGS_YML = textwrap.dedent("""\
    repository:
      name: '{{PROJECT_NAME}}'
      description: '{{PROJECT_SHORT_DESCRIPTION}}'
    labels:
      - name: 'Type: Bug'
        color: d73a4a
        description: Something isn't working
""")


def build_template_repo(root: Path) -> Path:
    """Lay out a freshly cloned template repository under *root*."""
    template = root / "template"
    github = template / ".github"
    (github / "workflows").mkdir(parents=True)
    (github / "ISSUE_TEMPLATE").mkdir()

    (template / "README.md").write_text(
        "# {{PROJECT_NAME}}\n\n{{PROJECT_LONG_DESCRIPTION}}\n\n"
        "Docs: {{DOCS_URL}}\nhttps://github.com/{{REPOSITORY}}\n",
        encoding="utf-8",
    )
    (template / "LICENSE").write_text(
        "Copyright (c) {{NAME}} <{{EMAIL}}>\n", encoding="utf-8"
    )
    (template / "docs").mkdir()
    (template / "docs" / "index.md").write_text(
        "# {{PROJECT_NAME}}\n{{PROJECT_SHORT_DESCRIPTION}}\n", encoding="utf-8"
    )
    (github / "CODEOWNERS").write_text("# Owners\n", encoding="utf-8")
    (github / "settings.yml").write_text(SETTINGS_YML, encoding="utf-8")
    (github / "workflows" / "sync-template.yml").write_text(
        "name: Sync {{REPOSITORY}}\n", encoding="utf-8"
    )
    (github / "ISSUE_TEMPLATE" / "bug.md").write_text(
        "assignees: {{USERNAME}}\n", encoding="utf-8"
    )

    # The template repository's own files, replaced by the template tree.
    (root / "README.md").write_text("# Template\n", encoding="utf-8")
    (root / ".github" / "workflows").mkdir(parents=True)
    (root / ".github" / "workflows" / "template-ci.yml").write_text(
        "name: template CI\n", encoding="utf-8"
    )
    (root / "package.json").write_text("{}\n", encoding="utf-8")
    (root / "package-lock.json").write_text("{}\n", encoding="utf-8")
    (root / ".prettierignore").write_text("template\n", encoding="utf-8")
    (root / "node_modules" / "prettier").mkdir(parents=True)
    (root / "node_modules" / "prettier" / "index.js").write_text("\n", encoding="utf-8")
    # A copy of the setup sources, deleted at the end of a run.
    shutil.copytree(
        SETUP_SOURCE_DIR, root / SETUP_SOURCE_DIR.name,
        ignore=shutil.ignore_patterns("__pycache__"),
    )
    return template


@pytest.fixture
def template_repo(tmp_path: Path) -> Path:
    """Project root holding a cloned template layout."""
    root = tmp_path / "clone"
    root.mkdir()
    build_template_repo(root)
    return root


@pytest.fixture
def setup_config(template_repo: Path) -> SetupConfig:
    return SetupConfig(
        root_dir=template_repo, script_path=template_repo / SETUP_SOURCE_DIR.name
    )
