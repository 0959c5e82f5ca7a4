"""Template setup configuration.

Typed configuration for a single setup run.  All settings use Pydantic v2
models so paths and names are validated at construction time.  Nothing is
read from the environment or the command line: the defaults describe the
layout of a freshly cloned template repository, and tests construct the
model against a temporary root.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Fixed content blocks
# ---------------------------------------------------------------------------

TEMPLATE_SYNC_IGNORE = """
.github/ISSUE_TEMPLATE/*
.github/CODEOWNERS
.github/CODESTYLE.md
.github/PULL_REQUEST_TEMPLATE.md
.github/SECURITY.md
CITATION.cff
LICENSE
README.md"""

TEMPLATE_SYNC_LABEL_NAME = "CI: Template Sync"

TEMPLATE_SYNC_LABEL = f"""
  - name: '{TEMPLATE_SYNC_LABEL_NAME}'
    color: AEB1C2
    description: Sync with upstream template
"""

DEFAULT_PACKAGING_ARTIFACTS: list[str] = [
    "package.json",
    "package-lock.json",
    ".prettierignore",
    "node_modules",
]

# The setup script's own sources: this package directory.
SETUP_SOURCE_DIR = Path(__file__).resolve().parent


class SetupConfig(BaseModel):
    """Configuration for one template setup run.

    Relative file locations are expressed against the template root and are
    resolved through the read-only properties below.
    """

    root_dir: Path = Field(default_factory=Path.cwd, description="Project root")
    template_dir: str = Field(default="template", min_length=1)
    config_dir: str = Field(
        default=".github", min_length=1, description="Hidden configuration folder"
    )
    ownership_file: str = Field(default="CODEOWNERS")
    settings_file: str = Field(default="settings.yml")
    sync_ignore_file: str = Field(default=".templatesyncignore")
    sync_workflow_file: str = Field(default="workflows/sync-template.yml")
    packaging_artifacts: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PACKAGING_ARTIFACTS)
    )
    staging_prefix: str = Field(default="template-setup-")
    script_path: Path = Field(
        default=SETUP_SOURCE_DIR, description="Setup script sources removed at the end"
    )
    sync_docs_url: str = Field(
        default="https://github.com/AndreasAugustin/actions-template-sync"
    )
    issues_url: str = Field(default="https://github.com/caffeine-addictt/template/issues")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def template_path(self) -> Path:
        """Root of the template tree that gets scaffolded."""
        return self.root_dir / self.template_dir

    @property
    def template_config_path(self) -> Path:
        """The template's copy of the hidden configuration folder."""
        return self.template_path / self.config_dir

    @property
    def root_config_path(self) -> Path:
        """The project root's hidden configuration folder."""
        return self.root_dir / self.config_dir

    @property
    def ownership_path(self) -> Path:
        """Ownership-declaration file at its nested template location."""
        return self.template_config_path / self.ownership_file

    @property
    def fallback_ownership_path(self) -> Path:
        """Ownership-declaration copy at the top of the template tree."""
        return self.template_path / self.ownership_file

    @property
    def final_ownership_path(self) -> Path:
        return self.root_config_path / self.ownership_file

    @property
    def settings_path(self) -> Path:
        return self.template_config_path / self.settings_file

    @property
    def sync_ignore_path(self) -> Path:
        return self.template_path / self.sync_ignore_file

    @property
    def final_sync_ignore_path(self) -> Path:
        return self.root_dir / self.sync_ignore_file

    @property
    def sync_workflow_path(self) -> Path:
        return self.template_config_path / self.sync_workflow_file

    def artifact_paths(self) -> list[Path]:
        """Return the packaging artifacts as absolute paths under the root."""
        return [self.root_dir / name for name in self.packaging_artifacts]
