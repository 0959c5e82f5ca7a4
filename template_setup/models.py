"""Data models for the template setup.

``ProjectInfo`` is the immutable answer set collected from the operator.
``PLACEHOLDER_TOKENS`` is the closed, ordered mapping from literal template
markers to the ``ProjectInfo`` value each one expands to.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field


class ProjectInfo(BaseModel):
    """Project metadata supplied by the operator.

    No field is validated beyond being a string: an empty answer is a valid
    answer.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Author name (goes on the LICENSE)")
    email: str = Field(default="")
    username: str = Field(default="", description="GitHub account name")
    repository: str = Field(default="", description="Repository name under the account")
    proj_name: str = Field(default="")
    proj_short_desc: str = Field(default="")
    proj_long_desc: str = Field(default="")
    docs_url: str = Field(default="")

    @property
    def full_repository(self) -> str:
        """``username/repository`` as used in GitHub URLs."""
        return f"{self.username}/{self.repository}"

    def summary(self) -> dict[str, str]:
        """Return a label -> value mapping for display."""
        return {
            "Name": self.name,
            "Email": self.email,
            "Username": self.username,
            "Repository": self.repository,
            "Project name": self.proj_name,
            "Project short description": self.proj_short_desc,
            "Project long description": self.proj_long_desc,
            "Docs URL": self.docs_url,
        }


# Applied in this order.  A value containing a marker that comes later in the
# mapping is expanded as well.
PLACEHOLDER_TOKENS: dict[str, Callable[[ProjectInfo], str]] = {
    "{{REPOSITORY}}": lambda info: info.full_repository,
    "{{PROJECT_NAME}}": lambda info: info.proj_name,
    "{{PROJECT_SHORT_DESCRIPTION}}": lambda info: info.proj_short_desc,
    "{{PROJECT_LONG_DESCRIPTION}}": lambda info: info.proj_long_desc,
    "{{DOCS_URL}}": lambda info: info.docs_url,
    "{{EMAIL}}": lambda info: info.email,
    "{{USERNAME}}": lambda info: info.username,
    "{{NAME}}": lambda info: info.name,
}


def token_values(info: ProjectInfo) -> list[tuple[str, str]]:
    """Resolve every placeholder against *info*, in application order."""
    return [(token, resolve(info)) for token, resolve in PLACEHOLDER_TOKENS.items()]
