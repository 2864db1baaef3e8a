"""Pydantic models exchanged between the prompts, the CLI and the scaffolder."""

from __future__ import annotations

from string import Formatter

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import format_target_dir, is_valid_package_name

__all__ = ["ScaffoldAnswers", "ScaffoldOptions"]

_PUBLISH_DIR_FIELDS = {"package_name", "component_name"}


class ScaffoldOptions(BaseModel):
    """Switches selecting which parts of a scaffold run are enabled."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    include_git_init: bool = Field(default=True, description="Offer to run `git init` in the new project.")
    include_contributors: bool = Field(
        default=True,
        description="Ask for contributors and derive author and GitHub URLs from them.",
    )
    publish_dir_template: str = Field(
        default="dist",
        description="Build output directory, formatted with `package_name` and `component_name`.",
    )
    license: str = Field(default="MIT", description="License written into package.json.")
    default_contributor: str = Field(
        default="your-github-name", description="Contributor suggested by the prompts."
    )
    strict_descriptor: bool = Field(
        default=True,
        description="Fail on a malformed template package.json instead of starting from an empty one.",
    )

    @field_validator("publish_dir_template")
    @classmethod
    def _check_publish_dir_fields(cls, value: str) -> str:
        names = {name for _, name, _, _ in Formatter().parse(value) if name is not None}
        unknown = names - _PUBLISH_DIR_FIELDS
        if unknown:
            raise ValueError(f"unknown publish_dir_template fields: {', '.join(sorted(unknown))}")
        return value

    def publish_dir(self, *, package_name: str, component_name: str) -> str:
        return self.publish_dir_template.format(
            package_name=package_name, component_name=component_name
        )


class ScaffoldAnswers(BaseModel):
    """Values collected from the user for a single scaffold run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target_dir: str = Field(..., description="Directory to create, relative to the working directory.")
    overwrite: bool | None = Field(
        default=None, description="Whether existing files in the target may be removed."
    )
    package_name: str | None = Field(
        default=None, description="Explicit package.json name overriding the derived one."
    )
    git_init: bool = Field(default=False, description="Initialise a git repository after scaffolding.")
    contributors: str | None = Field(default=None, description="GitHub user or organisation owning the project.")

    @field_validator("target_dir")
    @classmethod
    def _normalise_target_dir(cls, value: str) -> str:
        value = format_target_dir(value)
        if not value:
            raise ValueError("target_dir must not be empty")
        return value

    @field_validator("package_name")
    @classmethod
    def _check_package_name(cls, value: str | None) -> str | None:
        if value is not None and not is_valid_package_name(value):
            raise ValueError(f"invalid package.json name {value!r}")
        return value
