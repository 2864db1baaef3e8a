"""Interactive collection of :class:`ScaffoldAnswers` using questionary."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import questionary

from .errors import UserCancelled
from .files import is_empty
from .naming import format_target_dir, is_valid_package_name, to_valid_package_name
from .scaffold import resolve_project_name
from .schema import ScaffoldAnswers, ScaffoldOptions

__all__ = ["DEFAULT_TARGET_DIR", "collect_answers", "validate_package_name"]


DEFAULT_TARGET_DIR = "create-components-project"


def _ask(question: Any) -> Any:
    # questionary returns None when the prompt is interrupted
    answer = question.ask()
    if answer is None:
        raise UserCancelled()
    return answer


def validate_package_name(value: str) -> bool | str:
    """Validation hook for the package name prompt."""

    return is_valid_package_name(value) or "Invalid package.json name"


def collect_answers(
    default_target_dir: str = DEFAULT_TARGET_DIR,
    *,
    options: ScaffoldOptions | None = None,
    cwd: str | Path | None = None,
) -> ScaffoldAnswers:
    """Prompt for everything a scaffold run needs."""

    options = options or ScaffoldOptions()
    cwd = Path(cwd) if cwd is not None else Path.cwd()

    project_name = _ask(questionary.text("Project name:", default=default_target_dir))
    target_dir = format_target_dir(project_name) or default_target_dir
    root = cwd / target_dir

    overwrite = None
    if root.is_dir() and not is_empty(root):
        location = "Current directory" if target_dir == "." else f'Target directory "{target_dir}"'
        overwrite = _ask(
            questionary.confirm(f"{location} is not empty. Remove existing files and continue?", default=False)
        )
        if not overwrite:
            raise UserCancelled()

    package_name = None
    name = resolve_project_name(target_dir, cwd)
    if not is_valid_package_name(name):
        package_name = _ask(
            questionary.text(
                "Package name:",
                default=to_valid_package_name(name),
                validate=validate_package_name,
            )
        )

    git_init = False
    if options.include_git_init:
        git_init = _ask(questionary.confirm("Initialize a git repository?", default=True))

    contributors = None
    if options.include_contributors:
        contributors = _ask(
            questionary.text("Contributors (GitHub user or organization):", default=options.default_contributor)
        )

    return ScaffoldAnswers(
        target_dir=target_dir,
        overwrite=overwrite,
        package_name=package_name,
        git_init=git_init,
        contributors=contributors or None,
    )
