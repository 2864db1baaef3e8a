"""Project scaffolding helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping

from .config import ProjectConfig
from .descriptor import DESCRIPTOR_FILENAME, apply_project_identity, load_descriptor, write_descriptor
from .errors import DestinationNotEmptyError
from .files import copy, empty_dir, is_empty
from .schema import ScaffoldAnswers, ScaffoldOptions
from .template import TemplateRenderer, write_template
from .vcs import init_repository

__all__ = ["ProjectScaffolder", "ScaffoldResult", "TEMPLATE_ROOT", "resolve_project_name"]


LOGGER = logging.getLogger(__name__)

TEMPLATE_ROOT = Path(__file__).resolve().parent / "template"

# Files shipped under another name so packaging tools leave them alone.
RENAME_FILES = {"_gitignore": ".gitignore"}

TEMPLATED_FILES = (
    "vite.config.ts",
    "src/index.tsx",
    "examples/src/App.tsx",
)

README_FILENAME = "README.md"
README_PLACEHOLDER = "%PROJECT_NAME%"


def resolve_project_name(target_dir: str, cwd: Path) -> str:
    """Return the project name implied by ``target_dir``."""

    if target_dir == ".":
        return cwd.resolve().name
    return target_dir


@dataclass(slots=True)
class ScaffoldResult:
    """Outcome of a successful :meth:`ProjectScaffolder.create` call."""

    root: Path
    config: ProjectConfig
    git_initialized: bool = False


@dataclass(slots=True)
class ProjectScaffolder:
    """Materialise the component template into a new project directory."""

    renderer: TemplateRenderer
    options: ScaffoldOptions
    template_dir: Path
    vcs: Callable[[Path], bool]

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        *,
        options: ScaffoldOptions | None = None,
        template_dir: str | Path | None = None,
        vcs: Callable[[Path], bool] = init_repository,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.options = options or ScaffoldOptions()
        self.template_dir = Path(template_dir) if template_dir is not None else TEMPLATE_ROOT
        self.vcs = vcs

    def create(self, answers: ScaffoldAnswers, *, cwd: str | Path | None = None) -> ScaffoldResult:
        """Create the project described by ``answers`` below ``cwd``.

        Nothing is written when the package name is invalid, the template
        descriptor is unreadable in strict mode, or the destination is not
        empty and overwriting was not approved. Later filesystem errors
        propagate and leave the partially written project on disk.
        """

        cwd = Path(cwd) if cwd is not None else Path.cwd()
        root = cwd / answers.target_dir
        project_name = resolve_project_name(answers.target_dir, cwd)

        config = ProjectConfig.from_name(project_name, package=answers.package_name, options=self.options)
        descriptor = load_descriptor(self.template_dir, strict=self.options.strict_descriptor)

        self.prepare_destination(root, overwrite=bool(answers.overwrite))
        LOGGER.info("scaffolding %s into %s", config.package, root)

        self.copy_template_tree(root)

        contributors = None
        if self.options.include_contributors:
            contributors = answers.contributors or self.options.default_contributor
        descriptor = apply_project_identity(
            descriptor,
            config.package,
            contributors,
            config.name,
            license=self.options.license,
        )
        write_descriptor(root / DESCRIPTOR_FILENAME, descriptor)

        self.evaluate_templates(root, config.fields())
        self.rewrite_readme(root, config.package)

        git_initialized = False
        if self.options.include_git_init and answers.git_init:
            git_initialized = self.vcs(root)

        return ScaffoldResult(root=root, config=config, git_initialized=git_initialized)

    def prepare_destination(self, root: Path, *, overwrite: bool = False) -> None:
        """Make sure ``root`` exists and holds nothing besides VCS metadata."""

        if not root.exists():
            root.mkdir(parents=True)
            return

        if not root.is_dir():
            raise NotADirectoryError(root)

        if is_empty(root):
            return

        if not overwrite:
            raise DestinationNotEmptyError(root)

        LOGGER.info("removing existing files in %s", root)
        empty_dir(root)

    def copy_template_tree(self, root: Path) -> None:
        """Copy every template entry except the descriptor into ``root``."""

        for entry in self.template_dir.iterdir():
            if entry.name == DESCRIPTOR_FILENAME:
                continue
            copy(entry, root / RENAME_FILES.get(entry.name, entry.name))

    def evaluate_templates(self, root: Path, fields: Mapping[str, Any]) -> None:
        for relative_path in TEMPLATED_FILES:
            path = root / relative_path
            if not path.is_file():
                LOGGER.debug("template %s not shipped, skipping", relative_path)
                continue
            write_template(path, fields, renderer=self.renderer)

    def rewrite_readme(self, root: Path, project_name: str) -> None:
        """Replace the first README placeholder with ``project_name``."""

        readme = root / README_FILENAME
        if not readme.is_file():
            return
        text = readme.read_text(encoding="utf-8")
        readme.write_text(text.replace(README_PLACEHOLDER, project_name, 1), encoding="utf-8")
