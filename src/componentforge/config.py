"""Derived identifiers shared by the scaffolder and its templates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .errors import InvalidPackageNameError, InvalidProjectNameError
from .naming import is_hook_name, is_valid_package_name, to_valid_component_name, to_valid_package_name
from .schema import ScaffoldOptions


@dataclass(slots=True, frozen=True)
class ProjectConfig:
    """Identifiers computed once from the project name.

    Attributes
    ----------
    name:
        The project name as typed by the user.
    package:
        The ``package.json`` name. Always satisfies
        :func:`~componentforge.naming.is_valid_package_name`.
    component_name:
        The exported React identifier. PascalCase for components, camelCase
        for hooks.
    is_hook:
        ``True`` when :attr:`component_name` starts with ``use``.
    publish_dir:
        Directory the generated project builds into.
    """

    name: str
    package: str
    component_name: str
    is_hook: bool
    publish_dir: str

    @classmethod
    def from_name(
        cls,
        name: str,
        *,
        package: str | None = None,
        options: ScaffoldOptions | None = None,
    ) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` from a human friendly project name.

        ``package`` overrides the package name; when neither it nor ``name``
        is a valid package name, ``name`` is normalised.
        """

        options = options or ScaffoldOptions()
        normalized_name = name.strip()
        if not normalized_name:
            raise InvalidProjectNameError(name)

        package_name = package or normalized_name
        if not is_valid_package_name(package_name):
            package_name = to_valid_package_name(package_name)
        if not is_valid_package_name(package_name):
            raise InvalidPackageNameError(package_name)

        # scoped packages export the unscoped part
        component_name = to_valid_component_name(package_name.rsplit("/", 1)[-1])

        return cls(
            name=normalized_name,
            package=package_name,
            component_name=component_name,
            is_hook=is_hook_name(component_name),
            publish_dir=options.publish_dir(package_name=package_name, component_name=component_name),
        )

    @property
    def hook_name_first_upper_case(self) -> str:
        return self.component_name[:1].upper() + self.component_name[1:]

    def fields(self) -> Mapping[str, Any]:
        """Return the values exposed to templated files."""

        return {
            "isHook": self.is_hook,
            "hookName": self.component_name,
            "componentName": self.component_name,
            "hookNameFirstUpperCase": self.hook_name_first_upper_case,
            "publishDir": self.publish_dir,
        }
