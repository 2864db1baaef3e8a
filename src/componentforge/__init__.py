"""Scaffold React component and hook libraries from a bundled template.

The package exposes helpers for turning a free text project name into
``package.json`` and React identifiers, a small placeholder based template
renderer, and the scaffolder that copies the template into a new project. All
of it is reused by the ``create-components`` command line interface.
"""

from __future__ import annotations

from .config import ProjectConfig
from .errors import (
    DescriptorParseFailure,
    DestinationNotEmptyError,
    InvalidPackageNameError,
    InvalidProjectNameError,
    ScaffoldError,
    UserCancelled,
)
from .naming import is_valid_package_name, to_valid_component_name, to_valid_package_name
from .scaffold import ProjectScaffolder, ScaffoldResult
from .schema import ScaffoldAnswers, ScaffoldOptions
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "DescriptorParseFailure",
    "DestinationNotEmptyError",
    "InvalidPackageNameError",
    "InvalidProjectNameError",
    "ProjectConfig",
    "ProjectScaffolder",
    "ScaffoldAnswers",
    "ScaffoldError",
    "ScaffoldOptions",
    "ScaffoldResult",
    "TemplateRenderer",
    "TemplateRenderingError",
    "UserCancelled",
    "is_valid_package_name",
    "to_valid_component_name",
    "to_valid_package_name",
]

__version__ = "0.1.0"
