"""Exception types raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(RuntimeError):
    """Base class for failures the command line reports to the user."""


class UserCancelled(ScaffoldError):
    """Raised when the user aborts a prompt or declines to overwrite files."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)


class DestinationNotEmptyError(ScaffoldError):
    """Raised when the target directory holds files and overwrite was not approved."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"target directory {path} is not empty")
        self.path = path


class InvalidProjectNameError(ScaffoldError, ValueError):
    """Raised when no project name can be derived from the target directory."""

    def __init__(self, name: str) -> None:
        super().__init__(f"invalid project name {name!r}")
        self.name = name


class InvalidPackageNameError(ScaffoldError, ValueError):
    """Raised when a package name does not satisfy the package.json grammar."""

    def __init__(self, name: str) -> None:
        super().__init__(f"invalid package.json name {name!r}")
        self.name = name


class DescriptorParseFailure(ScaffoldError):
    """Raised when the template ``package.json`` cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path


__all__ = [
    "DescriptorParseFailure",
    "DestinationNotEmptyError",
    "InvalidPackageNameError",
    "InvalidProjectNameError",
    "ScaffoldError",
    "UserCancelled",
]
