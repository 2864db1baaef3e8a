"""Post-scaffold instructions tailored to the invoking package manager."""

from __future__ import annotations

import os
from pathlib import Path
from typing import NamedTuple

__all__ = ["PackageManager", "next_steps", "package_manager_from_user_agent"]


DEFAULT_PACKAGE_MANAGER = "npm"


class PackageManager(NamedTuple):
    name: str
    version: str | None


def package_manager_from_user_agent(user_agent: str | None) -> PackageManager | None:
    """Parse a ``npm_config_user_agent`` value such as ``pnpm/8.6.0 npm/? node/v18``."""

    if not user_agent:
        return None
    product = user_agent.split(" ")[0]
    name, _, version = product.partition("/")
    return PackageManager(name=name, version=version or None)


def next_steps(root: Path, cwd: Path, manager: PackageManager | None = None) -> list[str]:
    """Return the commands a user should run to start working on ``root``."""

    name = manager.name if manager else DEFAULT_PACKAGE_MANAGER
    lines: list[str] = []
    if root.resolve() != cwd.resolve():
        lines.append(f"cd {os.path.relpath(root, cwd)}")

    if name == "yarn":
        lines.extend(["yarn", "yarn dev"])
    else:
        lines.extend([f"{name} install", f"{name} run dev"])
    return lines
