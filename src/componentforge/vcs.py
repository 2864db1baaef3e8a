"""Version control integration for freshly scaffolded projects."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable

__all__ = ["init_repository"]


LOGGER = logging.getLogger(__name__)


def init_repository(
    path: str | Path,
    *,
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> bool:
    """Run ``git init`` inside ``path`` with the terminal's standard streams.

    Returns ``False`` when git is unavailable or exits with an error; the
    project files written before this step are left in place. No timeout is
    applied.
    """

    path = Path(path)
    try:
        runner(["git", "init"], cwd=path, check=True)
    except FileNotFoundError:
        LOGGER.warning("git executable not found, skipping repository initialisation")
        return False
    except subprocess.CalledProcessError as exc:
        LOGGER.warning("git init failed in %s with exit code %s", path, exc.returncode)
        return False

    LOGGER.info("initialised git repository in %s", path)
    return True
