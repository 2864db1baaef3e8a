"""Loading and rewriting of the template ``package.json`` descriptor."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from .errors import DescriptorParseFailure

__all__ = [
    "DESCRIPTOR_FILENAME",
    "apply_project_identity",
    "dump_descriptor",
    "load_descriptor",
    "write_descriptor",
]


LOGGER = logging.getLogger(__name__)

DESCRIPTOR_FILENAME = "package.json"
GITHUB_URL = "https://github.com"


def load_descriptor(template_dir: str | Path, *, strict: bool = False) -> dict[str, Any]:
    """Read ``package.json`` from ``template_dir``.

    A missing file yields an empty descriptor. A malformed file raises
    :class:`DescriptorParseFailure` when ``strict`` is set; otherwise the
    problem is logged and an empty descriptor is returned.
    """

    path = Path(template_dir) / DESCRIPTOR_FILENAME
    if not path.is_file():
        LOGGER.debug("no descriptor at %s", path)
        return {}

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError("top level value must be an object")
    except ValueError as exc:
        if strict:
            raise DescriptorParseFailure(path, str(exc)) from exc
        LOGGER.warning("ignoring unreadable descriptor %s: %s", path, exc)
        return {}

    return payload


def _repository_urls(contributors: str, package_name: str) -> dict[str, str]:
    base = f"{GITHUB_URL}/{contributors}/{package_name}"
    return {
        "homepage": f"{base}#readme",
        "repository": f"{base}.git",
        "bugs": f"{base}/issues",
    }


def apply_project_identity(
    descriptor: Mapping[str, Any],
    package_name: str,
    contributors: str | None,
    project_name: str,
    *,
    license: str = "MIT",
) -> dict[str, Any]:
    """Return a copy of ``descriptor`` describing the new project.

    Keys already present keep their position; new keys are appended. URL and
    author fields are only written when ``contributors`` is given.
    """

    result = dict(descriptor)
    result["name"] = package_name
    result["keywords"] = [project_name]
    result["description"] = project_name

    if contributors:
        urls = _repository_urls(contributors, package_name)
        result["homepage"] = urls["homepage"]

        repository = result.get("repository")
        repository = dict(repository) if isinstance(repository, Mapping) else {}
        repository["type"] = "git"
        repository["url"] = urls["repository"]
        result["repository"] = repository

        bugs = result.get("bugs")
        bugs = dict(bugs) if isinstance(bugs, Mapping) else {}
        bugs["url"] = urls["bugs"]
        result["bugs"] = bugs

        result["author"] = contributors

    result["license"] = license
    return result


def dump_descriptor(descriptor: Mapping[str, Any]) -> str:
    return json.dumps(descriptor, indent=2, ensure_ascii=False) + "\n"


def write_descriptor(path: str | Path, descriptor: Mapping[str, Any]) -> Path:
    """Serialise ``descriptor`` to ``path`` and return the written path."""

    path = Path(path)
    path.write_text(dump_descriptor(descriptor), encoding="utf-8")
    LOGGER.debug("wrote descriptor %s", path)
    return path
