"""Lightweight string templating utilities.

Templates are plain text containing ``{{ field|filter }}`` placeholders and
``{{#if field}} ... {{else}} ... {{/if}}`` blocks (``{{#unless field}}`` is the
negated form). Nothing in a template is executed: every placeholder is a
lookup into the context mapping handed to the renderer.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping, MutableMapping

from .naming import get_kebab_case, to_valid_component_name, to_valid_package_name

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
    "write_template",
]


LOGGER = logging.getLogger(__name__)

_PLACEHOLDER_PATTERN = re.compile(
    r"{{\s*(?P<expression>[A-Za-z_][\w.]*(?:\s*\|\s*[A-Za-z_]\w*)*)\s*}}"
)
# Matches only innermost blocks; the renderer resolves them until none remain.
_BLOCK_PATTERN = re.compile(
    r"{{\s*#(?P<kind>if|unless)\s+(?P<key>[A-Za-z_][\w.]*)\s*}}\n?"
    r"(?P<body>(?:(?!{{\s*#(?:if|unless)\b).)*?)"
    r"{{\s*/(?P=kind)\s*}}\n?",
    re.DOTALL,
)
_ELSE_PATTERN = re.compile(r"{{\s*else\s*}}\n?")
_STRAY_BLOCK_TAG = re.compile(r"{{\s*(?:#(?:if|unless)\b[^{}]*|/(?:if|unless)|else)\s*}}")

_MISSING_POLICIES = {"keep", "empty", "error"}


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a template.

    ``path`` names the offending template file when the error was raised while
    rendering a file.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(f"{path}: {message}" if path is not None else message)
        self.message = message
        self.path = path


def _resolve_value(context: Mapping[str, Any], dotted_path: str) -> Any:
    value: Any = context
    for segment in dotted_path.split("."):
        if not isinstance(value, Mapping) or segment not in value:
            raise KeyError(segment)
        value = value[segment]
    return value


def _apply_filter(value: Any, filter_name: str, filters: Mapping[str, Callable[[Any], Any]]) -> Any:
    try:
        filter_func = filters[filter_name]
    except KeyError as exc:
        raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc

    return filter_func(value)


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with placeholders and conditional blocks."""

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters.update(
                {
                    "upper": lambda value: str(value).upper(),
                    "lower": lambda value: str(value).lower(),
                    "title": lambda value: str(value).title(),
                    "kebab": lambda value: get_kebab_case(str(value)),
                    "package": lambda value: to_valid_package_name(str(value)),
                    "component": lambda value: to_valid_component_name(str(value)),
                    "repr": lambda value: repr(value),
                    "strip": lambda value: str(value).strip(),
                }
            )

    def _resolve_blocks(self, template: str, context: Mapping[str, Any], missing: str) -> str:
        def substitute(match: re.Match[str]) -> str:
            key = match.group("key")
            try:
                condition = bool(_resolve_value(context, key))
            except KeyError:
                if missing == "error":
                    raise TemplateRenderingError(f"missing value for '{key}'")
                condition = False

            if match.group("kind") == "unless":
                condition = not condition

            branches = _ELSE_PATTERN.split(match.group("body"), maxsplit=1)
            if condition:
                return branches[0]
            return branches[1] if len(branches) > 1 else ""

        text = template
        while _BLOCK_PATTERN.search(text):
            text = _BLOCK_PATTERN.sub(substitute, text)

        stray = _STRAY_BLOCK_TAG.search(text)
        if stray:
            raise TemplateRenderingError(f"unbalanced block tag '{stray.group(0)}'")
        return text

    def render_string(
        self,
        template: str,
        context: Mapping[str, Any],
        *,
        missing: str = "keep",
    ) -> str:
        """Render ``template`` using ``context``.

        Parameters
        ----------
        template:
            The template string to evaluate.
        context:
            Mapping providing values for placeholders and block conditions.
        missing:
            Controls what happens when a placeholder cannot be resolved. The
            supported policies are ``"keep"`` (return the placeholder unchanged),
            ``"empty"`` (replace with an empty string) and ``"error"`` (raise
            :class:`TemplateRenderingError`). Under the first two policies a
            missing block condition counts as false.
        """

        if missing not in _MISSING_POLICIES:
            raise ValueError("missing must be 'keep', 'empty', or 'error'")

        text = self._resolve_blocks(template, context, missing)

        def substitute(match: re.Match[str]) -> str:
            expression = match.group("expression")
            key, *filters = [part.strip() for part in expression.split("|")]
            try:
                value = _resolve_value(context, key)
            except KeyError:
                if missing == "keep":
                    return match.group(0)
                if missing == "empty":
                    return ""
                raise TemplateRenderingError(f"missing value for '{key}'")

            for filter_name in filters:
                value = _apply_filter(value, filter_name, self.filters)

            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, text)

    def render_file(
        self,
        template_path: str | Path,
        context: Mapping[str, Any],
        *,
        target: str | Path | None = None,
        encoding: str = "utf-8",
        missing: str = "keep",
    ) -> str:
        """Render ``template_path`` and optionally write the result to ``target``."""

        template_path = Path(template_path)
        if not template_path.is_file():
            raise FileNotFoundError(template_path)

        text = template_path.read_text(encoding=encoding)
        try:
            rendered = self.render_string(text, context, missing=missing)
        except TemplateRenderingError as exc:
            raise TemplateRenderingError(exc.message, path=template_path) from exc

        if target is not None:
            target_path = Path(target)
            target_path.parent.mkdir(parents=True, exist_ok=True)
            target_path.write_text(rendered, encoding=encoding)
            LOGGER.debug("rendered %s -> %s", template_path, target_path)

        return rendered


def write_template(
    path: str | Path,
    fields: Mapping[str, Any],
    *,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render the file at ``path`` with ``fields`` and overwrite it in place."""

    renderer = renderer or TemplateRenderer()
    return renderer.render_file(path, fields, target=path, missing="error")
