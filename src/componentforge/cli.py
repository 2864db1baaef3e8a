"""Command line interface for componentforge."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Iterable, Sequence

from pydantic import ValidationError

from .errors import ScaffoldError, UserCancelled
from .naming import format_target_dir
from .prompts import DEFAULT_TARGET_DIR, collect_answers
from .scaffold import ProjectScaffolder
from .schema import ScaffoldAnswers, ScaffoldOptions
from .template import TemplateRenderer, TemplateRenderingError
from .usage import next_steps, package_manager_from_user_agent

LOGGER = logging.getLogger("componentforge")

_BOOLEAN_VALUES = {"true": True, "false": False}


def _parse_key_value_pairs(pairs: Iterable[str]) -> dict[str, Any]:
    context: dict[str, Any] = {}
    for pair in pairs:
        if "=" not in pair:
            raise argparse.ArgumentTypeError(
                f"invalid key/value pair '{pair}'. Expected KEY=VALUE syntax."
            )
        key, value = pair.split("=", 1)
        key = key.strip()
        if not key:
            raise argparse.ArgumentTypeError("keys must not be empty")
        context[key] = _BOOLEAN_VALUES.get(value.lower(), value)
    return context


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-components",
        description="Scaffold a React component or hook library",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v for info, -vv for debug)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="create a new component project")
    init_parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Project name and target directory",
    )
    init_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Skip the prompts and use the command line values",
    )
    init_parser.add_argument("--package", help="Override the generated package name (with --yes)")
    init_parser.add_argument("--contributors", help="GitHub user or organization (with --yes)")
    init_parser.add_argument(
        "--git",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Initialize a git repository (with --yes)",
    )
    init_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Remove existing files in the target directory (with --yes)",
    )
    init_parser.add_argument(
        "--publish-dir",
        default=None,
        help="Build output directory; may reference {package_name} and {component_name}",
    )

    render_parser = subparsers.add_parser(
        "render", help="render a template file with placeholders and conditional blocks"
    )
    render_parser.add_argument("template", type=Path, help="Path to the template file")
    render_parser.add_argument(
        "-c",
        "--context",
        metavar="KEY=VALUE",
        action="append",
        default=[],
        help="Values exposed to the template renderer; true/false become booleans",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the rendered template to this path instead of stdout",
    )
    render_parser.add_argument(
        "--missing",
        choices=["keep", "empty", "error"],
        default="keep",
        help="Behaviour when a placeholder cannot be resolved",
    )

    return parser


def _handle_init(args: argparse.Namespace) -> int:
    try:
        options = ScaffoldOptions()
        if args.publish_dir is not None:
            options = ScaffoldOptions(publish_dir_template=args.publish_dir)

        default_target = format_target_dir(args.target) or DEFAULT_TARGET_DIR
        if args.yes:
            answers = ScaffoldAnswers(
                target_dir=default_target,
                overwrite=args.force,
                package_name=args.package,
                git_init=args.git,
                contributors=args.contributors,
            )
        else:
            answers = collect_answers(default_target, options=options)
    except ValidationError as exc:
        print(exc, file=sys.stderr)
        return 2

    cwd = Path.cwd()
    result = ProjectScaffolder(TemplateRenderer(), options=options).create(answers, cwd=cwd)

    manager = package_manager_from_user_agent(os.environ.get("npm_config_user_agent"))
    print(f"Project created at {result.root}")
    print("\nDone. Now run:\n")
    for line in next_steps(result.root, cwd, manager):
        print(f"  {line}")
    print()
    return 0


def _handle_render(args: argparse.Namespace) -> int:
    renderer = TemplateRenderer()
    context = _parse_key_value_pairs(args.context)
    rendered = renderer.render_file(args.template, context, missing=args.missing)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(rendered, encoding="utf-8")
    else:
        sys.stdout.write(rendered)
        if not rendered.endswith("\n"):
            sys.stdout.write("\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    try:
        if args.command == "init":
            return _handle_init(args)
        if args.command == "render":
            return _handle_render(args)
    except UserCancelled as exc:
        print(f"✖ {exc}")
        return 0
    except (ScaffoldError, TemplateRenderingError, OSError) as exc:
        LOGGER.debug("command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
