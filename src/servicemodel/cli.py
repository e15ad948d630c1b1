"""CLI entry point for servicemodel."""

from __future__ import annotations

import argparse
from pathlib import Path

from pydantic import ValidationError

from servicemodel import __version__, logger
from servicemodel.builder import run_build
from servicemodel.dependencies import ensure_package_dependencies
from servicemodel.exceptions import PackageError, SchemaWalkError
from servicemodel.logging import configure_logging
from servicemodel.settings import get_settings
from servicemodel.typing.models import BuildRequest


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="servicemodel")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    build_command = subparsers.add_parser("build", help="Build a service model from an OpenAPI document")
    build_command.add_argument("--input", required=True, type=Path, dest="input_path")
    build_command.add_argument("--output", type=Path, default=None, dest="output_path")
    build_command.add_argument("--model-override", type=Path, default=None, dest="model_override_path")

    return parser


def _build_request(args: argparse.Namespace) -> BuildRequest:
    """Build the request from CLI arguments.

    Args:
        args (argparse.Namespace): Parsed CLI args.

    Returns:
        BuildRequest: Request object.
    """
    return BuildRequest(
        input_path=args.input_path,
        output_path=args.output_path,
        model_override_path=getattr(args, "model_override_path", None),
    )


def main() -> int:
    """Run the CLI.

    Returns:
        int: Exit code (0 for success, 1 for error).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args()

    if args.command != "build":
        parser.print_help()
        return 0

    ensure_package_dependencies()
    try:
        request = _build_request(args)
    except ValidationError:
        logger.exception("Invalid build request")
        return 1

    try:
        run_build(request, settings)
    except SchemaWalkError as exc:
        logger.exception("Service model build failed", extra={"schema_path": exc.schema_path})
        return 1
    except PackageError:
        logger.exception("Service model build failed")
        return 1
    except KeyboardInterrupt:
        logger.info("Build aborted by user")
        return 130
    except Exception:
        logger.exception("Unexpected error during build")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
