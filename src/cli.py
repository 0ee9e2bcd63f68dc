"""Command-line interface for linkmap-typedoc."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import orjson

from artifacts.write import generate_link_mappings
from contract.artifacts import LINK_MAPPING_JSON
from contract.validation import validate_link_mapping_doc
from reflection.deserialize import ReflectionError
from rules.config import (
    ConfigError,
    LinkMapConfig,
    load_config,
    resolve_output_path,
)
from verify.verify import verify_determinism


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        default=".",
        help="Directory containing linkmap.toml (default: .)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkmap",
        description="Generates a link mapping file given a TypeDoc JSON file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate", help="Generate a link-mapping document"
    )
    generate_parser.add_argument(
        "typedoc_json_file_path",
        help="Path to a TypeDoc JSON file, for example $YOUR_REPO/types.json",
    )
    generate_parser.add_argument(
        "output_path",
        nargs="?",
        default=None,
        help=(
            "Where to save the output, for example "
            "$YOUR_REPO/docs/link_mapping.json (default: config output_path)"
        ),
    )
    _add_common_options(generate_parser)

    validate_parser = subparsers.add_parser(
        "validate", help="Validate a link-mapping document"
    )
    validate_parser.add_argument("output_path", help="Link-mapping document to check")
    validate_parser.add_argument(
        "--allow-legacy",
        action="store_true",
        help="Accept records without defaultLabel",
    )
    validate_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )

    verify_parser = subparsers.add_parser(
        "verify", help="Verify a link-mapping document regenerates identically"
    )
    verify_parser.add_argument(
        "typedoc_json_file_path", help="TypeDoc JSON file the output came from"
    )
    verify_parser.add_argument("output_path", help="Link-mapping document to verify")
    _add_common_options(verify_parser)

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


def _resolve_output_path(
    root: Path, output_path: str | None, config: LinkMapConfig
) -> Path:
    if output_path is not None:
        return Path(output_path).expanduser().resolve()
    return resolve_output_path(root, config.output_path or LINK_MAPPING_JSON)


def _handle_generate(root: Path, input_path: str, output_path: str | None) -> int:
    try:
        config = load_config(root)
        resolved_output = _resolve_output_path(root, output_path, config)
        generate_link_mappings(
            input_path=Path(input_path).expanduser().resolve(),
            output_path=resolved_output,
            config=config,
        )
    except (ConfigError, ReflectionError, orjson.JSONDecodeError, OSError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    return 0


def _handle_validate(output_path: str, allow_legacy: bool) -> int:
    path = Path(output_path).expanduser().resolve()
    result = validate_link_mapping_doc(path, allow_legacy=allow_legacy)
    for warning in result.warnings:
        sys.stderr.write(f"{warning.location()}: warning: {warning.message}\n")
    if result.errors:
        for error in result.errors:
            sys.stderr.write(f"{error.location()}: {error.message}\n")
        return 1
    return 0


def _handle_verify(root: Path, input_path: str, output_path: str) -> int:
    resolved_input = Path(input_path).expanduser().resolve()
    resolved_output = Path(output_path).expanduser().resolve()
    if not resolved_input.is_file():
        sys.stderr.write(f"error: input file does not exist: {resolved_input}\n")
        return 1
    try:
        result = verify_determinism(
            input_path=resolved_input,
            output_path=resolved_output,
            root=root,
        )
    except (FileNotFoundError, IsADirectoryError) as exc:
        sys.stderr.write(f"output: {resolved_output}\n")
        sys.stderr.write(f"error: {exc}\n")
        return 2
    except (ConfigError, ReflectionError, orjson.JSONDecodeError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    if not result.ok:
        sys.stderr.write(f"mismatch: {result.output_path}\n")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    if args.command == "generate":
        root = Path(args.root).expanduser().resolve()
        return _handle_generate(root, args.typedoc_json_file_path, args.output_path)

    if args.command == "validate":
        return _handle_validate(args.output_path, args.allow_legacy)

    if args.command == "verify":
        root = Path(args.root).expanduser().resolve()
        return _handle_verify(root, args.typedoc_json_file_path, args.output_path)

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
