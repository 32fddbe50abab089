"""Command line interface for tagselector."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from tagselector.config import TAGSELECTOR_LOG_LEVEL, TAGSELECTOR_SETTINGS_PATH
from tagselector.exceptions import ConfigurationMissingError, EmptyResultError, TagNotFoundError
from tagselector.insertion import Cursor, read_buffer, write_buffer
from tagselector.schemas import AggregationResult
from tagselector.selection import describe_insert_mode, resolve_insertion
from tagselector.selector import collect_tags, insert_selected, list_tag_files, select_tag
from tagselector.settings import load_settings, resolve_tag_directory, save_settings
from tagselector.tags import count_tags, render_tag_tree
from tagselector.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

_NOTICES = (ConfigurationMissingError, EmptyResultError, TagNotFoundError)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagselector",
        description="Pick tags from the heading tree of markdown tag documents.",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=TAGSELECTOR_SETTINGS_PATH,
        help="Settings file (default: %(default)s)",
    )
    parser.add_argument("--log-level", default=TAGSELECTOR_LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    config_parser = subparsers.add_parser("config", help="Show or set the tag directory")
    config_parser.add_argument("--tag-directory", help="Directory holding the tag documents")
    config_parser.set_defaults(handler=_cmd_config)

    files_parser = subparsers.add_parser("files", help="List tag documents")
    files_parser.set_defaults(handler=_cmd_files)

    tags_parser = subparsers.add_parser("tags", help="Print the tag tree")
    tags_parser.add_argument("--file", help="Only use this document (relative to the tag directory)")
    tags_parser.add_argument("--json", action="store_true", help="Print the forest as JSON")
    tags_parser.set_defaults(handler=_cmd_tags)

    insert_parser = subparsers.add_parser("insert", help="Resolve a tag and insert it")
    target = insert_parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--path", help="Full path of the tag, e.g. Project/Backend")
    target.add_argument("--index", type=int, help="Index shown by the 'tags' command")
    insert_parser.add_argument("--label-only", action="store_true", help="Insert the bare label instead of the full path")
    insert_parser.add_argument("--file", help="Only use this document (relative to the tag directory)")
    insert_parser.add_argument("--into", type=Path, help="File to insert the tag into")
    insert_parser.add_argument("--line", type=int, default=0, help="Zero-based cursor line")
    insert_parser.add_argument("--column", type=int, default=0, help="Zero-based cursor column")
    insert_parser.set_defaults(handler=_cmd_insert)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level.upper())

    try:
        return asyncio.run(args.handler(args))
    except _NOTICES as exc:
        print(f"Notice: {exc}", file=sys.stderr)
        return 1


async def _cmd_config(args: argparse.Namespace) -> int:
    settings = load_settings(args.settings)
    if args.tag_directory is not None:
        settings.tag_directory_path = args.tag_directory
        save_settings(settings, args.settings)
    print(f"tag_directory_path: {settings.tag_directory_path or '(not set)'}")
    return 0


async def _cmd_files(args: argparse.Namespace) -> int:
    settings = load_settings(args.settings)
    root = resolve_tag_directory(settings)
    files = await list_tag_files(settings)
    if not files:
        print(f"Notice: No markdown files found in {root}", file=sys.stderr)
        return 1
    for path in files:
        print(path.relative_to(root).as_posix())
    return 0


async def _cmd_tags(args: argparse.Namespace) -> int:
    result = await _collect(args)
    if args.json:
        print(json.dumps([node.model_dump() for node in result.nodes], indent=2, ensure_ascii=False))
    else:
        print(render_tag_tree(result.nodes, numbered=True))
    return 0


async def _cmd_insert(args: argparse.Namespace) -> int:
    result = await _collect(args)
    node = select_tag(result.nodes, full_path=args.path, index=args.index)
    insert_full_path = not args.label_only

    if args.into is None:
        print(resolve_insertion(node, insert_full_path))
        return 0

    buffer = await read_buffer(args.into, Cursor(line=args.line, ch=args.column))
    value = insert_selected(buffer, node, insert_full_path)
    await write_buffer(args.into, buffer)
    logger.info(
        "Tag inserted",
        extra={
            "tag": value,
            "mode": describe_insert_mode(insert_full_path),
            "file": str(args.into),
        },
    )
    print(value)
    return 0


async def _collect(args: argparse.Namespace) -> AggregationResult:
    settings = load_settings(args.settings)
    result = await collect_tags(settings, file=args.file)
    for failure in result.failures:
        print(f"Warning: skipped {failure.path}: {failure.error}", file=sys.stderr)
    logger.debug(
        "Tags collected",
        extra={"documents": result.documents, "tags": count_tags(result.nodes)},
    )
    return result


if __name__ == "__main__":
    sys.exit(main())
