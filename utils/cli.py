"""
Command line entry point.

Usage:
    mcp-scaffold generate tool search_posts query:string limit:integer
    mcp-scaffold generate resource post title:string views:integer published:boolean
    mcp-scaffold generate resource post --schema db/schema.toml
    mcp-scaffold destroy resource post
    mcp-scaffold tools
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from generators.base import BaseGenerator, FileAction
from generators.exceptions import GeneratorError
from generators.introspection import TomlSchemaIntrospector
from generators.renderer import ToolRenderer
from generators.resource_generator import ResourceGenerator
from generators.tool_generator import ToolGenerator
from models.attribute import parse_attributes
from tools.autoload import ToolAutoloader
from tools.exceptions import ToolError
from tools.registry import ToolRegistry
from utils.config import Config
from utils.load_config import ConfigError, load_config, resolve_config_path
from utils.logger import get_logger, init_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--root", type=Path, default=Path("."), help="Project root (default: current directory).")
    common.add_argument("--config", "-c", type=Path, help="Path to config.toml.")
    common.add_argument("--verbose", "-v", action="count", default=0, help="Increase log verbosity.")

    writing = argparse.ArgumentParser(add_help=False)
    conflict = writing.add_mutually_exclusive_group()
    conflict.add_argument("--force", "-f", dest="on_conflict", action="store_const", const="force",
                          help="Overwrite files that already exist.")
    conflict.add_argument("--skip", "-s", dest="on_conflict", action="store_const", const="skip",
                          help="Keep files that already exist.")
    writing.add_argument("--pretend", "-p", action="store_true", help="Report what would change without writing.")

    parser = argparse.ArgumentParser(
        prog="mcp-scaffold",
        description="Scaffold MCP tool classes from attribute definitions.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (("generate", "Create tool files."), ("destroy", "Remove generated tool files.")):
        sub = commands.add_parser(command, help=help_text)
        kinds = sub.add_subparsers(dest="kind", required=True)

        tool = kinds.add_parser("tool", parents=[common, writing], help="A single tool.")
        tool.add_argument("name", help="Tool name, e.g. search_posts or admin/search_posts.")
        tool.add_argument("attributes", nargs="*", metavar="field:type")

        resource = kinds.add_parser("resource", parents=[common, writing], help="Index/show/create/update/delete tools.")
        resource.add_argument("name", help="Singular resource name, e.g. post.")
        resource.add_argument("attributes", nargs="*", metavar="field:type")
        resource.add_argument("--schema", type=Path,
                              help="TOML file with [models.<name>] tables used when no attributes are given.")

    listing = commands.add_parser("tools", parents=[common], help="Load app/tools and list the registered tools.")
    listing.set_defaults(kind=None)
    return parser


def build_generator(args: argparse.Namespace, config: Config) -> BaseGenerator:
    options = dict(
        root=args.root,
        tools_dir=config.generator.tools_dir,
        renderer=ToolRenderer(config.generator.template_dir or None),
        on_conflict=args.on_conflict or config.generator.on_conflict,
        pretend=args.pretend,
    )
    attributes = parse_attributes(args.attributes)
    if args.kind == "tool":
        return ToolGenerator(args.name, attributes, **options)

    introspector = TomlSchemaIntrospector(args.schema) if args.schema else None
    return ResourceGenerator(args.name, attributes, introspector=introspector, **options)


def print_actions(actions: List[FileAction]) -> None:
    for action in actions:
        print(str(action))


def run_tools(args: argparse.Namespace, config: Config) -> int:
    registry = ToolRegistry()
    root = args.root / config.generator.tools_dir
    ToolAutoloader(registry, root=root, pattern=config.autoload.pattern).load_all()
    if not len(registry):
        print(f"No tools found under {root}")
    for descriptor in registry:
        print(f"{descriptor.name:<30} {descriptor.class_name:<30} {descriptor.source}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    config_path = resolve_config_path(args.config)
    try:
        config = load_config(config_path)
        init_logger(
            config_path if config_path.is_file() else None,
            level="DEBUG" if args.verbose else None,
        )
    except (ConfigError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_CONFIG

    try:
        if args.command == "tools":
            return run_tools(args, config)

        generator = build_generator(args, config)
        actions = generator.generate() if args.command == "generate" else generator.destroy()
        print_actions(actions)
    except (GeneratorError, ToolError) as exc:
        logger.error("command_failed", command=args.command, error=str(exc))
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_FAILED
    except (FileNotFoundError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_CONFIG
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
