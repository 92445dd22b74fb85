#!/usr/bin/env python3
"""Addon manifest management CLI tool."""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

# Load environment variables FIRST (before importing project modules)
load_dotenv('.env')

from extensibility.constants import LOG_LEVEL, MANIFEST_FILE

# Configure logging BEFORE importing any modules that use logger
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.WARNING),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from extensibility.context import ContextParam, HostContext
from extensibility.manifest import (
    ManifestLoadError,
    build_authorize_url,
    load_application,
    load_manifest,
    parse_extension,
    validate,
)

# Paths and issue texts must stay on one line regardless of terminal width
console = Console(soft_wrap=True)


def cmd_validate(args):
    """Validate a manifest and list its issues."""
    data = load_manifest(args.path)
    issues = validate(data)

    if issues:
        console.print(
            f"Found {len(issues)} issue(s) in {args.path}:", style="red", markup=False, highlight=False
        )
        for i, issue in enumerate(issues, 1):
            console.print(f"  {i}. {issue}", markup=False, highlight=False)
        sys.exit(1)
    else:
        console.print(f"Manifest {args.path} is valid.", style="green", markup=False, highlight=False)


def _joined(values):
    """Comma separated list entries; anything that is not a list is shown as is."""
    if isinstance(values, list):
        return ", ".join(map(str, values))
    return "" if values is None else str(values)


def cmd_info(args):
    """Show the store listing and extensions of a manifest."""
    data = load_manifest(args.path)
    store = data.get("store")
    if not isinstance(store, dict):
        store = {}
    title = store.get("title") or {}
    api = data.get("api")

    console.print(f"Addon: {store.get('identifier')}")
    console.print(f"  Title:      {title.get('en') if isinstance(title, dict) else title}")
    console.print(f"  Version:    {store.get('version')}")
    console.print(f"  Store:      {store.get('type')}")
    console.print(f"  Categories: {_joined(store.get('categories'))}")
    if isinstance(api, dict):
        console.print(f"  Scopes:     {_joined(api.get('scopes'))}")

    table = Table(title="Extensions")
    table.add_column("Type")
    table.add_column("Identifier")
    table.add_column("Version")
    table.add_column("Context")
    extensions = data.get("extensions")
    for ext in extensions if isinstance(extensions, list) else []:
        extension = parse_extension(ext)
        context = extension.context if isinstance(extension.context, list) else []
        table.add_row(
            str(extension.type),
            str(extension.identifier),
            str(extension.version),
            ", ".join(map(str, context)),
        )
    console.print(table)


def cmd_context(args):
    """Hydrate host context records from a JSON list of {key, value} parameters."""
    with open(args.params, "r", encoding="utf-8") as f:
        raw_params = json.load(f)
    if not isinstance(raw_params, list):
        raise ValueError(f"{args.params} must contain a JSON list of {{key, value}} objects")

    params = [ContextParam.model_validate(p) for p in raw_params]
    context = HostContext.from_params(params)

    for attr, _ in HostContext.RECORDS:
        record = getattr(context, attr)
        if record is None:
            continue
        table = Table(title=type(record).__name__)
        table.add_column("Key")
        table.add_column("Attribute")
        table.add_column("Value")
        for key, field_name in record.KEYS.items():
            value = getattr(record, field_name)
            if value is not None:
                table.add_row(key, field_name, value)
        console.print(table)

    if context.unknown:
        unknown = ", ".join(p.key for p in context.unknown)
        console.print(f"Unknown keys: {unknown}", style="yellow", markup=False, highlight=False)


def cmd_authorize_url(args):
    """Print the OAuth authorize url for a manifest."""
    application = load_application(args.path)
    print(build_authorize_url(application, args.redirect_uri))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Addon Manifest Manager")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # validate
    validate_parser = subparsers.add_parser("validate", help="Validate a manifest")
    validate_parser.add_argument("path", nargs="?", default=MANIFEST_FILE, help="Manifest file")

    # info
    info_parser = subparsers.add_parser("info", help="Show manifest details")
    info_parser.add_argument("path", nargs="?", default=MANIFEST_FILE, help="Manifest file")

    # context
    context_parser = subparsers.add_parser("context", help="Decode host context parameters")
    context_parser.add_argument("params", help="JSON file with a list of {key, value} objects")

    # authorize-url
    authorize_parser = subparsers.add_parser("authorize-url", help="Print the OAuth authorize url")
    authorize_parser.add_argument("path", nargs="?", default=MANIFEST_FILE, help="Manifest file")
    authorize_parser.add_argument("--redirect-uri", default=None, help="Declared redirect uri to use")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    commands = {
        "validate": cmd_validate,
        "info": cmd_info,
        "context": cmd_context,
        "authorize-url": cmd_authorize_url,
    }

    try:
        commands[args.command](args)
    except ManifestLoadError as e:
        console.print(str(e), style="red", markup=False, highlight=False)
        sys.exit(1)
    except (OSError, json.JSONDecodeError, ValidationError, ValueError) as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        sys.exit(1)


if __name__ == "__main__":
    main()
