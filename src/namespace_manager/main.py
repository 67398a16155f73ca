# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

import argparse
import functools
import os
import sys
from collections.abc import Callable
from pathlib import Path

from .errors import InvalidFormatError, NullInputError, UnknownNamespaceError
from .gh_logging import Logger
from .namespace import ORDERED_VERSIONS, NamespaceManager, build_registry, get
from .semantic import SemVer

log = Logger(__name__)

RESERVED_FILE_ENV = "NAMESPACE_MANAGER_RESERVED_FILE"
ALIASES_FILE_ENV = "NAMESPACE_MANAGER_ALIASES_FILE"

VALUE_KINDS = ("context", "identifier", "version", "range", "scope")


def parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="namespace-manager",
        description="Parse, compare and match package versions and identifiers.",
    )
    parser.add_argument(
        "-n",
        "--namespace",
        default="maven",
        help="Namespace of all values (default: %(default)s).",
    )
    parser.add_argument(
        "--reserved-file",
        type=Path,
        default=None,
        help=f"File listing reserved namespaces; defaults to ${RESERVED_FILE_ENV} "
        "or the packaged list.",
    )
    parser.add_argument(
        "--aliases-file",
        type=Path,
        default=None,
        help=f"File listing namespace aliases; defaults to ${ALIASES_FILE_ENV} "
        "or the packaged list.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    compare = commands.add_parser("compare", help="Compare two versions.")
    compare.add_argument("version1")
    compare.add_argument("version2")
    compare.add_argument(
        "--semver", action="store_true", help="Parse as semantic versions."
    )

    sort = commands.add_parser("sort", help="Sort versions in ascending order.")
    sort.add_argument("versions", nargs="+")
    sort.add_argument(
        "--semver", action="store_true", help="Parse as semantic versions."
    )
    sort.add_argument("--reverse", action="store_true", help="Sort descending.")

    test = commands.add_parser("test", help="Test versions against a range.")
    test.add_argument("range")
    test.add_argument("versions", nargs="+")

    validate = commands.add_parser("validate", help="Check a value's syntax.")
    validate.add_argument("kind", choices=VALUE_KINDS)
    validate.add_argument("value")

    locate = commands.add_parser("locate", help="Print the location of a package.")
    locate.add_argument("identifier")
    locate.add_argument(
        "--repository",
        default=None,
        help="Context to resolve against; defaults to the namespace's default.",
    )

    commands.add_parser("namespaces", help="List all known namespaces.")
    return parser.parse_args(args)


def get_token_file(cli_value: Path | None, env_var: str) -> Path | None:
    """Get a token file from CLI or environment.

    Tries sources in order:
    1. the command-line argument
    2. the environment variable
    Returns None to use the packaged file.
    """
    if cli_value:
        log.debug(f"Using {cli_value} from command-line argument.")
        return cli_value
    elif value := os.getenv(env_var):
        log.debug(f"Using {value} from ${env_var}.")
        return Path(value)
    else:
        log.debug(f"No {env_var} provided; using packaged file.")
        return None


def _version_parser(
    p: argparse.Namespace, manager: NamespaceManager
) -> Callable[[str], object]:
    return SemVer.parse if p.semver else manager.parse_version


def _require_ordered(versions: list[object], namespace: str) -> None:
    for version in versions:
        if not isinstance(version, ORDERED_VERSIONS):
            log.fatal(f"versions of namespace {namespace} are not ordered: {version}")


def cmd_compare(p: argparse.Namespace, manager: NamespaceManager) -> None:
    parse = _version_parser(p, manager)
    versions = [parse(p.version1), parse(p.version2)]
    _require_ordered(versions, manager.namespace)
    print(versions[0].compare_to(versions[1]))  # type: ignore[attr-defined]


def cmd_sort(p: argparse.Namespace, manager: NamespaceManager) -> None:
    parse = _version_parser(p, manager)
    versions = [parse(v) for v in p.versions]
    _require_ordered(versions, manager.namespace)
    key = functools.cmp_to_key(lambda a, b: a.compare_to(b))
    for version in sorted(versions, key=key, reverse=p.reverse):
        print(version)


def cmd_test(p: argparse.Namespace, manager: NamespaceManager) -> None:
    version_range = manager.parse_range(p.range)
    misses = 0
    for value in p.versions:
        matched = version_range.test(manager.parse_version(value))
        print(f"{value}: {'match' if matched else 'no match'}")
        misses += not matched

    if misses:
        log.fatal(f"{misses} of {len(p.versions)} versions do not match {p.range}")


def cmd_validate(p: argparse.Namespace, manager: NamespaceManager) -> None:
    is_valid = getattr(manager, f"is_valid_{p.kind}")
    if not is_valid(p.value):
        log.fatal(f"invalid {manager.namespace} {p.kind}: {p.value}")
    print(f"valid {manager.namespace} {p.kind}: {p.value}")


def cmd_locate(p: argparse.Namespace, manager: NamespaceManager) -> None:
    identifier = manager.parse_identifier(p.identifier)
    if p.repository is not None:
        context = manager.parse_context(p.repository)
    elif manager.default_context is not None:
        context = manager.default_context()
    else:
        log.fatal(f"namespace {manager.namespace} has no default context")
    print(context.locate(identifier).to_uri_string())


def cmd_namespaces(registry: dict[str, NamespaceManager]) -> None:
    for name in sorted(registry):
        manager = registry[name]
        if manager.alias_of:
            print(f"{name} -> {manager.alias_of}")
        elif manager.reserved:
            print(f"{name} (reserved)")
        else:
            print(name)


COMMANDS = {
    "compare": cmd_compare,
    "sort": cmd_sort,
    "test": cmd_test,
    "validate": cmd_validate,
    "locate": cmd_locate,
}


def main(args: list[str]) -> None:
    """Main entry point for the namespace manager.

    Builds the namespace registry and runs a single command against it.
    """
    p = parse_args(args)
    registry = build_registry(
        reserved_file=get_token_file(p.reserved_file, RESERVED_FILE_ENV),
        aliases_file=get_token_file(p.aliases_file, ALIASES_FILE_ENV),
    )

    if p.command == "namespaces":
        cmd_namespaces(dict(registry))
        return

    try:
        manager = get(p.namespace, registry)
        COMMANDS[p.command](p, manager)
    except (InvalidFormatError, NullInputError, UnknownNamespaceError) as e:
        log.fatal(str(e))
    except NotImplementedError as e:
        log.fatal(f"not supported: {e}")


def run() -> None:
    main(args=sys.argv[1:])


if __name__ == "__main__":
    run()
