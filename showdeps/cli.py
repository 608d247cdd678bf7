"""
Command line interface for showdeps.

Usage:
  showdeps [flags] [pkg ...]
  python run_showdeps.py -a -from github.com/foo/bar/...
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Sequence

from colorama import Fore, Style, just_fix_windows_console

from .config import load_config
from .errors import ConfigError, ShowdepsError
from .query import QueryOptions, run_query
from .resolver import GoListResolver, ModuleResolver, load_module_index

HELP_MESSAGE = """
showdeps prints Go package dependencies of the named packages, specified
as in the Go command (for instance ... wildcards work), one per line.
If no packages are given, it uses the package in the current directory.

Note that testing dependencies are only considered if they are
in the packages specified on the command line. That is testing
dependencies are not considered transitively.

By default it prints direct dependencies of the packages (and their tests)
only, but the -a flag can be used to print all reachable dependencies.

If the -from flag is specified, the package path on each line is followed
by the paths of all the packages that depend on it.

If the package argument to the -why flag is in the standard library,
the -stdlib flag is implied. The -why flag can also specify Go-command-style
... wildcards.

If the -f flag is provided, instead of packages, showdeps will print
all the Go source files in the package. It also includes the
source of the packages specified directly on the command line,
including their test files unless the -T flag is provided.
"""

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="showdeps",
        usage="%(prog)s [flags] [pkg ...]",
        description=HELP_MESSAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("packages", nargs="*", help="Packages to analyze (default: .)")
    parser.add_argument("-T", dest="no_test_deps", action="store_true", help="exclude test dependencies")
    parser.add_argument(
        "-a",
        dest="all",
        action="store_true",
        help="show all dependencies recursively (only test dependencies from the root packages are shown)",
    )
    parser.add_argument("-stdlib", "--stdlib", dest="stdlib", action="store_true", help="show stdlib dependencies")
    parser.add_argument(
        "-from",
        "--from",
        dest="show_from",
        action="store_true",
        help="show which dependencies are introduced by which packages",
    )
    parser.add_argument(
        "-why",
        "--why",
        dest="why",
        default=None,
        metavar="PKG",
        help="show only packages which import directly or indirectly the specified package (implies -a and -from)",
    )
    parser.add_argument(
        "-f",
        dest="files",
        action="store_true",
        help="list Go source files instead of packages (overrides -from and -why)",
    )
    parser.add_argument("--config", default=None, help="YAML configuration file")
    parser.add_argument("--index", default=None, help="Resolve modules from this YAML/JSON module index instead of go list")
    parser.add_argument("--go-command", default=None, help="go executable to run (default from config: go)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log progress to stderr (-vv for debug)")
    return parser.parse_args(argv)


def _setup_logging(verbose: int, configured_level: str) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.getLevelName(str(configured_level).upper())
        if not isinstance(level, int):
            raise ConfigError(f"Unknown log level '{configured_level}'")
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("showdeps").setLevel(level)


def _make_resolver(args: argparse.Namespace, config: Dict[str, Any]) -> ModuleResolver:
    resolver_config = config.get("resolver") or {}
    index_path = args.index
    if index_path is None and resolver_config.get("backend") == "index":
        index_path = resolver_config.get("index_path")
        if not index_path:
            raise ConfigError("resolver backend 'index' requires resolver.index_path")
    if index_path is not None:
        return load_module_index(index_path)
    return GoListResolver(go_command=args.go_command or resolver_config.get("go_command") or "go")


def _query_options(args: argparse.Namespace, config: Dict[str, Any]) -> QueryOptions:
    defaults = config.get("defaults") or {}
    return QueryOptions(
        no_test_deps=args.no_test_deps or bool(defaults.get("no_test_deps")),
        all=args.all or bool(defaults.get("all")),
        stdlib=args.stdlib or bool(defaults.get("stdlib")),
        show_from=args.show_from or bool(defaults.get("from")),
        why=args.why or None,
        files=args.files or bool(defaults.get("files")),
    )


def _print_error(message: str) -> None:
    if sys.stderr.isatty():
        message = f"{Fore.RED}{message}{Style.RESET_ALL}"
    print(message, file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else list(argv))
    just_fix_windows_console()

    try:
        config = load_config(args.config)
        _setup_logging(args.verbose, config.get("log_level", "WARNING"))
        resolver = _make_resolver(args, config)
        lines: List[str] = run_query(args.packages, resolver, _query_options(args, config), base_dir=os.getcwd())
    except ShowdepsError as e:
        _print_error(f"showdeps: {e}")
        return 1

    if lines:
        sys.stdout.write("\n".join(lines) + "\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
