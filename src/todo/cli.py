"""
todo - command line wrapper around the todo line parser

Usage:
    todo [--file PATH] list [QUERY ...] [--not QUERY] [--unsorted] [--json]
    todo [--file PATH] format [--write]
    todo [--file PATH] check

Queries:
    @name    tasks with context "name"
    +name    tasks with tag "name"
    text     tasks whose title contains "text"

Examples:
    todo list @home
    todo list +shopping --not @work
    todo --file ~/todo.txt format --write

Environment:
    TODO_FILE       default task file (default: ./todo.txt)
    TODO_LOG_LEVEL  logging level (default: WARNING)
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .errors import ParseError
from .models import TaskList, TaskOut
from .parsers import parse_file, write_file

DEFAULT_TODO_FILE = "todo.txt"

log = logging.getLogger(__name__)


# --- list ---

def select_tasks(tasks: TaskList, queries: List[str], excluded: List[str]) -> TaskList:
    """Keep tasks matching every query and none of the excluded queries."""
    for query in queries:
        tasks = tasks.filter(query)
    for query in excluded:
        tasks = tasks.filter_not(query)
    return tasks


def list_tasks(args):
    """Print the tasks in the file that match the queries."""
    tasks = select_tasks(parse_file(args.file), args.queries, args.excluded)
    if not args.unsorted:
        tasks.sort()

    if args.json:
        print(json.dumps([TaskOut.from_task(t).model_dump(mode="json") for t in tasks], indent=2))
        return

    for task in tasks:
        print(task)


# --- format ---

def format_tasks(args):
    """Rewrite the file in canonical form, or print it."""
    tasks = parse_file(args.file)
    if args.write:
        write_file(args.file, tasks)
        print(f"Formatted {len(tasks)} task(s) in {args.file}")
    else:
        sys.stdout.write(tasks.unparse())


# --- check ---

def check_tasks(args):
    """Parse the file and report how many tasks it holds."""
    tasks = parse_file(args.file)
    done = sum(1 for t in tasks if t.done)
    print(f"{args.file}: {len(tasks)} task(s), {done} done")


# --- main ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="Read, filter and sort a plain-text todo list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--file', default=os.environ.get("TODO_FILE", DEFAULT_TODO_FILE),
                        help='Path to the todo file (default: $TODO_FILE or ./todo.txt)')
    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    list_p = subparsers.add_parser('list', help='List tasks in display order')
    list_p.add_argument('queries', nargs='*', metavar='QUERY',
                        help='Only show tasks matching every query')
    list_p.add_argument('--not', action='append', default=[], dest='excluded', metavar='QUERY',
                        help='Hide tasks matching this query (repeatable)')
    list_p.add_argument('--unsorted', action='store_true', help='Keep file order')
    list_p.add_argument('--json', action='store_true', help='Print tasks as JSON')
    list_p.set_defaults(func=list_tasks)

    format_p = subparsers.add_parser('format', help='Print tasks in canonical form')
    format_p.add_argument('--write', action='store_true', help='Rewrite the file in place')
    format_p.set_defaults(func=format_tasks)

    check_p = subparsers.add_parser('check', help='Validate the file')
    check_p.set_defaults(func=check_tasks)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    logging.basicConfig(
        level=os.environ.get("TODO_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    args.file = Path(args.file).expanduser()
    if not args.file.is_file():
        print(f"Error: Todo file not found: {args.file}", file=sys.stderr)
        return 1

    try:
        args.func(args)
    except (ParseError, OSError, UnicodeError) as e:
        log.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
