#!/usr/bin/env python3
"""
lstack CLI - Inspect and modify server-resident stacks from the shell.

Every command addresses one stack by record key and bin name. Operands are
parsed as JSON where possible, otherwise taken as plain strings. Results are
printed as JSON.

Usage:
    lstack push <key> <bin> <value>...        Push values (last one on top)
    lstack peek <key> <bin> <count>           Show top <count> items
    lstack scan <key> <bin>                   Show all items, top first
    lstack filter <key> <bin> <count> <module> <name> [arg...]
    lstack size <key> <bin>                   Number of items
    lstack destroy <key> <bin>                Delete the stack bin
    lstack config <key> <bin>                 Show stack configuration
    lstack set-capacity <key> <bin> <n>       Set max number of items
    lstack get-capacity <key> <bin>           Show max number of items

Environment Variables:
    NEO4J_URI, NEO4J_USER, NEO4J_PASSWORD, NEO4J_DATABASE
    LSTACK_NAMESPACE    Default record namespace (default: test)
    LSTACK_TIMEOUT      Per-call timeout in seconds (default: none)
"""

import argparse
import json
import sys
from typing import Any

from lstack import __version__
from lstack.core.errors import LargeStackError
from lstack.core.executor import Neo4jExecutor
from lstack.core.records import Key, policy_from_config
from lstack.core.stack import LargeStack
from lstack.utils.neo4j import get_config


def parse_operand(text: str) -> Any:
    """Parse a command-line operand as JSON, falling back to the raw string."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def _json_default(obj: Any) -> Any:
    if isinstance(obj, (bytes, bytearray)):
        return bytes(obj).hex()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def print_result(result: Any) -> None:
    print(json.dumps(result, indent=2, default=_json_default))


# =============================================================================
# Command handlers
# =============================================================================

def cmd_push(stack: LargeStack, args) -> None:
    stack.push(*[parse_operand(v) for v in args.values])


def cmd_peek(stack: LargeStack, args) -> list:
    return stack.peek(args.count)


def cmd_scan(stack: LargeStack, args) -> list:
    return stack.scan()


def cmd_filter(stack: LargeStack, args) -> list:
    filter_args = [parse_operand(a) for a in args.filter_args]
    return stack.filter(args.count, args.module, args.name, *filter_args)


def cmd_size(stack: LargeStack, args) -> int:
    return stack.size()


def cmd_destroy(stack: LargeStack, args) -> None:
    stack.destroy()


def cmd_config(stack: LargeStack, args) -> dict:
    return stack.get_config()


def cmd_set_capacity(stack: LargeStack, args) -> None:
    stack.set_capacity(args.capacity)


def cmd_get_capacity(stack: LargeStack, args) -> int:
    return stack.get_capacity()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lstack",
        description="lstack - Client for server-resident LIFO stacks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lstack push user:1 events '{"type": "login"}' '{"type": "logout"}'
  lstack peek user:1 events 5
  lstack --set users --integer-key size 42 events
  lstack filter user:1 events 10 filters by_type '"login"'
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print each remote call to stderr")
    parser.add_argument("--namespace", default=None,
                        help="Record namespace (default: LSTACK_NAMESPACE)")
    parser.add_argument("--set", dest="set_name", default=None,
                        help="Record set name")
    parser.add_argument("--integer-key", action="store_true",
                        help="Treat the record key as an integer")
    parser.add_argument("--create-module", default=None,
                        help="Server function that configures new stacks")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_command(name, handler, help_text):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("key", help="Record user key")
        sub.add_argument("bin", help="Bin name holding the stack")
        sub.set_defaults(handler=handler)
        return sub

    push_parser = add_command("push", cmd_push, "Push values onto the stack")
    push_parser.add_argument("values", nargs="+", help="Values (JSON or string)")

    peek_parser = add_command("peek", cmd_peek, "Select items from top of stack")
    peek_parser.add_argument("count", type=int, help="Number of items")

    add_command("scan", cmd_scan, "List all items, top first")

    filter_parser = add_command("filter", cmd_filter, "Filter items from top of stack")
    filter_parser.add_argument("count", type=int, help="Number of items")
    filter_parser.add_argument("module", help="Filter module")
    filter_parser.add_argument("name", help="Filter function")
    filter_parser.add_argument("filter_args", nargs="*", help="Filter arguments")

    add_command("size", cmd_size, "Number of items on the stack")
    add_command("destroy", cmd_destroy, "Delete the stack bin")
    add_command("config", cmd_config, "Show stack configuration")

    capacity_parser = add_command("set-capacity", cmd_set_capacity,
                                  "Set maximum number of items")
    capacity_parser.add_argument("capacity", type=int, help="Max items")

    add_command("get-capacity", cmd_get_capacity, "Show maximum number of items")

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        user_key = int(args.key) if args.integer_key else args.key
    except ValueError:
        print(f"Error: key is not an integer: {args.key}", file=sys.stderr)
        sys.exit(1)

    try:
        config = get_config()
        key = Key(args.namespace or config["namespace"], args.set_name, user_key)
        with Neo4jExecutor(database=config["database"], verbose=args.verbose) as executor:
            stack = LargeStack(executor, policy_from_config(config), key,
                               args.bin, args.create_module)
            result = args.handler(stack, args)
    except LargeStackError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if result is not None:
        print_result(result)
    elif args.verbose:
        print("OK", file=sys.stderr)


if __name__ == "__main__":
    main()
