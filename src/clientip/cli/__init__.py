"""clientip CLI — check IP literals and resolve header sets from the shell."""

import argparse
import sys

from clientip.resolver import get_client_ip
from clientip.validators import ip_version


def main() -> None:
    """Entry point for the ``clientip`` console script."""
    parser = argparse.ArgumentParser(prog="clientip", description="clientip CLI")
    sub = parser.add_subparsers(dest="command")

    check_cmd = sub.add_parser("check", help="Report whether each value is an IPv4/IPv6 literal")
    check_cmd.add_argument("values", nargs="+", metavar="VALUE")

    resolve_cmd = sub.add_parser("resolve", help="Resolve the client IP from request headers")
    resolve_cmd.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        dest="headers",
        help='Request header (e.g. "X-Forwarded-For: 203.0.113.5, 10.0.0.1"). Repeatable.',
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "check":
        sys.exit(_check(args.values))

    if args.command == "resolve":
        try:
            headers = _parse_headers(args.headers)
        except ValueError as e:
            parser.error(str(e))
        sys.exit(_resolve(headers))


def _check(values: list[str]) -> int:
    status = 0
    for value in values:
        version = ip_version(value)
        if version is None:
            status = 1
            print(f"{value}: invalid")
        else:
            print(f"{value}: ipv{version}")
    return status


def _parse_headers(raw_headers: list[str]) -> dict[str, str]:
    """Parse ``Name: value`` strings into a lower-cased header dict (last one wins)."""
    headers = {}
    for raw in raw_headers:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"Invalid header '{raw}'. Expected 'Name: value'.")
        headers[name.strip().lower()] = value.strip()
    return headers


def _resolve(headers: dict[str, str]) -> int:
    ip = get_client_ip(headers)
    if ip is None:
        print("not found")
        return 1
    print(ip)
    return 0
