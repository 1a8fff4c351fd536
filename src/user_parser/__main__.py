"""CLI entry point — ``python -m user_parser``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from dotenv import load_dotenv

load_dotenv()

from user_parser.config import load_settings
from user_parser.engine import parse_users
from user_parser.records import load_records
from user_parser.registry import list_registered
from user_parser.schemas.user import UnverifiedUser, User, VerifiedUser

DEMO_INPUTS: list[Any] = [
    42,
    {"firstName": "Bob"},
    {
        "firstName": "Bob",
        "middleNameInitial": "B",
        "lastName": "Barker",
        "emailAddress": "test@yes.com",
        "remainingReadings": 3,
    },
    {
        "firstName": "Bob",
        "lastName": "Barker",
        "emailAddress": "test@yes.com",
        "verifiedDate": 1615339130200,
    },
]


def describe_user(user: User) -> str:
    if isinstance(user, UnverifiedUser):
        return f"Got an unverified user: {json.dumps(user.to_dict())}"
    if isinstance(user, VerifiedUser):
        return f"Got a verified user: {json.dumps(user.to_dict())}"
    raise TypeError(f"Unexpected user variant: {user!r}")


def _print_variants() -> None:
    print("\nVARIANTS")
    print("--------")
    for tag, fn_name in list_registered().items():
        print(f"  {tag:30s} {fn_name}")
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="user-parser",
        description="Validate raw user records into verified / unverified users.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-i", "--input",
        help="Path to a .json or .jsonl file of raw records.",
    )
    source.add_argument(
        "--demo",
        action="store_true",
        default=False,
        help="Parse the built-in sample records.",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to a YAML settings file.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Report a remainingReadings value on a verified record as an error.",
    )
    parser.add_argument(
        "-l", "--list-variants",
        action="store_true",
        default=False,
        help="List the registered user variants, then exit.",
    )

    args = parser.parse_args(argv)

    if args.list_variants:
        _print_variants()
        return 0

    if args.input is None and not args.demo:
        parser.error("one of the arguments -i/--input --demo is required")

    settings = load_settings(args.config)
    if args.strict:
        settings = settings.model_copy(update={"reject_extraneous_fields": True})

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    records = DEMO_INPUTS if args.demo else load_records(args.input)
    report = parse_users(records, settings)

    users = iter(report.users)
    rejections = {r.index: r.errors for r in report.rejections}
    for idx in range(report.total):
        if idx in rejections:
            print(f"Record {idx} contained errors:", file=sys.stderr)
            for message in rejections[idx]:
                print(f"  - {message}", file=sys.stderr)
        else:
            print(describe_user(next(users)))

    return 0 if report.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
