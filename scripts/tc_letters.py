#!/usr/bin/env python
from __future__ import annotations

import argparse
from itertools import islice

import pandas as pd

from thecamp.cli import add_common_args, select_group, setup_logging
from thecamp.client import TheCampClient
from thecamp.models import SortOrder


def main() -> int:
    parser = argparse.ArgumentParser(description="List letters sent to a group's trainee")
    add_common_args(parser)
    parser.add_argument(
        "--order", choices=[o.value for o in SortOrder], default="ASC", help="Sort order"
    )
    parser.add_argument("--limit", type=int, default=10, help="Letters to display (0 for all)")
    args = parser.parse_args()
    setup_logging(args.verbose)

    client = TheCampClient.from_env(args.config)
    group = select_group(client, args.group_id)
    letters = client.letters_iterator(group, args.order)
    if args.limit:
        letters = islice(letters, args.limit)

    rows = [
        {
            "date": letter.date.strftime("%Y-%m-%d %H:%M"),
            "sent": letter.sent,
            "title": letter.title,
        }
        for letter in letters
    ]
    if not rows:
        print("No letters")
        return 0
    df = pd.DataFrame(rows)
    df.index += 1
    print(df.to_string())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
