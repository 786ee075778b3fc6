#!/usr/bin/env python
from __future__ import annotations

import argparse
from dataclasses import asdict

import pandas as pd

from thecamp.cli import add_common_args, setup_logging
from thecamp.client import TheCampClient


def main() -> int:
    parser = argparse.ArgumentParser(description="List trainee groups of the logged-in account")
    add_common_args(parser, group_arg=False)
    args = parser.parse_args()
    setup_logging(args.verbose)

    client = TheCampClient.from_env(args.config)
    groups = client.groups()
    if not groups:
        print("No groups")
        return 0

    df = pd.DataFrame([asdict(g) for g in groups])
    print(df[["id", "full_name", "unit_name", "name", "entered_date"]].to_string(index=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
