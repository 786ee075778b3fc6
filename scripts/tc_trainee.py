#!/usr/bin/env python
from __future__ import annotations

import argparse

from thecamp.cli import add_common_args, select_group, setup_logging
from thecamp.client import TheCampClient


def main() -> int:
    parser = argparse.ArgumentParser(description="Show trainee information for a group")
    add_common_args(parser)
    args = parser.parse_args()
    setup_logging(args.verbose)

    client = TheCampClient.from_env(args.config)
    group = select_group(client, args.group_id)
    info = client.trainee_info(group)

    print(f"Group:        {group.full_name}")
    print(f"Name:         {info.name}")
    print(f"Birthday:     {info.birthday}")
    print(f"Relationship: {info.relationship}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
