#!/usr/bin/env python
from __future__ import annotations

import argparse
from pathlib import Path

from thecamp.cli import add_common_args, select_group, setup_logging
from thecamp.client import TheCampClient


def main() -> int:
    parser = argparse.ArgumentParser(description="Send a letter to a group's trainee")
    add_common_args(parser)
    parser.add_argument("--title", required=True, help="Letter title")
    content = parser.add_mutually_exclusive_group(required=True)
    content.add_argument("--content", help="Letter body")
    content.add_argument("--content-file", type=Path, help="Read the letter body from a file")
    args = parser.parse_args()
    setup_logging(args.verbose)

    body = args.content if args.content is not None else args.content_file.read_text(encoding="utf-8")

    client = TheCampClient.from_env(args.config)
    group = select_group(client, args.group_id)
    info = client.trainee_info(group)
    if client.send_letter(info, args.title, body):
        print(f"Sent '{args.title}' to {info.name}")
        return 0
    print("Failed to send letter")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
