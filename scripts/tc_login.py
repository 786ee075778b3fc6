#!/usr/bin/env python
from __future__ import annotations

import argparse
import json

from thecamp.auth import load_credentials
from thecamp.cli import add_common_args, setup_logging
from thecamp.client import TheCampClient


def main() -> int:
    parser = argparse.ArgumentParser(description="Check thecamp credentials from $THECAMP_ID/.env")
    add_common_args(parser, group_arg=False)
    args = parser.parse_args()
    setup_logging(args.verbose)

    user_id, password = load_credentials()
    client = TheCampClient.from_config(args.config)
    ok = client.login(user_id, password)
    print(json.dumps({"ok": ok, "user_id": user_id, "host": client.host}))
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
