"""Argument and logging helpers shared by the scripts/tc_*.py demos."""

from __future__ import annotations

import argparse
import logging

from thecamp.client import TheCampClient
from thecamp.models import Group
from thecamp.utils.config import DEFAULT_CONFIG_MODULE


def add_common_args(parser: argparse.ArgumentParser, group_arg: bool = True) -> None:
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_MODULE,
        help=f"Configuration module (default: {DEFAULT_CONFIG_MODULE})",
    )
    if group_arg:
        parser.add_argument("--group-id", default=None, help="Group id (defaults to the first group)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def select_group(client: TheCampClient, group_id: str | None) -> Group:
    """Return the group with `group_id`, or the first group when it is None.

    Exits with a message when the account has no groups or the id is unknown.
    """
    groups = client.groups()
    if not groups:
        raise SystemExit("No groups registered for this account")
    if group_id is None:
        return groups[0]
    for group in groups:
        if group.id == group_id:
            return group
    raise SystemExit(f"Group '{group_id}' not found; available: {', '.join(g.id for g in groups)}")
