from __future__ import annotations

import os
from pathlib import Path

ENV_PREFIX = "THECAMP_"


def parse_env_lines(text: str) -> dict[str, str]:
    """Parse `KEY=VALUE` lines, skipping blanks, comments and malformed lines.

    A leading `export ` is accepted and surrounding quotes are removed.
    """
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export "):]
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            data[key] = value.strip().strip('"').strip("'")
    return data


def load_env_file_if_present(
    path: str | Path = ".env", override: bool = False, prefix: str = ENV_PREFIX
) -> dict[str, str]:
    """Copy `prefix`-named settings from a .env file into os.environ.

    Only keys starting with `prefix` (credentials and endpoint overrides) are
    considered; pass an empty prefix to take every key. Variables already set
    in the environment win unless `override` is set.

    Returns the key-values actually written to os.environ.
    """
    env_path = Path(path)
    if not env_path.exists():
        return {}

    applied: dict[str, str] = {}
    for key, value in parse_env_lines(env_path.read_text(encoding="utf-8")).items():
        if not key.startswith(prefix):
            continue
        if override or key not in os.environ:
            os.environ[key] = value
            applied[key] = value
    return applied
