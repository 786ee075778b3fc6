"""thecamp client configuration.

This module defines the CONFIGURATION dict consumed by
``thecamp.utils.config.load_client_settings``. Users can customize this file
or point the loader at their own module.

Configuration location: configs/thecamp.py

Example usage:
    from thecamp.client import TheCampClient

    client = TheCampClient.from_config()                  # uses this module
    client = TheCampClient.from_config("myapp.camp_cfg")  # custom module

Environment overrides:
    export THECAMP_HOST=https://www.thecamp.or.kr
    export THECAMP_TIMEOUT=10
    export THECAMP_PAGE_SIZE=50
"""

from __future__ import annotations

import os
from typing import Any

from thecamp.utils.env import load_env_file_if_present

load_env_file_if_present()  # Load .env file if present

CONFIGURATION: dict[str, Any] = {
    "host": os.environ.get("THECAMP_HOST", "https://www.thecamp.or.kr"),
    "timeout": os.environ.get("THECAMP_TIMEOUT", 30.0),
    "page_size": os.environ.get("THECAMP_PAGE_SIZE", 30),
}
