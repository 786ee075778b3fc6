from __future__ import annotations

import os

from thecamp.errors import TheCampError
from thecamp.utils.env import load_env_file_if_present

ID_ENV_KEY = "THECAMP_ID"
PASSWORD_ENV_KEY = "THECAMP_PASSWORD"


class AuthError(TheCampError):
    pass


def load_credentials(
    id_key: str = ID_ENV_KEY, password_key: str = PASSWORD_ENV_KEY, dotenv: bool = True
) -> tuple[str, str]:
    """Return the (user id, password) pair from environment or .env.

    Raises AuthError if either is missing.
    """
    if dotenv:
        load_env_file_if_present()
    user_id = os.getenv(id_key)
    password = os.getenv(password_key)
    missing = [key for key, value in ((id_key, user_id), (password_key, password)) if not value]
    if missing:
        raise AuthError(f"Missing credentials. Set {', '.join(missing)} in environment or .env")
    return user_id, password


def build_login_payload(user_id: str, password: str) -> dict[str, str]:
    return {"subsType": "1", "user-id": user_id, "user-pwd": password}
