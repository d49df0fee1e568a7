import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .client import DEFAULT_BASE_URL

TOKEN_ENV_VAR = "COC_API_TOKEN"
BASE_URL_ENV_VAR = "COC_API_BASE_URL"


def _load_env() -> None:
    # Variables already set in the process environment win over .env entries
    load_dotenv(find_dotenv(usecwd=True))


def load_api_token(env_var: str = TOKEN_ENV_VAR) -> str:
    """
    Reads the Clash of Clans API token from the environment or a .env file.

    The token is created at https://developer.clashofclans.com/ and is bound
    to the caller's public IP address.

    Returns:
        str: JSON Web Token used as bearer credential
    """
    _load_env()
    token: Optional[str] = os.getenv(env_var)
    if not token:
        raise RuntimeError(
            f"No Clash of Clans API token set.\n"
            f"Export {env_var}=<token> or add it to a .env file"
        )
    return token


def load_api_base_url(env_var: str = BASE_URL_ENV_VAR) -> str:
    """Reads an alternative API base URL (e.g., a proxy), defaulting to the official one."""
    _load_env()
    return os.getenv(env_var) or DEFAULT_BASE_URL
