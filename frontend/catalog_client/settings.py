import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

DEFAULT_API_URL = "http://localhost:8000"


@dataclass(frozen=True)
class ClientSettings:
    # Root of the catalog API; requests go to {API_URL}/api/products
    API_URL: str = DEFAULT_API_URL

    # Seconds before a request is abandoned; None waits indefinitely
    TIMEOUT: Optional[float] = None


def load_settings(env_file: Optional[str] = None) -> ClientSettings:
    """
    Builds client settings from the environment.

    Args:
        env_file: Optional .env path loaded before reading variables.

    Returns:
        ClientSettings populated from CATALOG_API_URL and CATALOG_API_TIMEOUT.
    """
    if env_file and os.path.exists(env_file):
        load_dotenv(env_file)

    timeout = os.environ.get("CATALOG_API_TIMEOUT")
    return ClientSettings(
        API_URL=os.environ.get("CATALOG_API_URL", DEFAULT_API_URL).rstrip("/"),
        TIMEOUT=float(timeout) if timeout else None,
    )
