import os

from dotenv import load_dotenv

from vkauth.models import ClientConfig


load_dotenv()

DEFAULT_REDIRECT_URI = "http://localhost:8000/callback"
DEFAULT_SCOPE = "email"


def _require(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"{name} is not set")
    return value


def load_client_config() -> ClientConfig:
    """Build the VK client configuration from the environment.

    Uses environment variables:
    - VK_APP_ID
    - VK_APP_SECRET
    - VK_REDIRECT_URI (defaults to http://localhost:8000/callback)
    - VK_SCOPE (defaults to "email")
    """
    return ClientConfig(
        app_id=_require("VK_APP_ID"),
        app_secret=_require("VK_APP_SECRET"),
        # Must match the redirect URI registered in the VK app settings
        redirect_url=os.getenv("VK_REDIRECT_URI") or DEFAULT_REDIRECT_URI,
        scope=os.getenv("VK_SCOPE") or DEFAULT_SCOPE,
    )
