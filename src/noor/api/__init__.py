"""Web API layer."""

from noor.api.app import create_app
from noor.api.dependencies import get_app_state

__all__ = ["create_app", "get_app_state"]
