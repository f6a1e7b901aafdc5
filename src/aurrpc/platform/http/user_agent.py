"""Where: src/aurrpc/platform/http/user_agent.py
What: Build the User-Agent header sent with RPC requests.
Why: Centralise the identity format shared by config and the HTTP adapter.
"""

from __future__ import annotations

from aurrpc.config.settings import DEFAULT_APP_NAME, DEFAULT_APP_VERSION, DEFAULT_CONTACT


def format_user_agent(app_name: str, app_version: str, contact: str) -> str:
    """Return ``App/Version (contact)`` when contact information is available."""

    stripped = contact.strip()
    if stripped:
        return f"{app_name}/{app_version} ({stripped})"
    return f"{app_name}/{app_version}"


def default_user_agent() -> str:
    return format_user_agent(DEFAULT_APP_NAME, DEFAULT_APP_VERSION, DEFAULT_CONTACT)


__all__ = ["default_user_agent", "format_user_agent"]
