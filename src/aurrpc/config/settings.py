"""Where: src/aurrpc/config/settings.py
What: Default runtime settings for the RPC client.
Why: Keep endpoint and transport defaults in one place for config and adapters.
"""

from __future__ import annotations

from typing import Final

# RPC endpoint ---------------------------------------------------------------

DEFAULT_RPC_URL: Final[str] = "https://aur.archlinux.org/rpc.php"


# Transport ------------------------------------------------------------------

# requests accepts a (connect, read) tuple; values are seconds.
DEFAULT_CONNECT_TIMEOUT: Final[float] = 5.0
DEFAULT_READ_TIMEOUT: Final[float] = 15.0


# Application identity -------------------------------------------------------

# Outbound User-Agent takes the form "AppName/AppVersion (contact)".
DEFAULT_APP_NAME: Final[str] = "aurrpc"
DEFAULT_APP_VERSION: Final[str] = "0.1.0"
DEFAULT_CONTACT: Final[str] = ""


__all__ = [
    "DEFAULT_APP_NAME",
    "DEFAULT_APP_VERSION",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_CONTACT",
    "DEFAULT_READ_TIMEOUT",
    "DEFAULT_RPC_URL",
]
