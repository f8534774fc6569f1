"""
Client Configuration
====================
Connection settings for the Spryng HTTP gateway.
"""

import os
from dataclasses import dataclass

from . import __version__

DEFAULT_API_URL = "https://api.spryngsms.com/api/"
CHECK_PATH = "check.php"
SEND_PATH = "send.php"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for the gateway connection."""
    base_url: str = os.environ.get("SPRYNG_API_URL", DEFAULT_API_URL)
    timeout: float = float(os.environ.get("SPRYNG_TIMEOUT", "30.0"))
    user_agent: str = os.environ.get("SPRYNG_USER_AGENT", f"spryng-client/{__version__}")
    check_path: str = CHECK_PATH
    send_path: str = SEND_PATH
