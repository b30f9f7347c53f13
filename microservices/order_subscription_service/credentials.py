"""
Subscription Service Credentials

The subscription service accepts the raw API key in the create payload
and a base64 encoded copy of it as a bearer token on renewal calls.
Only this module knows that scheme.
"""

import base64
from typing import Dict

from .protocols import ConfigurationError


class ApiKeyCredentials:
    """Credentials derived from a single API key"""

    def __init__(self, api_key: str):
        self._api_key = api_key

    def api_key(self) -> str:
        if not self._api_key:
            raise ConfigurationError("Subscription service API key is not configured (MP_API_KEY)")
        return self._api_key

    def bearer_token(self) -> str:
        return base64.b64encode(self.api_key().encode("utf-8")).decode("ascii")

    def authorization_header(self) -> Dict[str, str]:
        return {"authorization": f"Bearer {self.bearer_token()}"}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(api_key={'***' if self._api_key else None})"


__all__ = ["ApiKeyCredentials"]
