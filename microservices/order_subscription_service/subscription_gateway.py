"""
Subscription Gateway

HTTP client for the external subscription billing service.

Endpoints:
    POST {base_url}/methods/api_CreateNewSubscription   create from an order
    PUT  {base_url}/api/subscriptions/{id}/renew        renew (resume)

Calls are made once. Transport and HTTP status errors are logged and
re-raised to the caller.
"""

import logging
from typing import Any, Dict, Optional, Union

import httpx

from .models import Order
from .protocols import ConfigurationError, CredentialProviderProtocol
from .subscription_assembler import SubscriptionAssembler

logger = logging.getLogger(__name__)

CREATE_SUBSCRIPTION_PATH = "/methods/api_CreateNewSubscription"
RENEW_SUBSCRIPTION_PATH = "/api/subscriptions/{subscription_id}/renew"


class SubscriptionGateway:
    """Client for the subscription billing service"""

    def __init__(
        self,
        assembler: SubscriptionAssembler,
        credentials: CredentialProviderProtocol,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        """
        Initialize the gateway

        Args:
            assembler: Builds the create payload from an order
            credentials: Supplies the API key and bearer header
            base_url: Subscription service base URL
            http_client: Shared client; created (and owned) here if omitted
            timeout: Request timeout in seconds for an owned client
        """
        self.assembler = assembler
        self.credentials = credentials
        self.base_url = base_url.rstrip('/') if base_url else None
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(timeout=timeout)
        logger.info(f"SubscriptionGateway initialized with base_url: {self.base_url}")

    async def close(self):
        """Close HTTP client if this gateway created it"""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _url(self, path: str) -> str:
        if not self.base_url:
            raise ConfigurationError(
                "Subscription service URL is not configured (SUBSCRIPTION_SERVICE_URL)"
            )
        return f"{self.base_url}{path}"

    async def create(
        self, order: Optional[Union[Order, Dict[str, Any]]]
    ) -> Optional[httpx.Response]:
        """
        Create a subscription from an order

        Args:
            order: Order model or raw order webhook JSON; None is a no-op

        Returns:
            Service response, or None when there was no order

        Raises:
            DomainError: order cannot be converted (nothing is sent)
            ConfigurationError: URL or API key missing
            httpx.HTTPError: request failed or returned an error status
        """
        if not order:
            return None
        if not isinstance(order, Order):
            order = Order.model_validate(order)

        url = self._url(CREATE_SUBSCRIPTION_PATH)
        request = await self.assembler.assemble(order)

        try:
            response = await self.client.post(url, json=request.to_payload())
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to create subscription for order {order.id}: {e}")
            raise

        logger.info(f"Subscription requested for order {order.id} (status {response.status_code})")
        return response

    async def resume(self, subscription_id: Optional[str]) -> Optional[httpx.Response]:
        """
        Signal the service to renew a subscription

        Args:
            subscription_id: Subscription to renew; None or empty is a no-op

        Raises:
            ConfigurationError: URL or API key missing
            httpx.HTTPError: request failed or returned an error status
        """
        if not subscription_id:
            return None

        url = self._url(RENEW_SUBSCRIPTION_PATH.format(subscription_id=subscription_id))
        headers = self.credentials.authorization_header()

        try:
            response = await self.client.put(url, headers=headers)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to renew subscription {subscription_id}: {e}")
            raise

        logger.info(f"Renewal requested for subscription {subscription_id}")
        return response


__all__ = ["SubscriptionGateway", "CREATE_SUBSCRIPTION_PATH", "RENEW_SUBSCRIPTION_PATH"]
