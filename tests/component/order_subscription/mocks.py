"""
Order Subscription Service - Mock Dependencies

Mock implementations for component testing.
These mocks simulate the customer store, the payment processor and the
error sink.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple
from unittest.mock import AsyncMock

from microservices.order_subscription_service.models import CachedCustomer

SERVICE_URL = "http://subscriptions.test"


class MockCustomerCache:
    """Mock local customer store"""

    def __init__(self):
        self._customers: Dict[str, CachedCustomer] = {}
        self._error: Optional[Exception] = None
        self.find_by_email = AsyncMock(side_effect=self._find_by_email)

    def add_customer(self, email: str, stripe_customer_id: Optional[str] = None):
        self._customers[email] = CachedCustomer(email=email, stripe_customer_id=stripe_customer_id)

    def set_error(self, error: Exception):
        self._error = error

    async def _find_by_email(self, email: str) -> Optional[CachedCustomer]:
        if self._error:
            raise self._error
        return self._customers.get(email)


class MockPaymentLookup:
    """Mock payment processor customer lookup"""

    def __init__(self):
        self._refs: Dict[str, str] = {}
        self._error: Optional[Exception] = None
        self.find_customer_ref_by_email = AsyncMock(side_effect=self._find)

    def add_customer(self, email: str, customer_ref: str):
        self._refs[email] = customer_ref

    def set_error(self, error: Exception):
        self._error = error

    async def _find(self, email: str) -> Optional[str]:
        if self._error:
            raise self._error
        return self._refs.get(email)


class RecordingErrorSink:
    """Error sink that records every notification"""

    def __init__(self):
        self.notifications: List[Tuple[BaseException, Dict[str, Any]]] = []

    def notify(self, error: BaseException, context: Mapping[str, Any]) -> None:
        self.notifications.append((error, dict(context)))

    @property
    def errors(self) -> List[BaseException]:
        return [error for error, _ in self.notifications]


class StaticCredentials:
    """Credential provider with fixed values"""

    def __init__(self, api_key: str = "mp_test_key", bearer: str = "dGVzdA=="):
        self._api_key = api_key
        self._bearer = bearer

    def api_key(self) -> str:
        return self._api_key

    def authorization_header(self) -> Dict[str, str]:
        return {"authorization": f"Bearer {self._bearer}"}
