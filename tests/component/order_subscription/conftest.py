"""
Order subscription component fixtures
"""
import pytest

from microservices.order_subscription_service.customer_resolver import CustomerResolver
from microservices.order_subscription_service.subscription_assembler import SubscriptionAssembler
from microservices.order_subscription_service.subscription_gateway import SubscriptionGateway
from tests.component.order_subscription.mocks import (
    SERVICE_URL,
    MockCustomerCache,
    MockPaymentLookup,
    RecordingErrorSink,
    StaticCredentials,
)


@pytest.fixture
def customer_cache() -> MockCustomerCache:
    return MockCustomerCache()


@pytest.fixture
def payment_lookup() -> MockPaymentLookup:
    return MockPaymentLookup()


@pytest.fixture
def error_sink() -> RecordingErrorSink:
    return RecordingErrorSink()


@pytest.fixture
def credentials() -> StaticCredentials:
    return StaticCredentials()


@pytest.fixture
def resolver(customer_cache, payment_lookup, error_sink) -> CustomerResolver:
    return CustomerResolver(
        customer_cache=customer_cache,
        payment_lookup=payment_lookup,
        error_sink=error_sink,
    )


@pytest.fixture
def assembler(resolver, credentials, error_sink) -> SubscriptionAssembler:
    return SubscriptionAssembler(
        customer_resolver=resolver,
        credentials=credentials,
        error_sink=error_sink,
    )


@pytest.fixture
def gateway(assembler, credentials, mock_http_client) -> SubscriptionGateway:
    return SubscriptionGateway(
        assembler=assembler,
        credentials=credentials,
        base_url=SERVICE_URL,
        http_client=mock_http_client,
    )
