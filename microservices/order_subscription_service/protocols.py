"""
Order Subscription Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

# Import only models (no I/O dependencies)
from .models import CachedCustomer


# ============================================================================
# Custom Exceptions
# ============================================================================

class OrderSubscriptionError(Exception):
    """Base exception for order subscription errors"""
    pass


class ConfigurationError(OrderSubscriptionError):
    """Required setting (service URL, API key) is missing"""
    pass


class DomainError(OrderSubscriptionError):
    """The order cannot be turned into a subscription"""
    pass


class DiscountCalculationError(DomainError, ArithmeticError):
    """Billable line has a zero total so no discount ratio exists"""

    def __init__(self, message: str, sku: Optional[str] = None):
        super().__init__(message)
        self.sku = sku


class CustomerResolutionError(DomainError):
    """No payment customer reference could be resolved"""

    def __init__(self, message: str, email: Optional[str] = None):
        super().__init__(message)
        self.email = email


# ============================================================================
# Collaborator Protocols
# ============================================================================

@runtime_checkable
class CustomerCacheProtocol(Protocol):
    """
    Interface for the local customer store.

    The store is owned by another component; this service only reads it.
    """

    async def find_by_email(self, email: str) -> Optional[CachedCustomer]:
        """Return the stored customer for this email, if any"""
        ...


@runtime_checkable
class PaymentCustomerLookupProtocol(Protocol):
    """Interface for looking up customers at the payment processor"""

    async def find_customer_ref_by_email(self, email: str) -> Optional[str]:
        """Return the processor's customer id for this email, if any"""
        ...


@runtime_checkable
class ErrorSinkProtocol(Protocol):
    """Fire-and-forget error reporting"""

    def notify(self, error: BaseException, context: Mapping[str, Any]) -> None:
        """Report an error; must not raise"""
        ...


@runtime_checkable
class CredentialProviderProtocol(Protocol):
    """Builds the credentials presented to the subscription service"""

    def api_key(self) -> str:
        """API key carried inside the create payload"""
        ...

    def authorization_header(self) -> Dict[str, str]:
        """Header used for authenticated renewal calls"""
        ...
