"""
Domain models and value objects.

Contains the client-side entities: User (with its invoice ledger), Address,
Company, Billing, Order and catalog products.
"""

from src.core.domain.address import Address
from src.core.domain.billing import Billing, PaymentMethod
from src.core.domain.catalog import CatalogItem, CatalogProduct, UserReview
from src.core.domain.company import Company
from src.core.domain.invoice_ledger import InvoiceLedger, is_valid_priority
from src.core.domain.order import Order, OrderItem
from src.core.domain.user import User, UserType

__all__ = [
    # User
    "User",
    "UserType",
    # Invoice ledger
    "InvoiceLedger",
    "is_valid_priority",
    # Orders
    "Order",
    "OrderItem",
    # Profile sections
    "Address",
    "Company",
    "Billing",
    "PaymentMethod",
    # Catalog
    "CatalogItem",
    "CatalogProduct",
    "UserReview",
]
