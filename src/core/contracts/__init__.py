"""
Contract Validation Module

Модуль для валидации JSON контрактов клиентского слоя данных.
"""

from .validators import (
    AddressValidator,
    BillingValidator,
    CatalogProductValidator,
    CompanyValidator,
    ContractValidator,
    InvoiceEntryValidator,
    OrderValidator,
    PaymentMethodValidator,
    SchemaLoader,
    UserReviewValidator,
    UserValidator,
    is_address,
    is_billing,
    is_company,
    is_invoice_entry,
    is_order,
    is_payment_method,
    is_product,
    is_user,
    is_user_review,
    validate_catalog_product,
    validate_order,
    validate_user,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "UserValidator",
    "AddressValidator",
    "CompanyValidator",
    "BillingValidator",
    "PaymentMethodValidator",
    "OrderValidator",
    "InvoiceEntryValidator",
    "CatalogProductValidator",
    "UserReviewValidator",
    # Predicates
    "is_user",
    "is_address",
    "is_company",
    "is_billing",
    "is_payment_method",
    "is_order",
    "is_invoice_entry",
    "is_product",
    "is_user_review",
    # Functions
    "validate_user",
    "validate_order",
    "validate_catalog_product",
]
