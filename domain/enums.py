"""
Domain enums for NutriScan Admin.
Contains all enumeration types used across the domain models.
"""

import enum


class SubscriptionStatus(str, enum.Enum):
    """Lifecycle state of a user subscription"""

    ACTIVE = "active"
    EXPIRED = "expired"
    PENDING = "pending"
    CANCELLED = "cancelled"


class PaymentStatus(str, enum.Enum):
    """Payment state of a user subscription"""

    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class TransactionStatus(str, enum.Enum):
    """Outcome of a single payment transaction"""

    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"
    REFUNDED = "refunded"
