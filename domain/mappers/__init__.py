"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.subscription_mapper import (
    SubscriptionMapper,
    format_currency,
    parse_features,
    dump_features,
)

__all__ = ["SubscriptionMapper", "format_currency", "parse_features", "dump_features"]
