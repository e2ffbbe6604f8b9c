"""Path parameter parsing shared by the admin routes"""

from uuid import UUID

from fastapi import Path

from app.exceptions import ServiceValidationError


def parse_uuid(raw: str, label: str) -> UUID:
    """
    Parse a path identifier, reporting failures as 400 errors.

    Args:
        raw: value taken from the URL path
        label: resource name used in messages, e.g. "subscription"

    Raises:
        ServiceValidationError: "<Label> ID is required" or "Invalid <label> ID format"
    """
    if raw is None or not raw.strip():
        raise ServiceValidationError(f"{label.capitalize()} ID is required")
    try:
        return UUID(raw.strip())
    except (ValueError, AttributeError):
        raise ServiceValidationError(f"Invalid {label} ID format")


# Path dependencies: FastAPI resolves these before validating the request body,
# so a malformed id is reported ahead of any body error.


def subscription_id_path(
    subscription_id: str = Path(..., description="User subscription UUID"),
) -> UUID:
    return parse_uuid(subscription_id, "subscription")


def plan_id_path(plan_id: str = Path(..., description="Subscription plan UUID")) -> UUID:
    return parse_uuid(plan_id, "plan")


def transaction_id_path(id: str = Path(..., description="Transaction UUID")) -> UUID:
    return parse_uuid(id, "transaction")
