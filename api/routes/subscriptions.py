"""Admin routes for user subscriptions"""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session
import logging
from typing import List, Optional
from uuid import UUID

from api.dependencies import get_db, Pagination
from api.middleware import request_id_of
from api.params import subscription_id_path
from api.responses import (
    APIResponse,
    ErrorResponse,
    PaginatedResponse,
    success_response,
    paginated_response,
)
from app.exceptions import ServiceValidationError
from domain.enums import SubscriptionStatus
from domain.mappers import SubscriptionMapper
from domain.schemas.subscription_schemas import (
    SubscriptionResponse,
    TransactionResponse,
    UpdateSubscriptionRequest,
    UpdatePaymentStatusRequest,
)
from services.subscription_service import SubscriptionService

router = APIRouter(
    prefix="/admin/subscriptions",
    tags=["Admin"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
logger = logging.getLogger("nutriscan.api.subscriptions")
activity_logger = logging.getLogger("nutriscan.activity")


def _parse_status(raw: str) -> Optional[SubscriptionStatus]:
    """Empty means no filter"""
    raw = raw.strip().lower()
    if not raw:
        return None
    try:
        return SubscriptionStatus(raw)
    except ValueError:
        allowed = ", ".join(s.value for s in SubscriptionStatus)
        raise ServiceValidationError(f"Invalid status filter; expected one of: {allowed}")


@router.get("", response_model=PaginatedResponse[SubscriptionResponse])
def get_all_user_subscriptions(
    pagination: Pagination = Depends(),
    status: str = Query(
        "", description="Filter by status (active, expired, pending, cancelled)"
    ),
    db: Session = Depends(get_db),
):
    """Return all user subscriptions with pagination"""
    subscriptions, total = SubscriptionService.get_all_user_subscriptions(
        db, pagination.page, pagination.limit, _parse_status(status)
    )
    return paginated_response(
        [SubscriptionMapper.to_response(s) for s in subscriptions],
        total,
        pagination.page,
        pagination.limit,
        message="User subscriptions retrieved successfully",
    )


@router.get("/{subscription_id}", response_model=APIResponse[SubscriptionResponse])
def get_user_subscription_details(
    sid: UUID = Depends(subscription_id_path), db: Session = Depends(get_db)
):
    """Return details of a specific user subscription"""
    subscription = SubscriptionService.get_user_subscription_by_id(db, sid)
    return success_response(
        SubscriptionMapper.to_response(subscription),
        "User subscription details retrieved successfully",
    )


@router.patch("/{subscription_id}", response_model=APIResponse[SubscriptionResponse])
def update_user_subscription(
    body: UpdateSubscriptionRequest,
    sid: UUID = Depends(subscription_id_path),
    db: Session = Depends(get_db),
):
    """Update a user subscription (plan, status, validity period, ...)"""
    subscription = SubscriptionService.update_user_subscription(db, sid, body)
    return success_response(
        SubscriptionMapper.to_response(subscription),
        "User subscription updated successfully",
    )


@router.delete("/{subscription_id}", response_model=APIResponse)
def delete_user_subscription(
    sid: UUID = Depends(subscription_id_path), db: Session = Depends(get_db)
):
    """Delete a user subscription and its transaction logs"""
    SubscriptionService.delete_user_subscription(db, sid)
    logger.info("Admin deleted subscription %s", sid)
    return success_response(message="User subscription deleted successfully")


@router.get(
    "/{subscription_id}/transactions",
    response_model=APIResponse[List[TransactionResponse]],
)
def get_transaction_logs(
    sid: UUID = Depends(subscription_id_path), db: Session = Depends(get_db)
):
    """Return transaction logs for a specific user subscription"""
    transactions = SubscriptionService.get_transactions_by_subscription_id(db, sid)
    return success_response(
        [SubscriptionMapper.transaction_to_response(t) for t in transactions],
        "Transaction logs retrieved successfully",
    )


@router.patch(
    "/{subscription_id}/payment-status",
    response_model=APIResponse[SubscriptionResponse],
)
def update_payment_status(
    body: UpdatePaymentStatusRequest,
    request: Request,
    sid: UUID = Depends(subscription_id_path),
    db: Session = Depends(get_db),
):
    """Update the payment status of a user subscription"""
    subscription = SubscriptionService.update_payment_status(db, sid, body.status)

    activity_logger.info(
        "update_payment_status subscription=%s status=%s",
        sid,
        body.status.value,
        extra={
            "action": "update_payment_status",
            "resource": "subscription",
            "resource_id": str(sid),
            "request_id": request_id_of(request),
            "ip_address": request.client.host if request.client else None,
            "user_agent": request.headers.get("user-agent"),
            "details": {"status": body.status.value},
        },
    )

    return success_response(
        SubscriptionMapper.to_response(subscription),
        "Payment status updated successfully",
    )
