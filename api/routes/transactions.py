"""Admin routes for payment transaction logs"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from api.dependencies import get_db, Pagination
from api.params import transaction_id_path
from api.responses import (
    APIResponse,
    ErrorResponse,
    PaginatedDataResponse,
    success_response,
    paginated_response,
)
from domain.mappers import SubscriptionMapper
from domain.schemas.subscription_schemas import TransactionResponse
from services.subscription_service import SubscriptionService

router = APIRouter(
    prefix="/admin/transactions",
    tags=["Admin"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
logger = logging.getLogger("nutriscan.api.transactions")


@router.get("", response_model=PaginatedDataResponse[TransactionResponse])
def get_all_transactions(pagination: Pagination = Depends(), db: Session = Depends(get_db)):
    """Return all transaction logs with pagination, newest first"""
    transactions, total = SubscriptionService.get_all_transactions(
        db, pagination.page, pagination.limit
    )
    logger.debug("Transaction page %d: %d of %d", pagination.page, len(transactions), total)
    return paginated_response(
        [SubscriptionMapper.transaction_to_response(t) for t in transactions],
        total,
        pagination.page,
        pagination.limit,
        message="All transaction logs retrieved successfully",
        items_key="data",
    )


@router.get("/{id}", response_model=APIResponse[TransactionResponse])
def get_transaction_by_id(
    transaction_id: UUID = Depends(transaction_id_path), db: Session = Depends(get_db)
):
    """Return details of a specific transaction"""
    transaction = SubscriptionService.get_transaction_by_id(db, transaction_id)
    return success_response(
        SubscriptionMapper.transaction_to_response(transaction),
        "Transaction details retrieved successfully",
    )
