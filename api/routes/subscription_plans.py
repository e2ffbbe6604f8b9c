"""Admin routes for subscription plans"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging
from typing import List
from uuid import UUID

from api.dependencies import get_db
from api.params import plan_id_path
from api.responses import APIResponse, ErrorResponse, success_response
from domain.mappers import SubscriptionMapper
from domain.schemas.subscription_schemas import (
    SubscriptionPlanResponse,
    SubscriptionPlanWithUsersResponse,
    UpdateSubscriptionPlanRequest,
)
from services.subscription_service import SubscriptionService

router = APIRouter(
    prefix="/admin/subscription-plans",
    tags=["Admin"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
logger = logging.getLogger("nutriscan.api.subscription_plans")


@router.get("", response_model=APIResponse[List[SubscriptionPlanWithUsersResponse]])
def get_all_subscription_plans(
    with_users: bool = Query(False, description="Include users for each plan"),
    db: Session = Depends(get_db),
):
    """Return every subscription plan with its subscriber count (and subscribers on request)"""
    plans = SubscriptionService.get_all_subscription_plans_with_users(db, with_users)
    return success_response(plans, "All subscription plans retrieved successfully")


@router.get("/{plan_id}", response_model=APIResponse[SubscriptionPlanResponse])
def get_subscription_plan_by_id(
    pid: UUID = Depends(plan_id_path), db: Session = Depends(get_db)
):
    """Return details of a specific subscription plan"""
    plan = SubscriptionService.get_subscription_plan_by_id(db, pid)
    return success_response(
        SubscriptionMapper.plan_to_response(plan),
        "Subscription plan details retrieved successfully",
    )


@router.patch("/{plan_id}", response_model=APIResponse[SubscriptionPlanResponse])
def update_subscription_plan(
    body: UpdateSubscriptionPlanRequest,
    pid: UUID = Depends(plan_id_path),
    db: Session = Depends(get_db),
):
    """Update a subscription plan (name, price, features, ...)"""
    plan = SubscriptionService.update_subscription_plan(db, pid, body)
    logger.info("Admin updated subscription plan %s", pid)
    return success_response(
        SubscriptionMapper.plan_to_response(plan),
        "Subscription plan updated successfully",
    )
