from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import datetime
from uuid import UUID

from domain.enums import SubscriptionStatus, PaymentStatus, TransactionStatus


class SubscriptionResponse(BaseModel):
    """User subscription with its user and plan summary"""

    id: UUID
    user_id: UUID
    user_name: Optional[str] = None
    user_email: Optional[str] = None
    plan_id: UUID
    plan_name: Optional[str] = None
    plan_price: Optional[int] = None
    ai_scan_limit: Optional[int] = None
    status: SubscriptionStatus
    payment_status: PaymentStatus
    payment_method: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    ai_scan_used: int = 0
    is_auto_renew: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class UpdateSubscriptionRequest(BaseModel):
    """Partial update of a user subscription (admin)"""

    plan_id: Optional[UUID] = Field(None, description="Move the subscription to another plan")
    status: Optional[SubscriptionStatus] = None
    payment_status: Optional[PaymentStatus] = None
    payment_method: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    is_auto_renew: Optional[bool] = None


class UpdatePaymentStatusRequest(BaseModel):
    status: PaymentStatus = Field(..., description="New payment status")


class TransactionResponse(BaseModel):
    """Payment transaction log entry"""

    id: UUID
    subscription_id: UUID
    user_id: UUID
    user_name: Optional[str] = None
    plan_name: Optional[str] = None
    amount: int
    amount_formatted: str
    payment_method: Optional[str] = None
    status: TransactionStatus
    reference: Optional[str] = None
    created_at: Optional[datetime] = None


class SubscriptionPlanResponse(BaseModel):
    """Subscription plan with decoded feature flags"""

    id: UUID
    name: str
    price: int
    price_formatted: str
    description: Optional[str] = None
    ai_scan_limit: int
    validity_days: int
    features: Dict[str, bool] = Field(default_factory=dict)
    is_active: bool


class PlanSubscriber(BaseModel):
    """Summary of a user subscribed to a plan"""

    user_id: UUID
    full_name: Optional[str] = None
    email: str
    subscription_id: UUID
    status: SubscriptionStatus
    end_date: Optional[datetime] = None


class SubscriptionPlanWithUsersResponse(SubscriptionPlanResponse):
    users: List[PlanSubscriber] = Field(default_factory=list)
    user_count: int = 0


class UpdateSubscriptionPlanRequest(BaseModel):
    """Partial update of a subscription plan"""

    name: Optional[str] = Field(None, min_length=1)
    price: Optional[int] = Field(None, ge=0, description="Price in whole rupiah")
    description: Optional[str] = None
    ai_scan_limit: Optional[int] = Field(None, ge=0)
    validity_days: Optional[int] = Field(None, ge=1)
    features: Optional[Dict[str, bool]] = None
    is_active: Optional[bool] = None
