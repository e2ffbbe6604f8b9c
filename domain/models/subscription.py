"""
Subscription, plan and payment transaction models.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    ForeignKey,
    Integer,
    Boolean,
    Uuid,
    Enum as SQLEnum,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import SubscriptionStatus, PaymentStatus, TransactionStatus


class SubscriptionPlan(Base):
    """Subscription tier offered to users"""

    __tablename__ = "subscription_plan"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False, unique=True)
    price = Column(Integer, nullable=False, default=0)  # whole rupiah
    description = Column(Text)
    ai_scan_limit = Column(Integer, nullable=False, default=0)
    validity_days = Column(Integer, nullable=False, default=30)
    features = Column(Text, nullable=False, default="{}")  # JSON object stored as text
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    subscriptions = relationship("UserSubscription", back_populates="plan")

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_plan_price_nonneg"),
        CheckConstraint("validity_days > 0", name="ck_plan_validity_positive"),
    )

    def __repr__(self):
        return f"<SubscriptionPlan(id={self.id}, name='{self.name}')>"


class UserSubscription(Base):
    """A user's association with a plan"""

    __tablename__ = "user_subscription"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    plan_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("subscription_plan.id"),
        nullable=False,
        index=True,
    )
    status = Column(
        SQLEnum(SubscriptionStatus),
        nullable=False,
        default=SubscriptionStatus.PENDING,
    )
    payment_status = Column(
        SQLEnum(PaymentStatus), nullable=False, default=PaymentStatus.PENDING
    )
    payment_method = Column(Text)
    start_date = Column(TIMESTAMP(timezone=True))
    end_date = Column(TIMESTAMP(timezone=True))
    ai_scan_used = Column(Integer, nullable=False, default=0)
    is_auto_renew = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    user = relationship("AppUser", back_populates="subscriptions")
    plan = relationship("SubscriptionPlan", back_populates="subscriptions")
    transactions = relationship(
        "Transaction",
        back_populates="subscription",
        cascade="all, delete-orphan",
        order_by="Transaction.created_at.desc()",
    )


class Transaction(Base):
    """Payment transaction tied to a subscription"""

    __tablename__ = "payment_transaction"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    subscription_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("user_subscription.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    amount = Column(Integer, nullable=False, default=0)
    payment_method = Column(Text)
    status = Column(
        SQLEnum(TransactionStatus),
        nullable=False,
        default=TransactionStatus.PENDING,
    )
    reference = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    subscription = relationship("UserSubscription", back_populates="transactions")
    user = relationship("AppUser")

    __table_args__ = (CheckConstraint("amount >= 0", name="ck_transaction_amount_nonneg"),)
