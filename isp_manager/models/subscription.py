# models/subscription.py
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Enum, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from isp_manager.extension.extensions import db
import enum

class SubscriptionStatus(str, enum.Enum):
    active = "active"
    expired = "expired"

class Subscription(db.Model):
    __tablename__ = 'subscriptions'
    id = Column(Integer, primary_key=True)
    member_id = Column(Integer, ForeignKey('members.id', ondelete='RESTRICT'), nullable=False, index=True)
    package_id = Column(Integer, ForeignKey('packages.id', ondelete='RESTRICT'), nullable=False, index=True)
    start_date = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    end_date = Column(DateTime(timezone=True), nullable=False)
    status = Column(Enum(SubscriptionStatus, name='subscription_status'), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    member = relationship('Member', back_populates='subscriptions')
    package = relationship('Package', back_populates='subscriptions')
    transactions = relationship('Transaction', back_populates='subscription', order_by='Transaction.id', passive_deletes='all')

# Deletion guard lookups
Index('ix_subscription_member_status', Subscription.member_id, Subscription.status)
