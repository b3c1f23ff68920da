# models/transaction.py
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from isp_manager.extension.extensions import db

class PaymentStatus:
    PENDING = 'pending'
    PAID = 'paid'
    FAILED = 'failed'
    COMPLETED = 'completed'

class Transaction(db.Model):
    __tablename__ = 'transactions'
    id = Column(Integer, primary_key=True)
    subscription_id = Column(Integer, ForeignKey('subscriptions.id', ondelete='RESTRICT'), nullable=False, index=True)
    transaction_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)                  # package price at subscription time
    payment_status = Column(String(32), nullable=False, default=PaymentStatus.PENDING)   # set manually, free text
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    subscription = relationship('Subscription', back_populates='transactions')

    def __str__(self):
        return f"Transaction(subscription_id={self.subscription_id}, amount={self.amount}, status={self.payment_status})"
