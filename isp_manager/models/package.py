# models/package.py
from sqlalchemy import Column, Integer, Text, Numeric, DateTime, CheckConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from isp_manager.extension.extensions import db

DEFAULT_ACTIVE_DURATION_DAYS = 30

class Package(db.Model):
    __tablename__ = 'packages'
    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    speed = Column(Text, nullable=False)                             # free-form, e.g. '100 Mbps'
    price = Column(Numeric(10, 2), nullable=False)
    active_duration = Column(Integer, nullable=False, default=DEFAULT_ACTIVE_DURATION_DAYS)   # days
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    subscriptions = relationship('Subscription', back_populates='package', passive_deletes='all')

    __table_args__ = (
        CheckConstraint('price > 0', name='ck_packages_price_positive'),
        CheckConstraint('active_duration > 0', name='ck_packages_duration_positive'),
    )

    def __str__(self):
        return f"Package(id={self.id}, name={self.name}, price={self.price})"
