# models/member.py
from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from isp_manager.extension.extensions import db

class Member(db.Model):
    __tablename__ = 'members'
    id = Column(Integer, primary_key=True)
    full_name = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    phone_number = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    username = Column(Text, nullable=False)
    password = Column(Text, nullable=False)      # bcrypt hash, never plaintext
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    subscriptions = relationship('Subscription', back_populates='member', passive_deletes='all')

    def __str__(self):
        return f"Member(id={self.id}, username={self.username})"
