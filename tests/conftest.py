# Shared pytest configuration and fixtures
import sqlite3
from decimal import Decimal
from datetime import datetime, timedelta, timezone

import pytest
from flask_jwt_extended import create_access_token
from sqlalchemy import event
from sqlalchemy.engine import Engine

from isp_manager import create_app
from isp_manager.config import TestConfig
from isp_manager.extension.extensions import db
from isp_manager.models import Package, Member, Subscription, SubscriptionStatus
from isp_manager.services.password_service import hash_password


@event.listens_for(Engine, "connect")
def _enforce_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless asked, PostgreSQL always checks them
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@pytest.fixture
def app():
    """Application bound to a fresh in-memory database."""
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sample_package(app):
    pkg = Package(name="Basic Plan", speed="10 Mbps", price=Decimal("29.99"), active_duration=30)
    db.session.add(pkg)
    db.session.commit()
    return pkg


@pytest.fixture
def sample_member(app):
    member = Member(
        full_name="John Doe",
        address="123 Main St",
        phone_number="555-0123",
        email="john.doe@mail.com",
        username="johndoe",
        password=hash_password("password123"),
    )
    db.session.add(member)
    db.session.commit()
    return member


@pytest.fixture
def make_subscription(app):
    """Insert a subscription row directly, bypassing the engine."""
    def _make(member, package, status=SubscriptionStatus.active, days_ago=0):
        start = datetime.now(timezone.utc) - timedelta(days=days_ago)
        sub = Subscription(
            member_id=member.id,
            package_id=package.id,
            start_date=start,
            end_date=start + timedelta(days=package.active_duration),
            status=status,
        )
        db.session.add(sub)
        db.session.commit()
        return sub
    return _make


def _bearer(role, member_id=None):
    claims = {"role": role}
    if member_id is not None:
        claims["member_id"] = member_id
    token = create_access_token(identity=role if member_id is None else f"member:{member_id}",
                                additional_claims=claims)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(app):
    return _bearer("admin")


@pytest.fixture
def customer_headers(app, sample_member):
    return _bearer("customer", sample_member.id)


@pytest.fixture
def bearer(app):
    return _bearer
