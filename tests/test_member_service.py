import pytest

from isp_manager.errors import ValidationError, NotFoundError, ConflictError, PersistenceError
from isp_manager.extension.extensions import db
from isp_manager.models import Member, Subscription, SubscriptionStatus, Transaction
from isp_manager.services import member_service, subscription_service

VALID_MEMBER = {
    "full_name": "Jane Smith",
    "address": "456 Oak Ave",
    "phone_number": "555-0456",
    "email": "jane.smith@mail.com",
    "username": "janesmith",
    "password": "secret123",
}


class TestCreateMember:
    def test_create_member_hashes_password(self, app):
        member = member_service.create_member(dict(VALID_MEMBER))

        assert member.id is not None
        assert member.username == "janesmith"
        assert member.email == "jane.smith@mail.com"
        assert member.password != "secret123"
        assert member.password.startswith("$2")
        assert member_service.verify_password(member, "secret123")
        assert not member_service.verify_password(member, "wrong-password")

    @pytest.mark.parametrize("field,value", [
        ("full_name", ""),
        ("address", "  "),
        ("phone_number", None),
        ("username", ""),
        ("email", "not-an-email"),
        ("email", ""),
        ("password", "12345"),
        ("password", None),
    ])
    def test_invalid_input_is_rejected(self, app, field, value):
        payload = dict(VALID_MEMBER, **{field: value})
        with pytest.raises(ValidationError) as exc_info:
            member_service.create_member(payload)
        assert exc_info.value.details["field"] == field
        assert Member.query.count() == 0

    def test_six_character_password_is_accepted(self, app):
        member = member_service.create_member(dict(VALID_MEMBER, password="123456"))
        assert member_service.verify_password(member, "123456")


class TestGetMember:
    @pytest.mark.parametrize("member_id", [0, -1, 2**31, 2**70])
    def test_ids_outside_the_key_range_are_not_found(self, app, member_id):
        with pytest.raises(NotFoundError):
            member_service.get_member(member_id)


class TestListMembers:
    def test_insertion_order_with_hashed_password(self, app):
        member_service.create_member(dict(VALID_MEMBER, username="first"))
        member_service.create_member(dict(VALID_MEMBER, username="second"))

        members = member_service.list_members()
        assert [m.username for m in members] == ["first", "second"]
        assert all(m.password.startswith("$2") for m in members)


class TestUpdateMember:
    def test_partial_update(self, app, sample_member):
        member = member_service.update_member(sample_member.id, {"address": "789 Pine Rd"})

        assert member.address == "789 Pine Rd"
        assert member.full_name == "John Doe"
        assert member.email == "john.doe@mail.com"

    def test_password_is_rehashed(self, app, sample_member):
        member = member_service.update_member(sample_member.id, {"password": "newpass456"})

        assert member.password != "newpass456"
        assert member_service.verify_password(member, "newpass456")
        assert not member_service.verify_password(member, "password123")

    def test_unchanged_password_survives_other_updates(self, app, sample_member):
        member = member_service.update_member(sample_member.id, {"username": "jd"})
        assert member_service.verify_password(member, "password123")

    def test_invalid_email(self, app, sample_member):
        with pytest.raises(ValidationError):
            member_service.update_member(sample_member.id, {"email": "nope"})

    def test_short_password(self, app, sample_member):
        with pytest.raises(ValidationError):
            member_service.update_member(sample_member.id, {"password": "abc"})

    def test_missing_member(self, app):
        with pytest.raises(NotFoundError):
            member_service.update_member(999, {"full_name": "Ghost"})


class TestDeleteMember:
    def test_delete_member_without_subscriptions(self, app, sample_member):
        member_id = sample_member.id
        assert member_service.delete_member(member_id) is True

        with pytest.raises(NotFoundError):
            member_service.get_member(member_id)

    def test_missing_member(self, app):
        with pytest.raises(NotFoundError) as exc_info:
            member_service.delete_member(999)
        assert "Member" in exc_info.value.message

    def test_active_subscription_blocks_delete(self, app, sample_member, sample_package, make_subscription):
        make_subscription(sample_member, sample_package, status=SubscriptionStatus.expired, days_ago=60)
        make_subscription(sample_member, sample_package, status=SubscriptionStatus.active)

        with pytest.raises(ConflictError) as exc_info:
            member_service.delete_member(sample_member.id)

        assert "active subscriptions" in exc_info.value.message
        db.session.expire_all()
        assert db.session.get(Member, sample_member.id) is not None
        assert Subscription.query.filter_by(member_id=sample_member.id).count() == 2

    def test_expired_subscriptions_are_cascaded(self, app, sample_member, sample_package, make_subscription):
        member_id = sample_member.id
        make_subscription(sample_member, sample_package, status=SubscriptionStatus.expired, days_ago=60)
        make_subscription(sample_member, sample_package, status=SubscriptionStatus.expired, days_ago=40)

        assert member_service.delete_member(member_id) is True

        assert db.session.get(Member, member_id) is None
        assert Subscription.query.filter_by(member_id=member_id).count() == 0

    def test_other_members_subscriptions_are_untouched(self, app, sample_member, sample_package, make_subscription):
        other = member_service.create_member(dict(VALID_MEMBER))
        make_subscription(other, sample_package, status=SubscriptionStatus.expired)
        make_subscription(sample_member, sample_package, status=SubscriptionStatus.expired)

        member_service.delete_member(sample_member.id)

        assert Subscription.query.filter_by(member_id=other.id).count() == 1

    def test_billed_subscription_blocks_the_whole_delete(self, app, sample_member, sample_package):
        member_id = sample_member.id
        sub = subscription_service.create_subscription({"member_id": member_id, "package_id": sample_package.id})
        sub.status = SubscriptionStatus.expired
        db.session.commit()

        # the transaction row still references the subscription
        with pytest.raises(PersistenceError):
            member_service.delete_member(member_id)

        db.session.expire_all()
        assert db.session.get(Member, member_id) is not None
        assert Subscription.query.filter_by(member_id=member_id).count() == 1
        assert Transaction.query.count() == 1
