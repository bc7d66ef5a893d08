"""Unit tests for the User aggregate and its value objects."""

from datetime import datetime, timedelta, timezone

import pytest

from tests.shared.fixtures.factories import FIXED_CREATED_AT, make_user
from usermgmt.domain.user import (
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    Action,
    Email,
    InvalidEmailError,
    InvalidUserNameError,
    Role,
    RoleSet,
    Status,
    User,
    UserName,
)


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email(" A@Example.COM ").value == "a@example.com"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_empty_is_rejected(self, raw):
        with pytest.raises(InvalidEmailError, match="Email cannot be empty"):
            Email(raw)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "raw",
        ["plainaddress", "missing@tld", "@example.com", "two@@example.com"],
    )
    def test_invalid_format_is_rejected(self, raw):
        with pytest.raises(InvalidEmailError, match="Invalid email format"):
            Email(raw)

    def test_str(self):
        assert str(Email("bob@example.org")) == "bob@example.org"

    def test_max_length_is_allowed(self):
        address = "a" * (MAX_EMAIL_LENGTH - len("@example.com")) + "@example.com"

        assert len(Email(address).value) == MAX_EMAIL_LENGTH

    def test_too_long_is_rejected(self):
        address = "a" * MAX_EMAIL_LENGTH + "@example.com"

        with pytest.raises(InvalidEmailError, match="cannot exceed 254"):
            Email(address)


class TestUserName:
    def test_trims(self):
        assert UserName("  Alice ").value == "Alice"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_empty_is_rejected(self, raw):
        with pytest.raises(InvalidUserNameError, match="Name cannot be empty"):
            UserName(raw)  # type: ignore[arg-type]

    def test_max_length_is_allowed(self):
        assert len(UserName("x" * MAX_NAME_LENGTH).value) == MAX_NAME_LENGTH

    def test_length_is_checked_after_trimming(self):
        padded = "  " + "x" * MAX_NAME_LENGTH + "  "
        assert UserName(padded).value == "x" * MAX_NAME_LENGTH

    def test_too_long_is_rejected(self):
        with pytest.raises(InvalidUserNameError, match="cannot exceed 100"):
            UserName("x" * (MAX_NAME_LENGTH + 1))


class TestUserCreate:
    def test_create_normalizes_fields(self):
        user = User.create(
            " Alice ",
            " A@Example.COM ",
            roles=RoleSet.from_roles([Role.CLINICIAN, Role.STAFF]),
        )

        assert user.name == "Alice"
        assert user.email == "a@example.com"
        assert user.roles.to_list() == [Role.CLINICIAN, Role.STAFF]
        assert user.status is Status.NONE
        assert user.action is Action.NONE

    def test_create_has_no_id(self):
        user = User.create("Alice", "alice@example.com")

        assert user.id is None
        assert not user.is_persisted

    def test_create_stamps_utc_now(self):
        before = datetime.now(tz=timezone.utc)
        user = User.create("Alice", "alice@example.com")
        after = datetime.now(tz=timezone.utc)

        assert user.created_at.tzinfo is not None
        assert before <= user.created_at <= after

    def test_create_defaults_to_empty_roles(self):
        user = User.create("Alice", "alice@example.com")

        assert user.roles.is_empty


class TestUserIdentity:
    def test_assign_id_once(self):
        user = make_user()
        user.assign_id(7)

        assert user.id == 7
        assert user.is_persisted

    def test_assign_id_twice_raises(self):
        user = make_user(id=3)

        with pytest.raises(ValueError, match="already has id 3"):
            user.assign_id(4)

    def test_equality_by_id(self):
        assert make_user(id=1, name="A") == make_user(id=1, name="B")
        assert make_user(id=1) != make_user(id=2)

    def test_unsaved_users_equal_only_to_themselves(self):
        user = make_user()

        assert user == user
        assert user != make_user()


class TestUserMutations:
    def test_update_profile_keeps_created_at_status_and_action(self):
        user = make_user(id=1, status=Status.ACTIVE, action=Action.REACTIVATE)

        user.update_profile(" Bob ", "BOB@example.com", RoleSet.from_roles(["Staff"]))

        assert user.name == "Bob"
        assert user.email == "bob@example.com"
        assert user.roles.to_list() == [Role.STAFF]
        assert user.created_at == FIXED_CREATED_AT
        assert user.status is Status.ACTIVE
        assert user.action is Action.REACTIVATE

    def test_assign_roles_replaces_set(self):
        user = make_user(roles=[Role.CLINICIAN, Role.STAFF])

        user.assign_roles(RoleSet.from_roles([Role.PATIENT]))

        assert user.roles.to_list() == [Role.PATIENT]

    def test_change_status(self):
        user = make_user()

        user.change_status(Status.DEACTIVE)

        assert user.status is Status.DEACTIVE
        assert user.created_at == FIXED_CREATED_AT

    def test_request_action(self):
        user = make_user()

        user.request_action(Action.RESEND_INVITE)

        assert user.action is Action.RESEND_INVITE


class TestUserReconstitute:
    def test_reconstitute_from_storage_values(self):
        created = datetime(2023, 5, 1, 12, 0, tzinfo=timezone.utc)

        user = User.reconstitute(
            id=5,
            name="Alice",
            email="alice@example.com",
            roles=6,
            status=2,
            action=3,
            created_at=created,
        )

        assert user.id == 5
        assert user.roles.to_list() == [Role.CLINICIAN, Role.STAFF]
        assert user.status is Status.DEACTIVE
        assert user.action is Action.RESEND_INVITE
        assert user.created_at == created

    def test_naive_timestamp_is_treated_as_utc(self):
        naive = datetime(2023, 5, 1, 12, 0)

        user = User.reconstitute(
            id=1,
            name="Alice",
            email="alice@example.com",
            roles=0,
            status=0,
            action=0,
            created_at=naive,
        )

        assert user.created_at.utcoffset() == timedelta(0)

    def test_copy_is_independent(self):
        original = make_user(id=1, roles=[Role.STAFF])
        clone = original.copy()

        clone.change_status(Status.ACTIVE)

        assert clone == original
        assert original.status is Status.NONE
