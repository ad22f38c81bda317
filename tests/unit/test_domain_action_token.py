"""Unit tests for the ActionToken entity and OwnerRef value object.

Tests cover:
- State predicates (expired, used, deleted, active, dead)
- Expiration boundary (expires_at == now counts as expired)
- OwnerRef construction, validation and equality
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import pytest

from action_tokens.domain.entities import ActionToken
from action_tokens.domain.value_objects import OwnerRef

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)


def create_token(**overrides) -> ActionToken:
    """Create an active token expiring one hour after NOW."""
    fields = {
        "id": 1,
        "value": "AB12CD34",
        "name": "email.verify",
        "owner": OwnerRef("User", "42"),
        "expires_at": NOW + timedelta(hours=1),
    }
    fields.update(overrides)
    return ActionToken(**fields)


@pytest.mark.unit
class TestActionTokenPredicates:
    """Test computed state predicates."""

    def test_fresh_token_is_active(self):
        token = create_token()

        assert token.is_active(NOW)
        assert not token.is_dead(NOW)
        assert not token.is_expired(NOW)
        assert not token.is_used()
        assert not token.is_deleted()

    def test_token_past_expiration_is_expired(self):
        token = create_token(expires_at=NOW - timedelta(seconds=1))

        assert token.is_expired(NOW)
        assert token.is_dead(NOW)
        assert not token.is_active(NOW)

    def test_token_expiring_exactly_now_is_expired(self):
        token = create_token(expires_at=NOW)

        assert token.is_expired(NOW)

    def test_used_token_is_dead(self):
        token = create_token(used_at=NOW)

        assert token.is_used()
        assert token.is_dead(NOW)

    def test_deleted_token_is_dead(self):
        token = create_token(deleted_at=NOW)

        assert token.is_deleted()
        assert not token.is_active(NOW)

    def test_str_is_token_value(self):
        assert str(create_token(value="XYZ")) == "XYZ"


@dataclass
class User:
    id: int
    email: str = "user@example.com"


@dataclass
class Anonymous:
    name: str = "anon"


@pytest.mark.unit
class TestOwnerRef:
    """Test owner reference construction."""

    def test_of_entity_uses_class_name_and_string_id(self):
        owner = OwnerRef.of(User(id=42))

        assert owner == OwnerRef(owner_type="User", owner_id="42")
        assert str(owner) == "User:42"

    def test_of_owner_ref_returns_same_reference(self):
        ref = OwnerRef("Team", "7")

        assert OwnerRef.of(ref) is ref

    def test_of_object_without_id_raises(self):
        with pytest.raises(TypeError, match="missing id"):
            OwnerRef.of(Anonymous())

    @pytest.mark.parametrize(
        ("owner_type", "owner_id"), [("", "1"), ("User", "")]
    )
    def test_empty_parts_rejected(self, owner_type, owner_id):
        with pytest.raises(ValueError):
            OwnerRef(owner_type, owner_id)

    def test_equality_is_by_value(self):
        assert OwnerRef("User", "1") == OwnerRef("User", "1")
        assert OwnerRef("User", "1") != OwnerRef("Team", "1")
        assert len({OwnerRef("User", "1"), OwnerRef("User", "1")}) == 1
