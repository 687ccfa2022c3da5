"""Unit tests for the User aggregate and its owned products."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import NotFoundError, ValidationError
from catalog.domain.model.user import Role, User
from tests.fakes import EPOCH, FixedClock


def _make_user() -> User:
    """A user holding three products, in insertion order."""
    user = User("Mona", "mona@example.com", clock=FixedClock())
    user.add_product("Phone Case", 10)
    user.add_product("Power Bank", 30)
    user.add_product("Shoes", 55)
    return user


class TestUserBasics:

    def test_defaults_to_user_role(self):
        user = User("Mona", "mona@example.com")
        assert user.role is Role.USER
        assert not user.is_admin
        assert user.list_products() == []

    def test_role_accepts_string_value(self):
        assert User("Ziad", "ziad@example.com", "admin").is_admin

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError, match="Unknown role"):
            User("Ziad", "ziad@example.com", "superuser")  # type: ignore[arg-type]


class TestUserAddProduct:

    def test_product_owned_by_user(self):
        user = User("Mona", "mona@example.com", clock=FixedClock())
        p = user.add_product("Phone Case", 10)
        assert p.owner == "Mona"
        assert p.created_at == EPOCH
        assert user.list_products() == [p]

    def test_invalid_product_not_added(self):
        user = User("Mona", "mona@example.com")
        with pytest.raises(ValidationError):
            user.add_product("x", 10)
        with pytest.raises(ValidationError):
            user.add_product("Phone Case", -1)
        assert user.list_products() == []


class TestUserListAndFind:

    def test_list_preserves_order(self):
        names = [p.name for p in _make_user().list_products()]
        assert names == ["Phone Case", "Power Bank", "Shoes"]

    def test_list_is_a_copy(self):
        user = _make_user()
        listed = user.list_products()
        listed.clear()
        assert len(user.list_products()) == 3

    def test_find_is_case_insensitive_substring(self):
        found = _make_user().find_products_by_name("PO")
        assert [p.name for p in found] == ["Power Bank"]

    def test_find_keeps_original_order(self):
        found = _make_user().find_products_by_name("e")
        assert [p.name for p in found] == ["Phone Case", "Power Bank", "Shoes"]

    def test_find_no_match(self):
        assert _make_user().find_products_by_name("laptop") == []


class TestUserUpdatePrice:

    def test_updates_in_place(self):
        user = _make_user()
        case = user.list_products()[0]
        updated = user.update_product_price(case.id, 12.5)
        assert updated is case
        assert user.list_products()[0].price == Decimal("12.50")

    def test_unknown_id_rejected(self):
        with pytest.raises(NotFoundError, match="not found"):
            _make_user().update_product_price("p_missing", 5)

    def test_invalid_price_propagates(self):
        user = _make_user()
        case = user.list_products()[0]
        with pytest.raises(ValidationError):
            user.update_product_price(case.id, -1)
        assert case.price == Decimal("10.00")


class TestUserDeleteProduct:

    def test_removes_and_returns_product(self):
        user = _make_user()
        bank = user.list_products()[1]
        assert user.delete_product(bank.id) is bank
        assert bank not in user.list_products()
        assert [p.name for p in user.list_products()] == ["Phone Case", "Shoes"]

    def test_unknown_id_rejected(self):
        user = _make_user()
        with pytest.raises(NotFoundError):
            user.delete_product("p_missing")
        assert len(user.list_products()) == 3

    def test_second_delete_rejected(self):
        user = _make_user()
        shoes = user.list_products()[2]
        user.delete_product(shoes.id)
        with pytest.raises(NotFoundError):
            user.delete_product(shoes.id)
