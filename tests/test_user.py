"""Tests for the user service.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

import json
from datetime import date, datetime, timezone

import httpx
import pytest

from fractal_api import (
    Address,
    AuthorizationError,
    DecodeError,
    NotFoundError,
    Scope,
)


class TestGetUser:
    """Reading users."""

    def test_get_user_pairs_confirmation_flags(
        self, client, mock_api, user_token, sample_user_data
    ) -> None:
        """Verifiable attributes are paired with their confirmed flag."""
        mock_api.get("user/7").mock(return_value=httpx.Response(200, json=sample_user_data))

        user = client.user.get_user(user_token, 7)

        assert user.id == 7
        assert user.email.value == "alice@example.com"
        assert user.email.confirmed
        assert user.first.value == "Alice"
        assert not user.first.confirmed
        assert user.last is None
        assert user.birthday.value == date(1990, 5, 17)
        assert user.birthday.confirmed
        assert user.address.value.city == "Springfield"
        assert user.wallet_addresses == frozenset({"fr1alicewallet"})
        assert not user.is_banned

    def test_last_activity_wire_key(
        self, client, mock_api, user_token, sample_user_data
    ) -> None:
        """The server's ``last_activty`` key decodes into ``last_activity``."""
        mock_api.get("user/7").mock(return_value=httpx.Response(200, json=sample_user_data))

        user = client.user.get_user(user_token, 7)

        assert user.last_activity == datetime(2024, 2, 1, 12, tzinfo=timezone.utc)

    def test_user_is_hashable_and_bonds_are_read_only(
        self, client, mock_api, user_token, sample_user_data
    ) -> None:
        """Users are immutable values, bonds included."""
        bonds = {"2024-06-01T00:00:00Z": 5, "2024-01-01T00:00:00Z": 10}
        mock_api.get("user/7").mock(
            return_value=httpx.Response(200, json={**sample_user_data, "bonds": bonds})
        )

        user = client.user.get_user(user_token, 7)

        assert user.bonds == (
            (datetime(2024, 1, 1, tzinfo=timezone.utc), 10),
            (datetime(2024, 6, 1, tzinfo=timezone.utc), 5),
        )
        assert hash(user) == hash(user.model_copy())
        with pytest.raises(TypeError):
            user.bonds[0] = (datetime(2025, 1, 1, tzinfo=timezone.utc), 1)

    def test_admin_may_read_any_user(
        self, client, mock_api, admin_token, sample_user_data
    ) -> None:
        """Admin satisfies the matching user requirement."""
        route = mock_api.get("user/7").mock(
            return_value=httpx.Response(200, json=sample_user_data)
        )

        client.user.get_user(admin_token, 7)

        assert route.called

    def test_other_user_is_refused_locally(self, client, mock_api, user_token) -> None:
        """User 7 may not read user 8."""
        with pytest.raises(AuthorizationError):
            client.user.get_user(user_token, 8)

        assert len(mock_api.calls) == 0

    def test_missing_user(self, client, mock_api, admin_token) -> None:
        """A 404 surfaces as not found."""
        mock_api.get("user/99").mock(
            return_value=httpx.Response(404, json={"message": "no such user"})
        )

        with pytest.raises(NotFoundError, match="no such user"):
            client.user.get_user(admin_token, 99)

    def test_unexpected_shape_is_a_decode_error(self, client, mock_api, user_token) -> None:
        """A success body that is not a user fails to decode."""
        mock_api.get("user/7").mock(return_value=httpx.Response(200, json={"id": 7}))

        with pytest.raises(DecodeError):
            client.user.get_user(user_token, 7)

    def test_get_me_uses_own_id(self, client, mock_api, user_token, sample_user_data) -> None:
        """``get_me`` resolves the id from the token."""
        route = mock_api.get("user/7").mock(
            return_value=httpx.Response(200, json=sample_user_data)
        )

        assert client.user.get_me(user_token).username == "alice"
        assert route.called

    def test_get_me_requires_user(self, client, mock_api, admin_token) -> None:
        """Admins have no ``me``."""
        with pytest.raises(AuthorizationError):
            client.user.get_me(admin_token)

        assert len(mock_api.calls) == 0

    def test_get_all_users(self, client, mock_api, admin_token, sample_user_data) -> None:
        """Admins list every user."""
        second = {**sample_user_data, "id": 8, "username": "carol"}
        mock_api.get("all_users").mock(
            return_value=httpx.Response(200, json=[sample_user_data, second])
        )

        users = client.user.get_all_users(admin_token)

        assert [u.username for u in users] == ["alice", "carol"]

    def test_get_all_users_fails_on_a_bad_entry(
        self, client, mock_api, admin_token, sample_user_data
    ) -> None:
        """A bad entry fails the call instead of vanishing from the list."""
        mock_api.get("all_users").mock(
            return_value=httpx.Response(200, json=[sample_user_data, {"id": 8}])
        )

        with pytest.raises(DecodeError):
            client.user.get_all_users(admin_token)

    def test_search_user_random(self, client, mock_api, user_token, sample_profile_data) -> None:
        """A random profile is returned to connect with."""
        mock_api.get("search_user_random").mock(
            return_value=httpx.Response(200, json=sample_profile_data)
        )

        profile = client.user.search_user_random(user_token)

        assert profile.id == 9
        assert profile.display_name == "Bob Stone"


class TestAdministration:
    """Deletion and two factor authentication."""

    def test_delete_user(self, client, mock_api, admin_token) -> None:
        """Admins delete users."""
        route = mock_api.delete("user/8").mock(return_value=httpx.Response(200))

        client.user.delete_user(admin_token, 8)

        assert route.called

    def test_delete_user_requires_admin(self, client, mock_api, user_token) -> None:
        """Users may not even delete themselves."""
        with pytest.raises(AuthorizationError):
            client.user.delete_user(user_token, 7)

        assert len(mock_api.calls) == 0

    def test_generate_authenticator_code(self, client, mock_api, user_token) -> None:
        """The code is the message of the response."""
        mock_api.get("authenticator/7").mock(
            return_value=httpx.Response(200, json={"message": "otpauth://totp/x"})
        )

        assert client.user.generate_authenticator_code(user_token, 7) == "otpauth://totp/x"

    def test_authenticate(self, client, mock_api, user_token) -> None:
        """The code is posted with a timestamp."""
        route = mock_api.post("authenticate/7").mock(return_value=httpx.Response(200))

        client.user.authenticate(user_token, 7, 123456)

        body = json.loads(route.calls.last.request.content)
        assert body["code"] == 123456
        assert "timestamp" in body

    def test_authenticate_is_user_only(self, client, mock_api, admin_token) -> None:
        """Two factor codes belong to the user alone."""
        with pytest.raises(AuthorizationError):
            client.user.authenticate(admin_token, 7, 123456)

        assert len(mock_api.calls) == 0


class TestUpdates:
    """Partial updates send only the changed fields."""

    def _body(self, route) -> dict:
        return json.loads(route.calls.last.request.content)

    def test_set_username(self, client, mock_api, user_token) -> None:
        """Unchanged fields are null."""
        route = mock_api.post("update_user/7").mock(return_value=httpx.Response(200))

        client.user.set_username(user_token, 7, "alicia", password="pw")

        body = self._body(route)
        assert body["new_username"] == "alicia"
        assert body["old_password"] == "pw"
        assert all(
            body[k] is None for k in body if k not in {"new_username", "old_password"}
        )

    def test_set_name(self, client, mock_api, user_token) -> None:
        route = mock_api.post("update_user/7").mock(return_value=httpx.Response(200))

        client.user.set_name(user_token, 7, "Alice", "Liddell")

        body = self._body(route)
        assert (body["new_first"], body["new_last"]) == ("Alice", "Liddell")
        assert body["old_password"] is None

    def test_set_birthday_and_address(self, client, mock_api, admin_token) -> None:
        """Admins update other users; dates and addresses are JSON encoded."""
        route = mock_api.post("update_user/8").mock(return_value=httpx.Response(200))
        address = Address(
            address1="2 Side St", city="Portland", state="OR", zip="97201", country="US"
        )

        client.user.set_birthday(admin_token, 8, date(2000, 1, 2))
        assert self._body(route)["new_birthday"] == "2000-01-02"

        client.user.set_address(admin_token, 8, address)
        assert self._body(route)["new_address"]["city"] == "Portland"

    @pytest.mark.parametrize(
        ("setter", "value", "field"),
        [
            ("set_phone", "+15551234", "new_phone"),
            ("set_email", "new@example.com", "new_email"),
            ("set_image", "https://img.example/a.png", "new_image"),
        ],
    )
    def test_single_field_setters(
        self, client, mock_api, user_token, setter, value, field
    ) -> None:
        route = mock_api.post("update_user/7").mock(return_value=httpx.Response(200))

        getattr(client.user, setter)(user_token, 7, value)

        assert self._body(route)[field] == value

    def test_setter_for_other_user_is_refused(self, client, mock_api, user_token) -> None:
        """Users only update themselves."""
        with pytest.raises(AuthorizationError):
            client.user.set_phone(user_token, 8, "+1555")

        assert len(mock_api.calls) == 0

    def test_set_password(self, client, mock_api, make_token) -> None:
        """Password changes target the token's own user."""
        token = make_token(Scope.public(), Scope.user(11))
        route = mock_api.post("update_user/11").mock(return_value=httpx.Response(200))

        client.user.set_password(token, "old", "new")

        body = self._body(route)
        assert (body["old_password"], body["new_password"]) == ("old", "new")

    def test_set_password_requires_user(self, client, mock_api, admin_token) -> None:
        with pytest.raises(AuthorizationError):
            client.user.set_password(admin_token, "old", "new")

        assert len(mock_api.calls) == 0
