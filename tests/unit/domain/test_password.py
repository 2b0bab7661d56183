"""Tests for the Password value object and the Argon2id helpers behind it."""

import pytest

from inkwell.core.exceptions import PasswordHashError
from inkwell.domain.value_objects.password import Password
from inkwell.utils.security import hash_password, verify_password


class TestPassword:
    def test_hash_produces_argon2id_phc_string(self):
        password = Password.hash("correct horse")
        assert password.hashed_value.startswith("$argon2id$")

    def test_same_plaintext_hashes_differently(self):
        first = Password.hash("pw123456")
        second = Password.hash("pw123456")
        assert first.hashed_value != second.hashed_value
        assert first.verify("pw123456")
        assert second.verify("pw123456")

    def test_verify_rejects_wrong_plaintext(self):
        password = Password.hash("pw123456")
        assert password.verify("pw1234567") is False

    def test_verify_malformed_hash_returns_false(self):
        assert Password.from_hash("not-a-hash").verify("anything") is False

    @pytest.mark.parametrize("stored", ["$argon2id$é-garbage", "ünïcode", "$argon2id$v=19$m=1024,t=1,p=1$ß$ß"])
    def test_verify_non_ascii_hash_returns_false(self, stored):
        assert Password.from_hash(stored).verify("pw123456") is False
        assert verify_password("pw123456", stored) is False

    def test_from_hash_does_not_rehash(self):
        encoded = hash_password("pw123456")
        assert Password.from_hash(encoded).hashed_value == encoded

    def test_repr_and_str_are_masked(self):
        password = Password.hash("pw123456")
        assert repr(password) == 'Password("********")'
        assert str(password) == 'Password("********")'
        assert password.hashed_value not in repr(password)

    def test_hash_wraps_library_failures(self, mocker):
        mocker.patch(
            "inkwell.domain.value_objects.password.hash_password",
            side_effect=TypeError("bad input"),
        )
        with pytest.raises(PasswordHashError):
            Password.hash("pw123456")

    @pytest.mark.asyncio
    async def test_async_hash_and_verify(self):
        password = await Password.hash_async("pw123456")
        assert await password.verify_async("pw123456")
        assert not await password.verify_async("wrong-password")


def test_verify_password_accepts_hashes_from_other_cost_settings():
    from argon2 import PasswordHasher, Type

    legacy = PasswordHasher(time_cost=2, memory_cost=2048, parallelism=1, type=Type.ID)
    assert verify_password("pw123456", legacy.hash("pw123456"))
