"""Unit tests for password hashing."""

from __future__ import annotations

from utils.password import hash_password, verify_password


class TestHashPassword:
    def test_hash_is_not_plain_text(self):
        hashed = hash_password("ada", "Secret#123", rounds=4)
        assert "Secret#123" not in hashed
        assert hashed.startswith("$2")

    def test_hashes_are_salted(self):
        """Hashing the same credentials twice gives different strings."""
        first = hash_password("ada", "Secret#123", rounds=4)
        second = hash_password("ada", "Secret#123", rounds=4)
        assert first != second

    def test_long_passwords_are_not_truncated(self):
        """Passwords differing only after byte 72 still hash differently."""
        base = "A1#" + "x" * 80
        hashed = hash_password("ada", base + "1", rounds=4)
        assert verify_password("ada", base + "1", hashed)
        assert not verify_password("ada", base + "2", hashed)


class TestVerifyPassword:
    def test_correct_password(self):
        hashed = hash_password("ada", "Secret#123", rounds=4)
        assert verify_password("ada", "Secret#123", hashed)

    def test_wrong_password(self):
        hashed = hash_password("ada", "Secret#123", rounds=4)
        assert not verify_password("ada", "Secret#124", hashed)

    def test_bound_to_username(self):
        hashed = hash_password("ada", "Secret#123", rounds=4)
        assert not verify_password("grace", "Secret#123", hashed)

    def test_malformed_hash(self):
        assert not verify_password("ada", "Secret#123", "not-a-bcrypt-hash")
