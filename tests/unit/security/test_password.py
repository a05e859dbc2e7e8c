"""Unit tests for security/password.py"""

import pytest

from swingnotes.core.errors import AppError, ErrorKind
from swingnotes.security import password as password_module
from swingnotes.security.password import hash_password, needs_update, verify_password


def test_hash_and_verify_roundtrip():
    pwd = "secret1"
    h = hash_password(pwd)
    assert h != pwd
    assert pwd not in h
    assert verify_password(pwd, h) is True
    assert verify_password("secret2", h) is False


def test_same_password_hashes_differently():
    assert hash_password("secret1") != hash_password("secret1")


def test_long_passwords_are_not_truncated():
    base = "x" * 80
    h = hash_password(base + "a")
    assert verify_password(base + "a", h) is True
    assert verify_password(base + "b", h) is False


def test_verify_against_garbage_hash_is_false():
    assert verify_password("secret1", "not-a-hash") is False


def test_needs_update_false_for_fresh_hash():
    assert needs_update(hash_password("secret1")) is False


def test_hash_failure_is_internal_error(monkeypatch):
    class BrokenContext:
        def hash(self, password):
            raise ValueError("backend unavailable")

    monkeypatch.setattr(password_module, "pwd_context", BrokenContext())

    with pytest.raises(AppError) as exc_info:
        hash_password("secret1")
    assert exc_info.value.kind is ErrorKind.INTERNAL


def test_dummy_verify_runs_the_hasher(monkeypatch):
    calls = []

    class SpyContext:
        def dummy_verify(self):
            calls.append("dummy_verify")

    monkeypatch.setattr(password_module, "pwd_context", SpyContext())

    assert password_module.verify_dummy_password() is False
    assert calls == ["dummy_verify"]
