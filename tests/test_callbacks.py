"""
Tests for the token enrichment hooks.
"""

from auth.callbacks import AuthCallbacks, on_issue, on_read
from auth.models import Identity, SessionUser, SessionView


def _session(user=True) -> SessionView:
    return SessionView(
        user=SessionUser(email="a@b.com") if user else None,
        expires="2026-11-17T00:00:00+00:00",
    )


class TestOnIssue:
    def test_sets_id_from_identity(self):
        token = on_issue({"sub": "u1"}, Identity(id="u1", email="a@b.com"))
        assert token["id"] == "u1"
        assert token["sub"] == "u1"

    def test_no_identity_is_a_noop(self):
        token = {"sub": "u1", "id": "u1"}
        assert on_issue(token) == {"sub": "u1", "id": "u1"}
        assert on_issue(token, None) is token

    def test_does_not_mutate_input(self):
        token = {"sub": "u1"}
        on_issue(token, Identity(id="u1", email="a@b.com"))
        assert "id" not in token


class TestOnRead:
    def test_copies_token_id_into_session_user(self):
        session = on_read(_session(), {"id": "u1"})
        assert session.user.id == "u1"
        assert session.user.email == "a@b.com"

    def test_without_user_is_a_noop(self):
        session = _session(user=False)
        assert on_read(session, {"id": "u1"}) is session

    def test_idempotent(self):
        token = {"id": "u1"}
        once = on_read(_session(), token)
        twice = on_read(once, token)
        assert twice.user.id == once.user.id == "u1"

    def test_token_without_id_does_not_raise(self):
        assert on_read(_session(), {}).user.id is None


class TestAuthCallbacks:
    def test_defaults_are_the_module_hooks(self):
        callbacks = AuthCallbacks()
        assert callbacks.on_issue is on_issue
        assert callbacks.on_read is on_read
