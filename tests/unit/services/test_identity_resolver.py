from __future__ import annotations

from datetime import timedelta

import pytest

from todolists.services._shared.ports import StubTokenProvider
from todolists.services.identity.resolver import IdentityResolver, extract_token


class TestExtractToken:
    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_absent_credential(self, raw):
        assert extract_token(raw) is None

    def test_bearer_prefix_is_stripped(self):
        assert extract_token("Bearer abc.def") == "abc.def"
        assert extract_token("bearer   abc.def ") == "abc.def"

    def test_raw_token_is_accepted(self):
        assert extract_token("abc.def") == "abc.def"


class TestIdentityResolver:
    @pytest.fixture()
    def resolver(self, storage, stub_tokens) -> IdentityResolver:
        return IdentityResolver(storage=storage, token_provider=stub_tokens)

    def test_no_credential_is_anonymous(self, resolver):
        assert resolver.resolve(None) is None

    def test_invalid_token_is_anonymous(self, resolver):
        assert resolver.resolve("Bearer forged") is None

    def test_valid_token_resolves_user(self, resolver, stub_tokens, user):
        token = stub_tokens.issue(str(user["_id"]))

        resolved = resolver.resolve(f"Bearer {token}")

        assert resolved is not None
        assert resolved["_id"] == user["_id"]

    def test_deleted_user_is_anonymous(self, resolver, stub_tokens, storage, user):
        token = stub_tokens.issue(str(user["_id"]))
        storage.users.delete(user["_id"])

        assert resolver.resolve(token) is None

    def test_expired_token_is_anonymous(self, storage, user, freeze_time):
        tokens = StubTokenProvider(ttl=timedelta(days=30))
        resolver = IdentityResolver(storage=storage, token_provider=tokens)
        with freeze_time("2024-01-01"):
            token = tokens.issue(str(user["_id"]))
        with freeze_time("2024-02-01"):
            assert resolver.resolve(token) is None

    def test_build_context_carries_storage_and_identity(self, resolver, stub_tokens, storage, user):
        token = stub_tokens.issue(str(user["_id"]))

        ctx = resolver.build_context(token, request_id="req-1")
        anon = resolver.build_context(None)

        assert ctx.storage is storage
        assert ctx.is_authenticated
        assert ctx.user_id == str(user["_id"])
        assert ctx.request_id == "req-1"
        assert not anon.is_authenticated
        assert anon.user_id is None
