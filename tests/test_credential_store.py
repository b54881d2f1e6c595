"""
Tests for the credential store and password hashing.
"""

import asyncio

import pytest

from auth.password import hash_password, verify_password
from auth.store import CredentialStore
from utils.errors import Conflict, InvalidInput


class TestPasswordHashing:
    def test_hash_is_salted(self):
        assert hash_password("hunter2", rounds=4) != hash_password("hunter2", rounds=4)

    def test_verify(self):
        hashed = hash_password("hunter2", rounds=4)
        assert verify_password("hunter2", hashed)
        assert not verify_password("hunter3", hashed)

    def test_default_cost_factor(self):
        assert hash_password("hunter2").startswith("$2b$10$")

    def test_malformed_hash_is_a_mismatch(self):
        assert verify_password("hunter2", "not-a-bcrypt-hash") is False


class TestRegister:
    @pytest.mark.asyncio
    async def test_stores_hash_not_plaintext(self, session):
        store = CredentialStore(session, rounds=4)
        user = await store.register("alice", "s3cret")
        assert user.password_hash != "s3cret"
        assert store.verify_password(user, "s3cret")
        assert not store.verify_password(user, "wrong")

    @pytest.mark.asyncio
    async def test_case_insensitive_conflict(self, session):
        store = CredentialStore(session, rounds=4)
        await store.register("Alice", "pw")
        with pytest.raises(Conflict):
            await store.register("alice", "other")
        with pytest.raises(Conflict):
            await store.register("ALICE", "other")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username,password", [("", "pw"), ("bob", ""), (None, "pw"), ("bob", None)])
    async def test_empty_fields_rejected(self, session, username, password):
        store = CredentialStore(session, rounds=4)
        with pytest.raises(InvalidInput):
            await store.register(username, password)

    @pytest.mark.asyncio
    async def test_concurrent_registrations_in_different_casing(self, session_factory):
        async def _register(name):
            async with session_factory() as s:
                return await CredentialStore(s, rounds=4).register(name, "pw")

        results = await asyncio.gather(
            _register("Carol"), _register("carol"), return_exceptions=True,
        )
        conflicts = [r for r in results if isinstance(r, Conflict)]
        assert len(conflicts) == 1
        assert len(results) - len(conflicts) == 1


class TestFindByUsername:
    @pytest.mark.asyncio
    async def test_lookup_ignores_case(self, session):
        store = CredentialStore(session, rounds=4)
        await store.register("Alice", "pw")
        found = await store.find_by_username("aLiCe")
        assert found is not None
        assert found.username == "Alice"

    @pytest.mark.asyncio
    async def test_lookup_is_exact_not_substring(self, session):
        store = CredentialStore(session, rounds=4)
        await store.register("Alice", "pw")
        assert await store.find_by_username("Ali") is None
        assert await store.find_by_username("Alice2") is None
        assert await store.find_by_username(".*") is None

    @pytest.mark.asyncio
    async def test_only_case_is_folded(self, session):
        store = CredentialStore(session, rounds=4)
        await store.register("Stra\u00dfe", "pw")
        # "STRASSE" differs by more than case, so it is a distinct user.
        await store.register("STRASSE", "pw")
        assert (await store.find_by_username("STRASSE")).username == "STRASSE"
        assert (await store.find_by_username("STRA\u00dfE")).username == "Stra\u00dfe"

    @pytest.mark.asyncio
    async def test_lookup_of_empty_name(self, session):
        assert await CredentialStore(session).find_by_username("") is None
