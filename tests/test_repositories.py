"""
Tests for the account-scoped repositories.

Tests cover:
- Round trip of add/find_by_id
- Account isolation for every operation
- Email uniqueness among non-removed contacts
- Partial update and soft/hard delete semantics
"""

from __future__ import annotations

import pytest

from mailshrimp_api.core.errors import ConstraintViolation
from mailshrimp_api.db.base import ResourceStatus
from mailshrimp_api.db.models import Contact
from mailshrimp_api.repositories import ContactRepository, MessageRepository

from .conftest import ACCOUNT_A, ACCOUNT_B

REMOVED = {"status": ResourceStatus.REMOVED.value}


@pytest.fixture
def contacts(session) -> ContactRepository:
    return ContactRepository(session)


@pytest.fixture
def messages(session) -> MessageRepository:
    return MessageRepository(session)


@pytest.fixture
async def jest(contacts):
    return await contacts.add(
        {"name": "Jest", "email": "jest@contacts.com", "phone": "22999626792"}, ACCOUNT_A
    )


async def test_add_then_find_round_trip(contacts, jest):
    found = await contacts.find_by_id(jest.id, ACCOUNT_A)

    assert found is not None
    assert found.id == jest.id
    assert found.name == "Jest"
    assert found.email == "jest@contacts.com"
    assert found.phone == "22999626792"
    assert found.account_id == ACCOUNT_A
    assert found.status == ResourceStatus.ACTIVE.value


async def test_add_ignores_account_and_status_in_values(contacts):
    row = await contacts.add(
        {"name": "X", "email": "x@x.com", "account_id": ACCOUNT_B, "status": "REMOVED"}, ACCOUNT_A
    )
    assert row.account_id == ACCOUNT_A
    assert row.status == ResourceStatus.ACTIVE.value


class TestIsolation:
    async def test_find_by_id_foreign_account(self, contacts, jest):
        assert await contacts.find_by_id(jest.id, ACCOUNT_B) is None

    async def test_find_all_foreign_account(self, contacts, jest):
        assert await contacts.find_all(ACCOUNT_B) == []
        assert [c.id for c in await contacts.find_all(ACCOUNT_A)] == [jest.id]

    async def test_set_foreign_account(self, contacts, jest):
        assert await contacts.set(jest.id, {"name": "Hijack"}, ACCOUNT_B) is None
        assert (await contacts.find_by_id(jest.id, ACCOUNT_A)).name == "Jest"

    async def test_remove_foreign_account(self, contacts, jest):
        assert await contacts.remove_by_id(jest.id, ACCOUNT_B) is False
        assert await contacts.find_by_id(jest.id, ACCOUNT_A) is not None

    async def test_same_email_in_other_account(self, contacts, jest):
        other = await contacts.add({"name": "Jest", "email": "jest@contacts.com"}, ACCOUNT_B)
        assert other.id != jest.id


class TestUniqueness:
    async def test_duplicate_email_rejected(self, contacts, jest):
        with pytest.raises(ConstraintViolation):
            await contacts.add({"name": "Jest3", "email": "jest@contacts.com"}, ACCOUNT_A)

    async def test_email_reusable_after_soft_delete(self, contacts, jest):
        await contacts.set(jest.id, REMOVED, ACCOUNT_A)

        again = await contacts.add({"name": "Jest3", "email": "jest@contacts.com"}, ACCOUNT_A)

        assert again.id != jest.id
        assert again.status == ResourceStatus.ACTIVE.value

    async def test_update_to_taken_email_rejected(self, contacts, jest):
        other = await contacts.add({"name": "Other", "email": "other@contacts.com"}, ACCOUNT_A)
        with pytest.raises(ConstraintViolation):
            await contacts.set(other.id, {"email": "jest@contacts.com"}, ACCOUNT_A)

    async def test_update_keeping_own_email(self, contacts, jest):
        row = await contacts.set(jest.id, {"email": "jest@contacts.com", "name": "Same"}, ACCOUNT_A)
        assert row.name == "Same"

    async def test_index_rejects_duplicate_written_directly(self, contacts, session, jest):
        jest_id = jest.id
        session.add(Contact(account_id=ACCOUNT_A, name="Dup", email="jest@contacts.com", status="ACTIVE"))

        with pytest.raises(ConstraintViolation) as excinfo:
            await contacts.commit()

        assert excinfo.value.error_type == "constraint_violation"
        assert [c.id for c in await contacts.find_all(ACCOUNT_A)] == [jest_id]

    async def test_index_ignores_removed_rows(self, contacts, session, jest):
        session.add(Contact(account_id=ACCOUNT_A, name="Old", email="jest@contacts.com", status="REMOVED"))

        await contacts.commit()

        assert len(await contacts.find_all(ACCOUNT_A, include_removed=True)) == 2


class TestSet:
    async def test_partial_update_changes_only_given_fields(self, contacts, jest):
        row = await contacts.set(jest.id, {"name": "X"}, ACCOUNT_A)

        assert row.name == "X"
        assert row.email == "jest@contacts.com"
        assert row.phone == "22999626792"
        assert row.status == ResourceStatus.ACTIVE.value

    async def test_account_cannot_be_overwritten(self, contacts, jest):
        row = await contacts.set(jest.id, {"account_id": ACCOUNT_B, "name": "Y"}, ACCOUNT_A)

        assert row.account_id == ACCOUNT_A
        assert await contacts.find_by_id(jest.id, ACCOUNT_B) is None

    async def test_missing_row(self, contacts):
        assert await contacts.set(-1, {"name": "X"}, ACCOUNT_A) is None

    async def test_removed_cannot_be_reactivated(self, contacts, jest):
        await contacts.set(jest.id, REMOVED, ACCOUNT_A)
        with pytest.raises(ValueError):
            await contacts.set(jest.id, {"status": ResourceStatus.ACTIVE.value}, ACCOUNT_A)


class TestDelete:
    async def test_soft_delete_hides_from_listing(self, contacts, jest):
        row = await contacts.set(jest.id, REMOVED, ACCOUNT_A)

        assert row.status == ResourceStatus.REMOVED.value
        assert await contacts.find_all(ACCOUNT_A) == []
        assert [c.id for c in await contacts.find_all(ACCOUNT_A, include_removed=True)] == [jest.id]
        # still addressable by id
        assert await contacts.find_by_id(jest.id, ACCOUNT_A) is not None

    async def test_hard_delete_twice(self, contacts, jest):
        assert await contacts.remove_by_id(jest.id, ACCOUNT_A) is True
        assert await contacts.remove_by_id(jest.id, ACCOUNT_A) is False
        assert await contacts.find_by_id(jest.id, ACCOUNT_A) is None

    async def test_hard_delete_after_soft_delete(self, contacts, jest):
        await contacts.set(jest.id, REMOVED, ACCOUNT_A)
        assert await contacts.remove_by_id(jest.id, ACCOUNT_A) is True
        assert await contacts.find_all(ACCOUNT_A, include_removed=True) == []

    async def test_remove_by_email(self, contacts, jest):
        await contacts.add({"name": "B", "email": "jest@contacts.com"}, ACCOUNT_B)

        assert await contacts.remove_by_email("jest@contacts.com", ACCOUNT_A) == 1
        assert await contacts.find_by_id(jest.id, ACCOUNT_A) is None
        assert len(await contacts.find_all(ACCOUNT_B)) == 1


class TestMessages:
    async def test_lifecycle(self, messages):
        row = await messages.add(
            {"account_email_id": 3, "subject": "assunto da mensagem", "body": "corpo da mensagem"},
            ACCOUNT_A,
        )
        assert row.id
        assert row.status == ResourceStatus.ACTIVE.value

        updated = await messages.set(row.id, {"subject": "Subject alterado"}, ACCOUNT_A)
        assert updated.subject == "Subject alterado"
        assert updated.body == "corpo da mensagem"

        assert await messages.find_by_id(row.id, ACCOUNT_B) is None
        removed = await messages.set(row.id, REMOVED, ACCOUNT_A)
        assert removed.status == ResourceStatus.REMOVED.value
        assert await messages.remove_by_id(row.id, ACCOUNT_A) is True

    async def test_duplicates_allowed(self, messages):
        values = {"account_email_id": 3, "subject": "s", "body": "b"}
        first = await messages.add(values, ACCOUNT_A)
        second = await messages.add(values, ACCOUNT_A)
        assert first.id != second.id
