"""Tests for app.services.records and app.services.accounts against in-memory SQLite."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.errors import ConflictError, StoreError
from app.models import Account, Base, User
from app.services.accounts import AccountStore
from app.services.records import RecordStore, is_adult


def _make_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autoflush=False)()


def _bob(age: int = 17) -> dict[str, object]:
    return {"name": "Bob", "email": "b@x.com", "age": age, "role": "user"}


class TestIsAdult(unittest.TestCase):
    def test_boundary(self) -> None:
        self.assertFalse(is_adult(0))
        self.assertFalse(is_adult(17))
        self.assertTrue(is_adult(18))
        self.assertTrue(is_adult(125))


class StoreTestCase(unittest.TestCase):
    """Two accounts (A and B) in a fresh database per test."""

    def setUp(self) -> None:
        self.session = _make_session()
        accounts = AccountStore(self.session)
        self.a = accounts.create("a@x.com", "hash-a")
        self.b = accounts.create("b@x.com", "hash-b")
        self.store_a = RecordStore(self.session, owner_id=self.a.id)
        self.store_b = RecordStore(self.session, owner_id=self.b.id)

    def tearDown(self) -> None:
        self.session.close()


class TestAccountStore(StoreTestCase):
    def test_find_by_email(self) -> None:
        accounts = AccountStore(self.session)
        self.assertEqual(accounts.find_by_email("a@x.com").id, self.a.id)
        self.assertIsNone(accounts.find_by_email("A@x.com"))

    def test_duplicate_email_is_conflict(self) -> None:
        accounts = AccountStore(self.session)
        with self.assertRaises(ConflictError):
            accounts.create("a@x.com", "other-hash")
        self.assertEqual(self.session.query(Account).filter(Account.email == "a@x.com").count(), 1)


class TestRecordStoreCreateAndUpdate(StoreTestCase):
    """adult always equals age >= 18 and owner_id is always the caller."""

    def test_create_stamps_owner_and_derives_adult(self) -> None:
        record = self.store_a.create({**_bob(17), "adult": True, "owner_id": self.b.id})
        self.assertEqual(record.owner_id, self.a.id)
        self.assertFalse(record.adult)

    def test_update_age_recomputes_adult(self) -> None:
        record = self.store_a.create(_bob(17))
        updated = self.store_a.update(record.id, {"age": 19})
        self.assertTrue(updated.adult)
        updated = self.store_a.update(record.id, {"age": 5})
        self.assertFalse(updated.adult)

    def test_update_without_age_keeps_adult(self) -> None:
        record = self.store_a.create(_bob(30))
        updated = self.store_a.update(record.id, {"name": "Robert", "adult": False})
        self.assertEqual(updated.name, "Robert")
        self.assertTrue(updated.adult)

    def test_update_missing_record(self) -> None:
        self.assertIsNone(self.store_a.update(999, {"age": 20}))


class TestRecordStoreOwnership(StoreTestCase):
    """A's records are invisible to B, exactly like missing ones."""

    def test_foreign_record_looks_missing(self) -> None:
        record = self.store_a.create(_bob())
        self.assertIsNone(self.store_b.find_first(record.id))
        self.assertIsNone(self.store_b.update(record.id, {"age": 40}))
        self.assertFalse(self.store_b.delete(record.id))
        self.assertEqual(self.store_a.find_first(record.id).age, 17)

    def test_find_many_is_owner_filtered(self) -> None:
        self.store_a.create(_bob())
        self.store_a.create(_bob(40))
        self.store_b.create(_bob(50))
        self.assertEqual([r.age for r in self.store_a.find_many()], [17, 40])
        self.assertEqual([r.age for r in self.store_b.find_many()], [50])

    def test_delete_own_record(self) -> None:
        record_id = self.store_a.create(_bob()).id
        self.assertTrue(self.store_a.delete(record_id))
        self.assertIsNone(self.store_a.find_first(record_id))
        self.assertFalse(self.store_a.delete(record_id))

    def test_delete_many_only_touches_caller(self) -> None:
        for age in (1, 2, 3):
            self.store_a.create(_bob(age))
        self.store_b.create(_bob(50))
        self.assertEqual(self.store_a.delete_many(), 3)
        self.assertEqual(self.store_a.find_many(), [])
        self.assertEqual(len(self.store_b.find_many()), 1)
        self.assertEqual(self.store_a.delete_many(), 0)

    def test_ownership_not_enforced(self) -> None:
        record = self.store_a.create(_bob())
        open_b = RecordStore(self.session, owner_id=self.b.id, enforce_ownership=False)
        self.assertEqual(open_b.find_first(record.id).id, record.id)
        self.assertEqual(open_b.create(_bob()).owner_id, self.b.id)
        self.assertEqual(open_b.delete_many(), 2)
        self.assertEqual(self.session.query(User).count(), 0)


class TestRecordStoreFailures(unittest.TestCase):
    """Database failures become StoreError and the session is rolled back."""

    def test_query_failure(self) -> None:
        session = MagicMock()
        session.query.side_effect = OperationalError("SELECT", {}, Exception("down"))
        with self.assertRaises(StoreError):
            RecordStore(session, owner_id=1).find_many()

    def test_refresh_failure_is_store_error(self) -> None:
        session = MagicMock()
        session.refresh.side_effect = OperationalError("SELECT", {}, Exception("down"))
        with self.assertRaises(StoreError):
            RecordStore(session, owner_id=1).create(_bob())
        with self.assertRaises(StoreError):
            AccountStore(session).create("a@x.com", "hash")
        self.assertEqual(session.rollback.call_count, 2)

    def test_commit_failure_rolls_back(self) -> None:
        session = MagicMock()
        session.commit.side_effect = OperationalError("INSERT", {}, Exception("down"))
        with self.assertRaises(StoreError):
            RecordStore(session, owner_id=1).create(_bob())
        session.rollback.assert_called_once()


if __name__ == "__main__":
    unittest.main()
