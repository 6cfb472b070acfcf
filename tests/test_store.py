"""Tests for the whole-document stores."""

import json

from crmpro.database.store import InMemoryStore, JsonFileStore
from crmpro.models.store_document import StoreDocument
from crmpro.models.user import User


class TestJsonFileStore:
    """Test JsonFileStore persistence."""

    def test_read_creates_empty_document(self, tmp_path):
        """First read creates the file and parent directory with empty lists."""
        path = tmp_path / "data" / "db.json"
        store = JsonFileStore(path)

        doc = store.read()

        assert doc.users == []
        assert doc.contacts == []
        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == {"users": [], "contacts": []}

    def test_write_then_read(self, tmp_path, sample_user_base):
        """Written users come back with camelCase keys on disk."""
        path = tmp_path / "db.json"
        store = JsonFileStore(path)
        doc = store.read()
        doc.users.append(User(**sample_user_base))
        store.write(doc)

        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw["users"][0]["email"] == "grace@example.com"
        assert "trialEndsAt" in raw["users"][0]
        assert raw["users"][0]["verificationToken"] is None

        reread = store.read()
        assert len(reread.users) == 1
        assert reread.users[0].id == sample_user_base["id"]
        assert reread.users[0].trial_ends_at == sample_user_base["trial_ends_at"]

    def test_non_ascii_is_preserved(self, tmp_path, sample_user_base):
        path = tmp_path / "db.json"
        store = JsonFileStore(path)
        store.write(StoreDocument(users=[User(**{**sample_user_base, "plan": "Başlangıç"})]))

        assert "Başlangıç" in path.read_text(encoding="utf-8")

    def test_unknown_fields_survive_rewrite(self, tmp_path):
        """Fields written by hand into the file are kept by a read/write cycle."""
        path = tmp_path / "db.json"
        path.write_text(json.dumps({
            "users": [{
                "id": "u1",
                "name": "Ada",
                "email": "ada@x.com",
                "company": "Acme",
                "plan": "Başlangıç",
                "verified": True,
                "verificationToken": None,
                "createdAt": "2024-01-01T00:00:00",
                "trialEndsAt": "2024-01-15T00:00:00",
                "referrer": "newsletter",
            }],
            "contacts": [],
        }), encoding="utf-8")
        store = JsonFileStore(path)

        store.write(store.read())

        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw["users"][0]["referrer"] == "newsletter"

    def test_last_writer_wins(self, tmp_path, sample_user_base):
        """Overlapping read-modify-write sequences do not merge."""
        store = JsonFileStore(tmp_path / "db.json")
        first = store.read()
        second = store.read()

        first.users.append(User(**{**sample_user_base, "id": "a", "email": "a@x.com"}))
        second.users.append(User(**{**sample_user_base, "id": "b", "email": "b@x.com"}))
        store.write(first)
        store.write(second)

        emails = [u.email for u in store.read().users]
        assert emails == ["b@x.com"]


class TestInMemoryStore:
    """Test the in-memory double."""

    def test_read_returns_independent_copies(self, sample_user_base):
        store = InMemoryStore()
        doc = store.read()
        doc.users.append(User(**sample_user_base))

        # Not written back, so nothing persisted
        assert store.read().users == []

    def test_write_replaces_document(self, sample_user_base):
        store = InMemoryStore()
        store.write(StoreDocument(users=[User(**sample_user_base)]))
        store.write(StoreDocument())

        assert store.read().users == []
