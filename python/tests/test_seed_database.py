import pytest

from scripts import seed_database as seed


class FakeCollection:
    def __init__(self):
        self.documents = [{"stale": True}]
        self.indexes = []

    def delete_many(self, query):
        assert query == {}
        self.documents = []

    def insert_many(self, documents):
        self.documents.extend(documents)

    def create_index(self, keys, unique=False):
        self.indexes.append((keys, unique))


class FakeDatabase(dict):
    name = "aiml_department"

    def __missing__(self, key):
        self[key] = FakeCollection()
        return self[key]


def test_seed_replaces_collections_and_indexes(content):
    db = FakeDatabase()

    counts = seed.seed_database(db, content)

    assert counts == {"faculty": 7, "courses": 8, "academic_calendar": 1, "infrastructure": 1}
    assert {"stale": True} not in db["faculty"].documents
    assert db["faculty"].indexes == [([("id", 1)], True)]
    assert db["courses"].indexes == [([("code", 1)], True)]
    assert db["academic_calendar"].indexes == [([("academicYear", 1)], True)]
    assert db["infrastructure"].indexes == [([("department", 1)], True)]


def test_seeded_documents_keep_fixture_field_names(content):
    db = FakeDatabase()
    seed.seed_database(db, content)

    calendar = db["academic_calendar"].documents[0]
    first_event = calendar["semesters"][0]["events"][0]
    assert set(first_event) == {"date", "event", "type"}
    assert db["courses"].documents[0]["code"] == "22AM3PCDSA"


def test_dry_run_does_not_connect(monkeypatch, capsys, data_dir):
    monkeypatch.setattr(seed, "MongoClient", lambda *a, **kw: pytest.fail("dry run must not connect"))

    assert seed.main(["--dry-run", "--data-dir", str(data_dir)]) == 0

    out = capsys.readouterr().out
    assert "faculty: 7" in out
    assert "courses: 8" in out
