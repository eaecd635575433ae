"""RecordStore: default on absent file, strict parsing, pretty JSON saves, directory errors."""
import json
from pathlib import Path

import pytest

from hone.core.exceptions import DirectoryError, IoError, ParseError, SerializeError
from hone.core.models import RecentFile, RecentFiles, SessionData
from hone.core.paths import fixed_dir
from hone.core.record_store import RecordStore


@pytest.fixture
def session_store(data_dir):
    return RecordStore(fixed_dir(data_dir), "session.json", SessionData)


@pytest.fixture
def recent_store(data_dir):
    return RecordStore(fixed_dir(data_dir), "recent_files.json", RecentFiles)


def test_resolve_path_creates_directory(session_store, data_dir):
    assert not data_dir.exists()
    path = session_store.resolve_path()
    assert data_dir.is_dir()
    assert path == data_dir / "session.json"


def test_load_absent_returns_default_without_creating_file(session_store, recent_store, data_dir):
    assert session_store.load() == SessionData(open_files=[], active_file=None)
    assert recent_store.load() == RecentFiles(files=[])
    assert not (data_dir / "session.json").exists()
    assert not (data_dir / "recent_files.json").exists()


def test_save_writes_pretty_json(recent_store, data_dir):
    doc = RecentFiles(files=[RecentFile(path="/tmp/ä.txt", name="ä.txt", accessed_at=12)])
    recent_store.save(doc)
    text = (data_dir / "recent_files.json").read_text(encoding="utf-8")
    assert json.loads(text) == {"files": [{"path": "/tmp/ä.txt", "name": "ä.txt", "accessed_at": 12}]}
    assert "\n  " in text
    assert "ä.txt" in text
    assert recent_store.load() == doc


def test_session_null_active_file_on_disk(session_store, data_dir):
    session_store.save(SessionData(open_files=["/x"], active_file=None))
    data = json.loads((data_dir / "session.json").read_text(encoding="utf-8"))
    assert data == {"open_files": ["/x"], "active_file": None}


def test_session_missing_active_file_key_is_none(session_store, data_dir):
    data_dir.mkdir(parents=True)
    (data_dir / "session.json").write_text('{"open_files": ["/a"]}', encoding="utf-8")
    assert session_store.load() == SessionData(open_files=["/a"], active_file=None)


def test_malformed_json_raises_parse_error(session_store, data_dir):
    data_dir.mkdir(parents=True)
    (data_dir / "session.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ParseError):
        session_store.load()


@pytest.mark.parametrize("payload", [
    "[]",
    '{"files": {}}',
    '{"files": [{"path": "/a", "name": "a"}]}',
    '{"files": [{"path": "/a", "name": "a", "accessed_at": -1}]}',
    '{"files": [{"path": "/a", "name": "a", "accessed_at": "soon"}]}',
])
def test_wrong_shape_raises_parse_error(recent_store, data_dir, payload):
    data_dir.mkdir(parents=True)
    (data_dir / "recent_files.json").write_text(payload, encoding="utf-8")
    with pytest.raises(ParseError):
        recent_store.load()


def test_unreadable_store_raises_io_error(session_store, data_dir):
    data_dir.mkdir(parents=True)
    (data_dir / "session.json").mkdir()
    with pytest.raises(IoError):
        session_store.load()


def test_unserializable_document_raises_serialize_error(session_store):
    with pytest.raises(SerializeError):
        session_store.save(SessionData(open_files=[object()], active_file=None))


def test_resolver_failure_raises_directory_error():
    def broken():
        raise RuntimeError("no home")

    store = RecordStore(broken, "session.json", SessionData)
    with pytest.raises(DirectoryError) as exc:
        store.load()
    assert "no home" in str(exc.value)


def test_resolver_returning_none_raises_directory_error():
    store = RecordStore(lambda: None, "session.json", SessionData)
    with pytest.raises(DirectoryError):
        store.save(SessionData())


def test_directory_blocked_by_file_raises_directory_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    store = RecordStore(fixed_dir(blocker / "sub"), "session.json", SessionData)
    with pytest.raises(DirectoryError):
        store.resolve_path()


def test_fixed_dir_accepts_str(tmp_path):
    assert fixed_dir(str(tmp_path))() == Path(tmp_path)
