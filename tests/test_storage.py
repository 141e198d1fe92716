import json
import pathlib
import sys

import pytest

SYS_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_PATH = SYS_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from class_roster.errors import (
    CorruptRosterError,
    InvalidNameError,
    RosterIOError,
    RosterNotFoundError,
)
from class_roster.storage import RosterStore
from class_roster.students import Roster, Student


def test_list_rosters_creates_missing_directory(tmp_path):
    store = RosterStore(tmp_path / "nested" / "Classes")

    assert store.list_rosters() == set()
    assert (tmp_path / "nested" / "Classes").is_dir()


def test_list_rosters_returns_json_stems_only(tmp_path):
    (tmp_path / "3A.json").write_text("[]", encoding="utf-8")
    (tmp_path / "4B.JSON").write_text("[]", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("Ala,+", encoding="utf-8")
    (tmp_path / "archive.json").mkdir()

    assert RosterStore(tmp_path).list_rosters() == {"3A", "4B"}


def test_list_rosters_reports_unusable_directory(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(RosterIOError):
        RosterStore(blocker / "Classes").list_rosters()


def test_save_then_load_returns_equal_roster(tmp_path):
    store = RosterStore(tmp_path)
    roster = Roster(
        class_name="2C",
        students=[
            Student(1, "Łucja", True, 0),
            Student(2, "Bartek", False, 2),
        ],
    )

    store.save(roster)

    assert store.load("2C") == roster


def test_document_uses_camel_case_fields(tmp_path):
    store = RosterStore(tmp_path)
    store.save(Roster("1A", [Student(1, "Ala", True, 0)]))

    payload = json.loads((tmp_path / "1A.json").read_text(encoding="utf-8"))

    assert payload == [{"studentNumber": 1, "name": "Ala", "isPresent": True, "timesSinceLastPicked": 0}]


def test_load_missing_roster(tmp_path):
    with pytest.raises(RosterNotFoundError):
        RosterStore(tmp_path).load("ghost")


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        '{"studentNumber": 1}',
        '[{"name": "Ala", "isPresent": true}]',
        '[{"studentNumber": 1, "name": "Ala"}]',
        '[{"studentNumber": "1", "name": "Ala", "isPresent": true}]',
        '[{"studentNumber": 1, "name": "Ala", "isPresent": "yes"}]',
        '["Ala"]',
    ],
)
def test_load_rejects_undecodable_documents(tmp_path, content):
    (tmp_path / "bad.json").write_text(content, encoding="utf-8")

    with pytest.raises(CorruptRosterError):
        RosterStore(tmp_path).load("bad")


def test_missing_cooldown_defaults_to_zero(tmp_path):
    (tmp_path / "old.json").write_text(
        '[{"studentNumber": 1, "name": "Ala", "isPresent": false}]', encoding="utf-8"
    )

    roster = RosterStore(tmp_path).load("old")

    assert roster.students == [Student(1, "Ala", False, 0)]


def test_delete_removes_document(tmp_path):
    store = RosterStore(tmp_path)
    store.save(Roster("1A"))

    store.delete("1A")

    assert not (tmp_path / "1A.json").exists()
    with pytest.raises(RosterNotFoundError):
        store.delete("1A")


@pytest.mark.parametrize("name", ["", "   ", "../escape", "a/b", ".hidden"])
def test_unusable_class_names(tmp_path, name):
    with pytest.raises(InvalidNameError):
        RosterStore(tmp_path).path_for(name)
