import pathlib
import sys

SYS_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_PATH = SYS_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from class_roster.cli import main


def test_list_prints_saved_classes(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ROSTER_DIR", str(tmp_path / "unused"))
    classes = tmp_path / "Classes"
    classes.mkdir()
    (classes / "2B.json").write_text("[]", encoding="utf-8")
    (classes / "1A.json").write_text("[]", encoding="utf-8")

    exit_code = main(["--list", "--dir", str(classes)])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == ["1A", "2B"]


def test_invalid_cooldown_setting_exits_with_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ROSTER_DIR", str(tmp_path))
    monkeypatch.setenv("PICK_COOLDOWN", "soon")

    assert main(["--list"]) == 2
