import logging
import pathlib
import random
import sys
from unittest.mock import MagicMock

SYS_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_PATH = SYS_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from class_roster.app import RosterApp
from class_roster.env_utils import read_env_file
from class_roster.localization import LocalizationManager
from class_roster.manager import RosterManager
from class_roster.storage import RosterStore


def _app(tmp_path, ui=None, cooldown=3, **kwargs):
    manager = RosterManager(
        RosterStore(tmp_path / "Classes"),
        logger=logging.getLogger("test.app"),
        rng=random.Random(0),
        cooldown=cooldown,
    )
    ui = ui or MagicMock()
    translator = LocalizationManager(i18n_file=str(tmp_path / "i18n.json"), language="en")
    app = RosterApp(manager, ui, translator, logger=logging.getLogger("test.app"), **kwargs)
    return app, manager, ui


def test_start_without_classes_asks_for_a_new_one(tmp_path):
    app, manager, ui = _app(tmp_path)
    ui.prompt_text.return_value = "1A"

    app.start()

    assert "No classes found!" in ui.prompt_text.call_args.args[0]
    assert manager.current_class == "1A"
    ui.show_roster.assert_called_with(manager.session)


def test_start_offers_saved_classes(tmp_path):
    app, manager, ui = _app(tmp_path)
    manager.import_from_text("2B", "Ala,+")
    manager.import_from_text("1A", "Bob,-")
    manager.session.clear()
    ui.choose_one.return_value = "2B"

    app.start()

    ui.choose_one.assert_called_once_with("Choose a class", ["1A", "2B"])
    assert manager.current_class == "2B"


def test_cancelled_prompt_changes_nothing(tmp_path):
    app, manager, ui = _app(tmp_path)
    manager.create_empty_roster("1A")
    ui.prompt_text.return_value = None

    app.add_student()

    assert manager.students == []
    ui.show_roster.assert_not_called()


def test_add_student_without_class_notifies(tmp_path):
    app, manager, ui = _app(tmp_path)

    app.add_student()

    ui.notify.assert_called_once_with("Error", "No class is selected. Choose a class first.")
    ui.prompt_text.assert_not_called()


def test_import_of_existing_class_is_reported(tmp_path):
    app, manager, ui = _app(tmp_path)
    manager.create_empty_roster("3A")
    source = tmp_path / "3A.txt"
    source.write_text("Ala,+\n", encoding="utf-8")

    app.import_class(str(source))

    title, message = ui.notify.call_args.args
    assert title == "Error"
    assert "3A" in message
    assert manager.students == []


def test_pick_announces_student_name(tmp_path):
    app, manager, ui = _app(tmp_path)
    manager.import_from_text("1A", "Ala,+")

    app.pick_student()

    ui.notify.assert_called_once_with("Picked student", "Ala")


def test_pick_reports_when_nobody_is_eligible(tmp_path):
    app, manager, ui = _app(tmp_path)
    manager.import_from_text("1A", "Ala,+")
    app.pick_student()
    ui.notify.reset_mock()

    app.pick_student()

    title, message = ui.notify.call_args.args
    assert title == "No students available"
    assert "3" in message


def test_pick_on_empty_class(tmp_path):
    app, manager, ui = _app(tmp_path)
    manager.create_empty_roster("1A")

    app.pick_student()

    ui.notify.assert_called_once_with("No students", "Add students to the class before drawing.")


def test_remove_student_through_menu_choice(tmp_path):
    app, manager, ui = _app(tmp_path)
    manager.import_from_text("1A", "Ala,+\nBob,-\nCela,+")
    ui.choose_one.return_value = "2. Bob"

    app.remove_student()

    assert [(s.student_number, s.name) for s in manager.students] == [(1, "Ala"), (2, "Cela")]


def test_mark_attendance(tmp_path):
    app, manager, ui = _app(tmp_path)
    manager.import_from_text("1A", "Ala,+")
    ui.choose_one.side_effect = ["1. Ala", "absent"]

    app.mark_attendance()

    assert manager.students[0].is_present is False


def test_delete_requires_confirmation(tmp_path):
    app, manager, ui = _app(tmp_path)
    manager.create_empty_roster("1A")
    ui.choose_one.return_value = None

    app.delete_class()
    assert manager.list_rosters() == {"1A"}

    ui.choose_one.return_value = "Delete the current class"
    app.delete_class()

    assert manager.list_rosters() == set()
    assert manager.current_class is None
    ui.notify.assert_called_with("Success", "Class '1A' was deleted.")


def test_lucky_number_is_announced(tmp_path):
    app, manager, ui = _app(tmp_path)
    manager.import_from_text("1A", "Ala,+")

    app.draw_lucky_number()

    ui.notify.assert_called_once_with("Class Roster", "Lucky number: 1")
    assert manager.session.lucky_number == 1


def test_change_language_is_remembered(tmp_path):
    env_file = tmp_path / ".env"
    app, manager, ui = _app(tmp_path, env_file=str(env_file))
    ui.choose_one.return_value = "Polski"

    app.change_language()

    assert app.t("menu_pick") == "Losuj ucznia"
    assert read_env_file(env_file)["LANGUAGE_PREFERENCE"] == "pl"


def test_run_dispatches_until_cancelled(tmp_path):
    app, manager, ui = _app(tmp_path)
    manager.create_empty_roster("1A")
    ui.choose_one.side_effect = ["Add a student", None]
    ui.prompt_text.return_value = "Ala"

    app.run()

    assert [s.name for s in manager.students] == ["Ala"]


def test_no_eligible_message_uses_manager_cooldown(tmp_path):
    app, manager, ui = _app(tmp_path, cooldown=5)
    manager.import_from_text("1A", "Ala,+")
    app.pick_student()

    app.pick_student()

    ui.notify.assert_called_with(
        "No students available",
        "Every available student was picked in the last 5 draws or holds the lucky number.",
    )
