"""Interactive flows that connect user choices to roster operations."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Protocol, Sequence, Tuple

from .env_utils import set_env_value
from .errors import RosterError
from .localization import LocalizationManager
from .logger import get_logger
from .manager import NO_ELIGIBLE, NO_STUDENTS, RosterManager
from .session import RosterSession
from .students import Student


class RosterUI(Protocol):
    """What the application needs from a user interface."""

    def choose_one(self, title: str, options: Sequence[str]) -> Optional[str]:
        """Return the selected option, or ``None`` when cancelled."""

    def prompt_text(self, message: str) -> Optional[str]:
        """Return entered text, or ``None`` when cancelled."""

    def notify(self, title: str, message: str) -> None:
        """Show a message and wait for the user to acknowledge it."""

    def show_roster(self, session: RosterSession) -> None:
        """Redraw the active roster."""


class RosterApp:
    """Menu-driven controller around a :class:`RosterManager`."""

    def __init__(
        self,
        manager: RosterManager,
        ui: RosterUI,
        translator: Optional[LocalizationManager] = None,
        *,
        env_file: Optional[str] = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self.manager = manager
        self.ui = ui
        self.translator = translator or LocalizationManager()
        self._env_file = env_file
        self._logger = logger or get_logger("app")

    def t(self, key: str, **params: object) -> str:
        return self.translator.t(key, **params)

    @contextmanager
    def _reporting(self) -> Iterator[None]:
        try:
            yield
        except RosterError as exc:
            self._logger.warning("%s", exc)
            self.ui.notify(self.t("error_title"), str(exc))

    def _refresh(self) -> None:
        self.ui.show_roster(self.manager.session)

    def _has_class(self) -> bool:
        if self.manager.current_class:
            return True
        self.ui.notify(self.t("error_title"), self.t("no_class_selected"))
        return False

    def _choose_student(self) -> Optional[Student]:
        students = self.manager.students
        labels = [f"{s.student_number}. {s.name}" for s in students]
        choice = self.ui.choose_one(self.t("choose_student"), labels)
        if choice is None:
            return None
        return students[labels.index(choice)]

    # ------------------------------------------------------------------ flows
    def start(self) -> None:
        """Offer the saved classes, or ask for a new one when there are none."""
        with self._reporting():
            names = sorted(self.manager.list_rosters())
            if not names:
                self.create_class(self.t("no_classes"))
                return
            choice = self.ui.choose_one(self.t("choose_class"), names)
            if choice is not None:
                self.manager.load_roster(choice)
                self._refresh()

    def open_class(self) -> None:
        with self._reporting():
            names = sorted(self.manager.list_rosters())
            if not names:
                self.ui.notify(self.t("error_title"), self.t("no_classes"))
                return
            choice = self.ui.choose_one(self.t("choose_class"), names)
            if choice is not None:
                self.manager.load_roster(choice)
                self._refresh()

    def import_class(self, path: Optional[str] = None) -> None:
        path = path or self.ui.prompt_text(self.t("import_path_prompt"))
        if not path:
            return
        with self._reporting():
            self.manager.import_file(Path(path).expanduser())
            self._refresh()

    def create_class(self, message: Optional[str] = None) -> None:
        class_name = self.ui.prompt_text(f"{message or self.t('create_class')} {self.t('class_name_prompt')}")
        if not class_name:
            return
        with self._reporting():
            self.manager.create_empty_roster(class_name)
            self._refresh()

    def add_student(self) -> None:
        if not self._has_class():
            return
        name = self.ui.prompt_text(self.t("student_name_prompt"))
        if not name:
            return
        with self._reporting():
            self.manager.add_student(name)
            self._refresh()

    def remove_student(self) -> None:
        if not self._has_class():
            return
        student = self._choose_student()
        if student is None:
            return
        with self._reporting():
            self.manager.remove_student(student)
            self._refresh()

    def mark_attendance(self) -> None:
        if not self._has_class():
            return
        student = self._choose_student()
        if student is None:
            return
        present, absent = self.t("present"), self.t("absent")
        choice = self.ui.choose_one(self.t("presence_prompt", name=student.name), [present, absent])
        if choice is None:
            return
        with self._reporting():
            self.manager.set_presence(student, choice == present)
            self._refresh()

    def pick_student(self) -> None:
        if not self._has_class():
            return
        with self._reporting():
            result = self.manager.pick_random_student()
            if result.outcome == NO_STUDENTS:
                self.ui.notify(self.t("no_students_title"), self.t("no_students_body"))
            elif result.outcome == NO_ELIGIBLE:
                self.ui.notify(
                    self.t("no_eligible_title"),
                    self.t("no_eligible_body", cooldown=self.manager.cooldown),
                )
            else:
                self.ui.notify(self.t("picked_title"), result.student.name)
            self._refresh()

    def draw_lucky_number(self) -> None:
        if not self._has_class():
            return
        with self._reporting():
            number = self.manager.roll_lucky_number()
            self.ui.notify(self.t("app_title"), self.t("lucky_number", number=number))
            self._refresh()

    def show_text(self) -> None:
        if not self._has_class():
            return
        summary = self.manager.attendance_summary()
        body = self.manager.export_text()
        footer = self.t(
            "attendance_summary",
            present=summary.present,
            absent=summary.absent,
            total=summary.total,
        )
        self.ui.notify(self.manager.current_class, f"{body}\n\n{footer}" if body else footer)

    def delete_class(self) -> None:
        if not self._has_class():
            return
        target = self.manager.current_class
        confirm = self.t("menu_delete")
        if self.ui.choose_one(self.t("confirm_delete", name=target), [confirm]) != confirm:
            return
        with self._reporting():
            self.manager.delete_roster(target)
            self.ui.notify(self.t("success_title"), self.t("class_deleted", name=target))
            self._refresh()

    def change_language(self) -> None:
        languages = self.translator.available_languages()
        codes = list(languages)
        choice = self.ui.choose_one(self.t("menu_language"), [languages[code] for code in codes])
        if choice is None:
            return
        code = codes[list(languages.values()).index(choice)]
        self.translator.set_language(code)
        if self._env_file:
            try:
                set_env_value(self._env_file, "LANGUAGE_PREFERENCE", code)
            except OSError as exc:
                self._logger.warning("Could not remember language in %s: %s", self._env_file, exc)
        self.ui.notify(self.t("app_title"), self.t("language_set", language=choice))

    # ------------------------------------------------------------------ loop
    def menu(self) -> List[Tuple[str, Callable[[], None]]]:
        return [
            ("menu_load", self.open_class),
            ("menu_import", self.import_class),
            ("menu_create", self.create_class),
            ("menu_add", self.add_student),
            ("menu_remove", self.remove_student),
            ("menu_presence", self.mark_attendance),
            ("menu_pick", self.pick_student),
            ("menu_lucky", self.draw_lucky_number),
            ("menu_export", self.show_text),
            ("menu_delete", self.delete_class),
            ("menu_language", self.change_language),
        ]

    def run(self) -> None:
        """Process menu choices until the user cancels the menu."""
        while True:
            entries = self.menu()
            labels = [self.t(key) for key, _ in entries]
            choice = self.ui.choose_one(self.t("menu_title"), labels)
            if choice is None:
                return
            handler = entries[labels.index(choice)][1]
            handler()
