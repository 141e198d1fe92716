"""
src/class_roster/localization.py
Translated user interface strings.

English and Polish catalogues ship with the package. An ``i18n.json`` file
(``{"pl": {"key": "text"}}``) can override or extend them.
"""

import json
import logging
import os
from typing import Dict, Optional

LOGGER = logging.getLogger(__name__)

CATALOGUES: Dict[str, Dict[str, str]] = {
    "en": {
        "app_title": "Class Roster",
        "menu_title": "What would you like to do?",
        "menu_load": "Open a class",
        "menu_import": "Import a class from a text file",
        "menu_create": "Create a new class",
        "menu_add": "Add a student",
        "menu_remove": "Remove a student",
        "menu_presence": "Mark attendance",
        "menu_pick": "Pick a random student",
        "menu_lucky": "Draw the lucky number",
        "menu_export": "Show class as text",
        "menu_delete": "Delete the current class",
        "menu_language": "Change language",
        "cancel": "Cancel",
        "choose_class": "Choose a class",
        "no_classes": "No classes found!",
        "create_class": "Create a new class!",
        "class_name_prompt": "Enter the name of the new class",
        "import_path_prompt": "Path of the .txt file to import",
        "student_name_prompt": "Enter the student's name",
        "choose_student": "Choose a student",
        "presence_prompt": "Is {name} present?",
        "present": "present",
        "absent": "absent",
        "picked_title": "Picked student",
        "no_eligible_title": "No students available",
        "no_eligible_body": "Every available student was picked in the last {cooldown} draws or holds the lucky number.",
        "no_students_title": "No students",
        "no_students_body": "Add students to the class before drawing.",
        "lucky_number": "Lucky number: {number}",
        "no_class_selected": "No class is selected. Choose a class first.",
        "error_title": "Error",
        "success_title": "Success",
        "class_deleted": "Class '{name}' was deleted.",
        "confirm_delete": "Delete class '{name}' permanently?",
        "attendance_summary": "{present} present, {absent} absent, {total} in total",
        "language_set": "Language set to {language}.",
        "goodbye": "Goodbye!",
    },
    "pl": {
        "app_title": "Dziennik klasy",
        "menu_title": "Co chcesz zrobić?",
        "menu_load": "Otwórz klasę",
        "menu_import": "Wczytaj klasę z pliku tekstowego",
        "menu_create": "Utwórz nową klasę",
        "menu_add": "Dodaj ucznia",
        "menu_remove": "Usuń ucznia",
        "menu_presence": "Sprawdź obecność",
        "menu_pick": "Losuj ucznia",
        "menu_lucky": "Losuj szczęśliwy numerek",
        "menu_export": "Pokaż klasę jako tekst",
        "menu_delete": "Usuń bieżącą klasę",
        "menu_language": "Zmień język",
        "cancel": "Anuluj",
        "choose_class": "Wybierz klasę",
        "no_classes": "Nie znaleziono żadnej klasy!",
        "create_class": "Utwórz nową klasę!",
        "class_name_prompt": "Podaj nazwę nowej klasy",
        "import_path_prompt": "Ścieżka do pliku .txt",
        "student_name_prompt": "Podaj imię ucznia",
        "choose_student": "Wybierz ucznia",
        "presence_prompt": "Czy {name} jest obecny?",
        "present": "obecny",
        "absent": "nieobecny",
        "picked_title": "Wylosowany uczeń",
        "no_eligible_title": "Brak dostępnych uczniów",
        "no_eligible_body": "Wszyscy dostępni uczniowie zostali wybrani w ostatnich {cooldown} losowaniach lub mają taki sam numer szczęścia.",
        "no_students_title": "Brak uczniów",
        "no_students_body": "Dodaj uczniów do klasy przed losowaniem.",
        "lucky_number": "Szczęśliwy numerek: {number}",
        "no_class_selected": "Nie wybrano żadnej klasy, najpierw wybierz klasę.",
        "error_title": "Błąd",
        "success_title": "Sukces",
        "class_deleted": "Klasa '{name}' została pomyślnie usunięta.",
        "confirm_delete": "Czy na pewno usunąć klasę '{name}'?",
        "attendance_summary": "obecni: {present}, nieobecni: {absent}, razem: {total}",
        "language_set": "Ustawiono język: {language}.",
        "goodbye": "Do widzenia!",
    },
}

LANGUAGE_NAMES = {"en": "English", "pl": "Polski"}


class LocalizationManager:
    """Look up translated strings for the current language."""

    def __init__(self, i18n_file: str = "i18n.json", language: Optional[str] = None):
        self.i18n_file = i18n_file
        self.translations: Dict[str, Dict[str, str]] = {
            code: dict(entries) for code, entries in CATALOGUES.items()
        }
        self.load_overrides()
        self.current_language = language if language in self.translations else self.detect_language()

    def load_overrides(self) -> None:
        """Merge entries from the optional i18n file over the built-in ones."""
        if not os.path.exists(self.i18n_file):
            return
        try:
            with open(self.i18n_file, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, ValueError) as exc:
            LOGGER.warning("Could not load translations from %s: %s", self.i18n_file, exc)
            return
        if not isinstance(payload, dict):
            return
        for code, entries in payload.items():
            if isinstance(entries, dict):
                self.translations.setdefault(code, {}).update(
                    {str(key): str(value) for key, value in entries.items()}
                )

    def detect_language(self) -> str:
        lang = (os.getenv("LANG") or "").lower()
        if lang.startswith("pl"):
            return "pl"
        return "en"

    def set_language(self, language: str) -> bool:
        if language in self.translations:
            self.current_language = language
            return True
        return False

    def available_languages(self) -> Dict[str, str]:
        return {code: LANGUAGE_NAMES.get(code, code) for code in self.translations}

    def t(self, key: str, **params: object) -> str:
        """
        Return the string for ``key`` in the current language.

        Falls back to English, then to the key itself. Keyword arguments
        are substituted with :meth:`str.format`.
        """
        text = self.translations.get(self.current_language, {}).get(key)
        if text is None:
            text = self.translations.get("en", {}).get(key, key)
        return text.format(**params) if params else text
