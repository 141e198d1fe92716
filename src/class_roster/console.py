#!/usr/bin/env python3
"""
src/class_roster/console.py
Console rendering and prompts for the Class Roster CLI.
"""
from __future__ import annotations

import os
import shutil
import textwrap
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table, box

from .localization import LocalizationManager
from .session import RosterSession
from .students import Student

__all__ = ["RosterConsole", "ConsolePalette"]


@dataclass
class ConsolePalette:
    """ANSI palette that switches itself off when NO_COLOR is set."""

    reset: str = "\033[0m"
    bold: str = "\033[1m"
    dim: str = "\033[2m"
    blue: str = "\033[34m"
    magenta: str = "\033[35m"
    green: str = "\033[32m"
    yellow: str = "\033[33m"
    red: str = "\033[31m"
    white: str = "\033[97m"

    @property
    def disabled(self) -> bool:
        return bool(os.getenv("NO_COLOR"))

    def apply(self, text: str, *styles: str) -> str:
        if self.disabled or not styles:
            return text
        return f"{''.join(styles)}{text}{self.reset}"


class RosterConsole:
    """Terminal front-end: menus, prompts, messages and the roster table."""

    def __init__(
        self,
        *,
        input_func: Callable[[str], str] = input,
        rich_console: Optional[Console] = None,
        translator: Optional[LocalizationManager] = None,
    ) -> None:
        self.palette = ConsolePalette()
        self.width = max(60, min(shutil.get_terminal_size((100, 20)).columns, 110))
        self.translator = translator or LocalizationManager()
        self._input = input_func
        self._rich = rich_console or Console(no_color=self.palette.disabled)

    def _rule(self, label: str = "", *, accent: str = "blue", char: str = "═") -> str:
        label_text = f" {label} " if label else ""
        pad_total = max(self.width - len(label_text), 0)
        left = pad_total // 2
        line = f"{char * left}{label_text}{char * (pad_total - left)}"
        return self.palette.apply(line[: self.width], getattr(self.palette, accent, ""))

    def _wrap(self, text: str, *, indent: int = 0) -> str:
        wrapper = textwrap.TextWrapper(width=self.width - indent, initial_indent=" " * indent,
                                       subsequent_indent=" " * indent)
        return "\n".join(wrapper.fill(line) if line.strip() else "" for line in text.splitlines())

    def _print(self, text: str = "") -> None:
        print(text, file=self._rich.file, flush=True)

    # ------------------------------------------------------------------ prompts
    def prompt(self, prompt_text: str) -> Optional[str]:
        prompt = self.palette.apply(f"{prompt_text.strip()} ", self.palette.green, self.palette.bold)
        try:
            return self._input(prompt)
        except EOFError:
            return None

    def headline(self, title: str, *, accent: str = "blue") -> None:
        self._print(self._rule(title, accent=accent))

    def text_block(self, text: str, *, indent: int = 2, tone: Optional[str] = None) -> None:
        payload = self._wrap(text, indent=indent)
        if tone:
            payload = self.palette.apply(payload, getattr(self.palette, tone, ""))
        self._print(payload)

    def prompt_menu(self, title: str, options: Sequence[str]) -> Optional[int]:
        """Show numbered ``options``; return the chosen index or ``None`` for 0/EOF."""
        self.headline(title)
        for idx, label in enumerate(options, start=1):
            self._print(f" {idx}. {label}")
        self._print(self.palette.apply(f" 0. {self.translator.t('cancel')}", self.palette.dim))
        while True:
            raw = self.prompt("→")
            if raw is None or raw.strip() == "0":
                return None
            raw = raw.strip()
            if raw.isdigit() and 1 <= int(raw) <= len(options):
                return int(raw) - 1
            self._print(self.palette.apply("Invalid choice, try again.", self.palette.yellow))

    # ------------------------------------------------------------------ RosterUI
    def choose_one(self, title: str, options: Sequence[str]) -> Optional[str]:
        if not options:
            return None
        index = self.prompt_menu(title, options)
        return None if index is None else options[index]

    def prompt_text(self, message: str) -> Optional[str]:
        raw = self.prompt(f"{message}:")
        if raw is None or not raw.strip():
            return None
        return raw.strip()

    def notify(self, title: str, message: str) -> None:
        self._print(self._rule(title, accent="magenta"))
        self._print(self._wrap(message, indent=4))
        self._print(self._rule(accent="magenta"))

    # ------------------------------------------------------------------ rendering
    def build_roster_table(
        self,
        class_name: str,
        students: Iterable[Student],
        *,
        lucky_number: Optional[int] = None,
        present_label: str = "present",
        absent_label: str = "absent",
    ) -> Table:
        table = Table(title=class_name, box=box.SIMPLE_HEAVY, title_style="bold blue")
        table.add_column("#", justify="right", style="bold")
        table.add_column("Name")
        table.add_column("Attendance")
        table.add_column("Cooldown", justify="right", style="dim")
        for student in students:
            number = str(student.student_number)
            if lucky_number is not None and student.student_number == lucky_number:
                number = f"★ {number}"
            attendance = (
                f"[green]{present_label}[/green]" if student.is_present else f"[red]{absent_label}[/red]"
            )
            cooldown = str(student.times_since_last_picked) if student.times_since_last_picked else ""
            table.add_row(number, escape(student.name), attendance, cooldown)
        return table

    def render_roster(self, class_name: str, students: List[Student], **labels) -> None:
        self._rich.print(self.build_roster_table(class_name, students, **labels))

    def show_roster(self, session: RosterSession) -> None:
        if not session.has_roster:
            self.text_block("—", tone="dim")
            return
        self.render_roster(
            session.current_class,
            session.students,
            lucky_number=session.lucky_number,
            present_label=self.translator.t("present"),
            absent_label=self.translator.t("absent"),
        )
