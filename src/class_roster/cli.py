"""Command line entry point for Class Roster."""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from .app import RosterApp
from .config import Settings
from .console import RosterConsole
from .env_utils import load_env
from .errors import RosterError
from .localization import LocalizationManager
from .logger import debug_detail, logger, set_log_profile, step, success
from .manager import RosterManager
from .storage import RosterStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="class-roster",
        description="Keep class rosters, record attendance and pick students at random",
    )
    parser.add_argument("--dir", help="Directory holding the class .json files (sets ROSTER_DIR)")
    parser.add_argument("--import", dest="import_file", metavar="FILE",
                        help="Import a name,+/- text file as a new class before starting")
    parser.add_argument("--list", action="store_true", help="Print the saved classes and exit")
    parser.add_argument("--lang", choices=["en", "pl"], help="Interface language")
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_env(os.getenv("ENV_FILE", ".env"))
    args = build_parser().parse_args(argv)

    if args.debug:
        set_log_profile("debug")
    if args.dir:
        os.environ["ROSTER_DIR"] = args.dir

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    debug_detail(f"Rosters directory: {settings.roster_dir}")

    store = RosterStore(settings.roster_dir)
    if args.list:
        try:
            names = sorted(store.list_rosters())
        except RosterError as exc:
            logger.error("%s", exc)
            return 1
        for name in names:
            print(name)
        return 0

    translator = LocalizationManager(language=args.lang or settings.language)
    console = RosterConsole(translator=translator)
    manager = RosterManager(store, cooldown=settings.pick_cooldown)
    app = RosterApp(
        manager,
        console,
        translator,
        env_file=settings.env_file,
    )

    console.headline(translator.t("app_title"))
    if args.import_file:
        step(f"Importing {args.import_file}")
        app.import_class(args.import_file)
        if manager.current_class:
            success(f"Imported class '{manager.current_class}' ({len(manager.students)} students)")
    else:
        app.start()

    try:
        app.run()
    except KeyboardInterrupt:
        print()
    console.text_block(translator.t("goodbye"), tone="dim")
    return 0


if __name__ == "__main__":
    sys.exit(main())
