# cli/main.py

"""
Navigation shell for the TeacherMate CLI.

Opens storage once per session, shows the sidebar menu (with the active page title and the
backend status in its header), toggles the display language, and dispatches to the page menus.
Every page visit builds a fresh controller, so switching pages always refetches.

When the Settings page saves or clears the remote settings, storage is re-opened before the
sidebar is shown again.
"""

import argparse
import logging
import os

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import (
    calendar_menu,
    classes_menu,
    dashboard_menu,
    notes_menu,
    resources_menu,
    settings_menu,
    students_menu,
)
from core.config import APP_NAME, OWNER_ID, get_data_dir
from core.i18n import LanguageContext, LanguageProvider
from core.logging_setup import setup_logging
from storage.adapter import StorageAdapter, open_storage

logger = logging.getLogger(__name__)


class Session:
    """Holds what outlives a single page visit: the data directory and the open storage."""

    def __init__(self, data_dir: str):
        self._data_dir = data_dir
        self._storage = open_storage(data_dir)
        self._active_page = "dashboard"

    @property
    def data_dir(self) -> str:
        return self._data_dir

    @property
    def storage(self) -> StorageAdapter:
        return self._storage

    @property
    def active_page(self) -> str:
        return self._active_page

    @active_page.setter
    def active_page(self, page: str) -> None:
        self._active_page = page

    def reload_storage(self) -> None:
        logger.info("Remote settings changed, re-opening storage")
        self._storage = open_storage(self._data_dir)


def run_cli(session: Session, lang: LanguageContext) -> None:
    """
    Top-level loop with dispatch for the sidebar menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    while True:
        title = format_header(session, lang)
        options = [
            (lang.t("sidebar.dashboard"), open_page("dashboard", dashboard_menu.run)),
            (lang.t("sidebar.students"), open_page("students", students_menu.run)),
            (lang.t("sidebar.classes"), open_page("classes", classes_menu.run)),
            (lang.t("sidebar.notes"), open_page("notes", notes_menu.run)),
            (lang.t("sidebar.resources"), open_page("resources", resources_menu.run)),
            (lang.t("sidebar.calendar"), open_page("calendar", calendar_menu.run)),
            (lang.t("sidebar.settings"), open_settings),
            (lang.t("app.toggle_language"), toggle_language),
        ]

        menu_response = helpers.display_menu(title, options, lang.t("common.exit"))

        if menu_response is MenuSignal.EXIT:
            exit_program(lang)

        elif callable(menu_response):
            menu_response(session, lang)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def format_header(session: Session, lang: LanguageContext) -> str:
    status = lang.t(f"app.status_{session.storage.status}")
    dev_mode = f" | {lang.t('sidebar.dev_mode')}" if not session.storage.is_connected else ""
    page_title = lang.t(f"sidebar.{session.active_page}")

    banner = formatters.format_banner_text(f"{APP_NAME} | {page_title}")

    return (
        f"{banner}\n"
        f"[{status}{dev_mode}] {lang.t('app.language_name')}\n"
        f"{lang.t('sidebar.session')} {OWNER_ID}"
    )


def open_page(page: str, run_page):
    def visit(session: Session, lang: LanguageContext) -> None:
        session.active_page = page
        logger.debug("Opening %s page", page)
        run_page(session.storage)

    return visit


def open_settings(session: Session, lang: LanguageContext) -> None:
    session.active_page = "settings"

    if settings_menu.run(session.storage, session.data_dir):
        session.reload_storage()


def toggle_language(session: Session, lang: LanguageContext) -> None:
    language = lang.toggle()
    logger.debug("Display language set to %s", language)


def exit_program(lang: LanguageContext):
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text(lang.t("common.exit"))
    print(f"\n{exit_banner}\n")

    raise SystemExit


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="teachermate", description=APP_NAME)
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="also write log records to the console",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="directory for the local store, saved settings and logs",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    data_dir = (
        os.path.abspath(os.path.expanduser(args.data_dir))
        if args.data_dir
        else get_data_dir()
    )

    setup_logging(data_dir, console=args.verbose)
    logger.info("Starting %s with data directory %s", APP_NAME, data_dir)

    session = Session(data_dir)

    with LanguageProvider() as lang:
        run_cli(session, lang)


if __name__ == "__main__":
    main()
