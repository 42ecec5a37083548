# cli/menus/settings_menu.py

"""
Settings menu for the TeacherMate CLI.

Shows which backend is live and lets the teacher save or clear the remote database settings.
The return value of `run()` tells the navigation shell whether storage must be re-opened.
"""

from typing import cast

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from controllers.settings import SettingsController
from core.config import DEFAULT_DATABASE
from core.i18n import use_language
from storage.adapter import StorageAdapter


def run(storage: StorageAdapter, data_dir: str | None = None) -> bool:
    """
    Top-level loop with dispatch for the Settings menu.

    Returns:
        True if the saved settings changed and the shell should reload storage.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    lang = use_language()
    controller = SettingsController(storage, data_dir)

    while True:
        controller.refresh()
        display_status(controller)

        title = formatters.format_banner_text(lang.t("settings.title"))
        options = [
            (lang.t("settings.form.save"), save_config),
            (lang.t("settings.form.clear"), clear_config),
        ]

        menu_response = helpers.display_menu(title, options)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(controller)

            if controller.reload_requested:
                break

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    return controller.reload_requested


def display_status(controller: SettingsController) -> None:
    lang = use_language()

    print(f"\n{lang.t('settings.subtitle')}")
    print(f"{lang.t('settings.status.label')} {lang.t(f'settings.status.{controller.status}')}")

    saved = controller.saved_config
    if saved is not None:
        print(f"{lang.t('settings.form.uri')}: {saved.masked_uri}")
        print(f"{lang.t('settings.form.database')}: {saved.database}")


def save_config(controller: SettingsController) -> None:
    lang = use_language()

    uri = helpers.prompt_user_input_or_cancel(lang.t("settings.form.uri"))
    if uri is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    database = helpers.prompt_user_input_or_none(
        f"{lang.t('settings.form.database')} [{DEFAULT_DATABASE}]"
    )

    print(f"\n{lang.t('settings.warning')}")
    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    helpers.display_response(controller.save_config(cast(str, uri), database or ""))


def clear_config(controller: SettingsController) -> None:
    lang = use_language()

    print(f"\n{lang.t('settings.warning')}")
    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    helpers.display_response(controller.clear_config())
