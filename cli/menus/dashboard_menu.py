# cli/menus/dashboard_menu.py

"""
Dashboard menu for the TeacherMate CLI.

Shows the headline counts and the most recent pending interventions, with quick actions that jump
into the Students and Notes menus.
"""

import cli.menu_helpers as helpers
import cli.menus.notes_menu as notes_menu
import cli.menus.students_menu as students_menu
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from controllers.dashboard import DashboardController
from core.i18n import use_language
from storage.adapter import StorageAdapter


def run(storage: StorageAdapter) -> None:
    """
    Top-level loop with dispatch for the Dashboard menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    lang = use_language()
    controller = DashboardController(storage)

    while True:
        controller.refresh()
        display_summary(controller)

        title = formatters.format_banner_text(lang.t("dashboard.quick_actions.title"))
        options = [
            (lang.t("dashboard.view_students"), students_menu.run),
            (
                lang.t("dashboard.quick_actions.new_intervention"),
                students_menu.find_student_and_add_intervention,
            ),
            (lang.t("dashboard.quick_actions.create_note"), notes_menu.add_note),
        ]

        menu_response = helpers.display_menu(title, options)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(storage)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def display_summary(controller: DashboardController) -> None:
    lang = use_language()
    stats = controller.stats

    print(f"\n{formatters.format_banner_text(lang.t('dashboard.hello'))}")
    print(lang.t("dashboard.summary"))

    print()
    for key in ("students", "pending", "notes"):
        print(f"  {lang.t(f'dashboard.stats.{key}'):<24} {stats[key]:>4}")

    print(f"\n{lang.t('dashboard.pending_title')}:")
    helpers.display_empty_or_results(
        controller.recent_pending,
        model_formatters.format_pending_intervention,
        empty_message=lang.t("dashboard.all_clear"),
    )
