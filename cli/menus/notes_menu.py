# cli/menus/notes_menu.py

"""
Quick Notes menu for the TeacherMate CLI: the sticky-note board with add and archive.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from controllers.notes import NotesController
from core.i18n import use_language
from models.quick_note import DEFAULT_NOTE_COLOR, NOTE_COLORS
from storage.adapter import StorageAdapter


def run(storage: StorageAdapter) -> None:
    """
    Top-level loop with dispatch for the Quick Notes menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    lang = use_language()
    controller = NotesController(storage)

    while True:
        controller.refresh()
        helpers.display_empty_or_results(
            controller.notes, model_formatters.format_note_oneline
        )

        title = formatters.format_banner_text(lang.t("notes.title"))
        options = [
            (lang.t("notes.new_note"), prompt_and_create_note),
            (lang.t("notes.archive"), archive_note),
        ]

        menu_response = helpers.display_menu(title, options)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(controller)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def prompt_and_create_note(controller: NotesController) -> None:
    lang = use_language()

    content = helpers.prompt_user_input_or_cancel(lang.t("notes.placeholder"))
    if content is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    color = helpers.prompt_option_from_labels(
        lang.t("notes.color"), [(name, hex_value) for name, hex_value in NOTE_COLORS.items()]
    )
    if color is MenuSignal.CANCEL:
        color = DEFAULT_NOTE_COLOR

    helpers.display_response(controller.create_note(cast(str, content), cast(str, color)))


def add_note(storage: StorageAdapter) -> None:
    """Entry point for the dashboard quick action."""
    controller = NotesController(storage)
    prompt_and_create_note(controller)


def archive_note(controller: NotesController) -> None:
    note = helpers.prompt_selection_from_list(
        controller.notes,
        use_language().t("notes.archive"),
        model_formatters.format_note_oneline,
    )

    if note is None:
        return

    helpers.display_response(controller.archive_note(note.id))
