# cli/menus/classes_menu.py

"""
Classes menu for the TeacherMate CLI.

Lists class groups with their roster size and class average, and manages a selected class:
viewing its roster, adding a new student straight into it, and enrolling an existing student.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from controllers.classes import ClassesController
from core.i18n import use_language
from models.class_group import ClassGroup
from storage.adapter import StorageAdapter


def run(storage: StorageAdapter) -> None:
    """
    Top-level loop with dispatch for the Classes menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    lang = use_language()
    controller = ClassesController(storage)

    while True:
        controller.refresh()
        display_classes(controller)

        title = formatters.format_banner_text(lang.t("classes.title"))
        options = [
            (lang.t("classes.students_in_class"), open_class),
            (lang.t("classes.add_class"), add_class),
            (lang.t("classes.delete_class"), delete_class),
        ]

        menu_response = helpers.display_menu(title, options)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(controller)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def format_class(controller: ClassesController, class_group: ClassGroup) -> str:
    return model_formatters.format_class_oneline(
        class_group,
        controller.roster_count(class_group.id),
        controller.class_average(class_group.id),
    )


def display_classes(controller: ClassesController) -> None:
    helpers.display_empty_or_results(
        controller.classes,
        lambda c: format_class(controller, c),
        empty_message=use_language().t("classes.no_classes"),
    )


def prompt_class_selection(controller: ClassesController) -> ClassGroup | None:
    return helpers.prompt_selection_from_list(
        controller.classes,
        use_language().t("classes.title"),
        lambda c: format_class(controller, c),
    )


# === class crud ===


def add_class(controller: ClassesController) -> None:
    lang = use_language()

    name = helpers.prompt_user_input_or_cancel(lang.t("classes.forms.name"))
    if name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    subject = helpers.prompt_user_input_or_none(lang.t("classes.forms.subject"))

    helpers.display_response(controller.add_class(cast(str, name), subject or ""))


def delete_class(controller: ClassesController) -> None:
    class_group = prompt_class_selection(controller)

    if class_group is None:
        return

    helpers.caution_banner()
    print(f"{use_language().t('classes.delete_class')}: {class_group.name}")

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    helpers.display_response(controller.delete_class(class_group.id))


# === selected class ===


def open_class(controller: ClassesController) -> None:
    class_group = prompt_class_selection(controller)

    if class_group is None:
        return

    response = controller.select_class(class_group.id)

    if not response.success:
        helpers.display_response_failure(response)
        return

    class_detail_menu(controller)


def class_detail_menu(controller: ClassesController) -> None:
    lang = use_language()

    while True:
        class_group = controller.selected_class

        if class_group is None:
            break

        print(f"\n{formatters.format_banner_text(class_group.name)}")
        average = controller.class_average(class_group.id)
        average_str = (
            f"{average:.1f}" if average is not None else lang.t("classes.no_average")
        )
        print(f"{lang.t('classes.average')}: {average_str}")

        roster_count = controller.roster_count(class_group.id)
        print(f"\n{lang.t('classes.students_in_class')} ({roster_count}):")
        helpers.display_empty_or_results(
            controller.roster(class_group.id),
            lambda s: s.full_name,
        )

        options = [
            (lang.t("classes.add_student_to_class"), add_student_to_class),
            (lang.t("classes.enroll_existing"), enroll_existing_student),
        ]

        menu_response = helpers.display_menu(lang.t("classes.title"), options)

        if menu_response is MenuSignal.EXIT:
            controller.clear_selection()
            break

        elif callable(menu_response):
            menu_response(controller, class_group)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def add_student_to_class(controller: ClassesController, class_group: ClassGroup) -> None:
    lang = use_language()

    first_name = helpers.prompt_user_input_or_cancel(lang.t("students.forms.first_name"))
    if first_name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    last_name = helpers.prompt_user_input_or_cancel(lang.t("students.forms.last_name"))
    if last_name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    contact_info = helpers.prompt_user_input_or_none(lang.t("students.forms.contact"))

    response = controller.add_student_to_class(
        class_group.id,
        first_name=cast(str, first_name),
        last_name=cast(str, last_name),
        contact_info=contact_info or "",
    )
    helpers.display_response(response)


def enroll_existing_student(
    controller: ClassesController, class_group: ClassGroup
) -> None:
    student = helpers.prompt_selection_from_list(
        controller.students_not_in(class_group.id),
        use_language().t("classes.enroll_existing"),
        lambda s: s.full_name,
    )

    if student is None:
        return

    helpers.display_response(controller.enroll_student(class_group.id, student.id))
