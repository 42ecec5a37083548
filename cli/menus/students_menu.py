# cli/menus/students_menu.py

"""
Students menu for the TeacherMate CLI.

This module defines the full interface for the student roster, including:
- Searching students by name or class group
- Adding, editing and deleting students
- The per-student record tabs: interventions, grades and follow-up notes

All operations are routed through the `StudentsController`, which refetches after every change.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from controllers.students import StudentsController
from core.i18n import use_language
from core.utils import split_comma_list
from models.grade import GradeType
from models.intervention import InterventionType
from models.student import Student
from storage.adapter import StorageAdapter


def run(storage: StorageAdapter) -> None:
    """
    Top-level loop with dispatch for the Students menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    lang = use_language()
    controller = StudentsController(storage)

    while True:
        controller.refresh()
        display_roster(controller)

        title = formatters.format_banner_text(lang.t("students.title"))
        options = [
            (lang.t("students.search_placeholder"), search_students),
            (lang.t("students.select_prompt"), open_student),
            (lang.t("students.new_student"), add_student),
        ]

        menu_response = helpers.display_menu(title, options)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(controller)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def display_roster(controller: StudentsController) -> None:
    students = controller.filtered_students

    if controller.search_query:
        print(f"\n[{controller.search_query}]")

    helpers.display_empty_or_results(
        students,
        lambda s: model_formatters.format_student_oneline(s, controller.group_names(s)),
    )


def search_students(controller: StudentsController) -> None:
    query = helpers.prompt_user_input(
        f"{use_language().t('students.search_placeholder')} "
        f"{use_language().t('common.blank_to_skip')}"
    )
    controller.search(query)


def prompt_student_selection(controller: StudentsController) -> Student | None:
    return helpers.prompt_selection_from_list(
        controller.filtered_students,
        use_language().t("students.title"),
        lambda s: model_formatters.format_student_oneline(s, controller.group_names(s)),
    )


# === add and edit student ===


def add_student(controller: StudentsController) -> None:
    lang = use_language()

    first_name = helpers.prompt_user_input_or_cancel(lang.t("students.forms.first_name"))
    if first_name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    last_name = helpers.prompt_user_input_or_cancel(lang.t("students.forms.last_name"))
    if last_name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    groups = prompt_groups(controller)
    contact_info = helpers.prompt_user_input_or_none(lang.t("students.forms.contact"))
    special_needs = prompt_special_needs()

    response = controller.add_student(
        first_name=cast(str, first_name),
        last_name=cast(str, last_name),
        groups=groups,
        contact_info=contact_info or "",
        special_needs=special_needs,
    )

    helpers.display_response(response)


def prompt_groups(controller: StudentsController) -> list[str]:
    options = [(c.name, c.id) for c in controller.classes]

    if not options:
        return []

    return helpers.prompt_multiple_from_labels(
        use_language().t("students.forms.group"), options
    )


def prompt_special_needs() -> list[str]:
    lang = use_language()
    labels = lang.t("students.special_needs_options")
    options = [(label, key) for key, label in labels.items()]

    selected = helpers.prompt_multiple_from_labels(lang.t("students.forms.tags"), options)
    extra = helpers.prompt_user_input_or_none(lang.t("students.forms.add_tag"))

    return selected + split_comma_list(extra)


def edit_student(controller: StudentsController, student: Student) -> None:
    lang = use_language()
    changes = {}

    first_name = helpers.prompt_user_input_or_default(
        f"{lang.t('students.forms.first_name')} [{student.first_name}]"
    )
    if first_name is not MenuSignal.DEFAULT:
        changes["first_name"] = first_name

    last_name = helpers.prompt_user_input_or_default(
        f"{lang.t('students.forms.last_name')} [{student.last_name}]"
    )
    if last_name is not MenuSignal.DEFAULT:
        changes["last_name"] = last_name

    contact_info = helpers.prompt_user_input_or_default(
        f"{lang.t('students.forms.contact')} [{student.contact_info or '-'}]"
    )
    if contact_info is not MenuSignal.DEFAULT:
        changes["contact_info"] = contact_info

    if controller.classes and helpers.confirm_action(lang.t("students.forms.group")):
        changes["groups"] = prompt_groups(controller)

    if helpers.confirm_action(lang.t("students.forms.tags")):
        changes["special_needs"] = prompt_special_needs()

    if not changes:
        helpers.returning_without_changes()
        return

    helpers.display_response(controller.update_student(student.id, **changes))


def delete_student(controller: StudentsController, student: Student) -> bool:
    lang = use_language()

    helpers.caution_banner()
    print(f"{lang.t('students.delete_student')}: {student.full_name}")

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return False

    response = controller.delete_student(student.id)
    helpers.display_response(response)

    return response.success


# === student detail ===


def open_student(controller: StudentsController) -> None:
    student = prompt_student_selection(controller)

    if student is None:
        return

    response = controller.select_student(student.id)

    if not response.success:
        helpers.display_response_failure(response)
        return

    student_detail_menu(controller)


def student_detail_menu(controller: StudentsController) -> None:
    lang = use_language()

    while True:
        student = controller.selected_student

        if student is None:
            break

        print(f"\n{formatters.format_banner_text(student.full_name)}")
        print(
            model_formatters.format_student_multiline(
                student, controller.group_names(student)
            )
        )

        title = lang.t("students.select_prompt")
        options = [
            (lang.t("students.tabs.interventions"), interventions_tab),
            (lang.t("students.tabs.grades"), grades_tab),
            (lang.t("students.tabs.followup"), follow_up_tab),
            (lang.t("students.edit_student"), edit_student),
            (lang.t("students.delete_student"), delete_student),
        ]

        menu_response = helpers.display_menu(title, options, lang.t("students.back"))

        if menu_response is MenuSignal.EXIT:
            controller.clear_selection()
            break

        elif callable(menu_response):
            menu_response(controller, student)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


# === interventions tab ===


def interventions_tab(controller: StudentsController, student: Student) -> None:
    lang = use_language()

    while True:
        print(f"\n{formatters.format_banner_text(lang.t('students.history'))}")
        helpers.display_empty_or_results(
            controller.interventions_for(student.id),
            model_formatters.format_intervention_oneline,
            empty_message=lang.t("students.no_records"),
        )

        options = [
            (lang.t("students.add_intervention"), add_intervention),
            (lang.t("students.toggle_status"), toggle_intervention_status),
        ]

        menu_response = helpers.display_menu(
            lang.t("students.tabs.interventions"), options
        )

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(controller, student)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def add_intervention(controller: StudentsController, student: Student) -> None:
    lang = use_language()

    type_options = [
        (lang.t(f"students.types.{t.value}"), t) for t in InterventionType
    ]
    intervention_type = helpers.prompt_option_from_labels(
        lang.t("students.forms.type"), type_options
    )
    if intervention_type is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    description = helpers.prompt_user_input_or_cancel(
        f"{lang.t('students.forms.description')}: {lang.t('students.forms.desc_placeholder')}"
    )
    if description is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    response = controller.add_intervention(
        student.id, cast(InterventionType, intervention_type), cast(str, description)
    )
    helpers.display_response(response)


def toggle_intervention_status(
    controller: StudentsController, student: Student
) -> None:
    intervention = helpers.prompt_selection_from_list(
        controller.interventions_for(student.id),
        use_language().t("students.toggle_status"),
        model_formatters.format_intervention_oneline,
    )

    if intervention is None:
        return

    helpers.display_response(controller.toggle_intervention_status(intervention.id))


def find_student_and_add_intervention(storage: StorageAdapter) -> None:
    controller = StudentsController(storage)
    controller.refresh()

    student = prompt_student_selection(controller)

    if student is None:
        return

    add_intervention(controller, student)


# === grades tab ===


def grades_tab(controller: StudentsController, student: Student) -> None:
    lang = use_language()

    while True:
        print(f"\n{formatters.format_banner_text(lang.t('students.grades'))}")
        display_grades(controller, student)

        average = controller.student_average(student.id)
        average_str = f"{average:.1f}" if average is not None else "-"
        print(f"\n{lang.t('students.average')}: {average_str}")

        options = [
            (lang.t("students.add_grade"), add_grade),
            (lang.t("students.edit_grade"), edit_grade),
            (lang.t("students.delete_grade"), delete_grade),
        ]

        menu_response = helpers.display_menu(lang.t("students.tabs.grades"), options)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(controller, student)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def display_grades(controller: StudentsController, student: Student) -> None:
    helpers.display_empty_or_results(
        controller.grades_for(student.id),
        lambda g: model_formatters.format_grade_oneline(
            g, controller.class_name(g.class_group_id)
        ),
        empty_message=use_language().t("students.no_records"),
    )


def prompt_grade_type() -> GradeType | MenuSignal:
    lang = use_language()
    options = [(lang.t(f"students.grade_types.{t.value}"), t) for t in GradeType]

    return helpers.prompt_option_from_labels(lang.t("students.forms.grade_type"), options)


def add_grade(controller: StudentsController, student: Student) -> None:
    lang = use_language()

    class_options = [
        (controller.class_name(group_id), group_id)
        for group_id in student.groups
        if controller.class_name(group_id) is not None
    ]
    class_group_id = helpers.prompt_option_from_labels(
        lang.t("students.forms.group"), class_options
    )
    if class_group_id is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    title = helpers.prompt_user_input_or_cancel(lang.t("students.forms.exam_title"))
    if title is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    grade = helpers.prompt_user_input_or_cancel(lang.t("students.forms.grade_value"))
    if grade is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    grade_type = prompt_grade_type()
    if grade_type is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    response = controller.add_grade(
        student_id=student.id,
        class_group_id=cast(str, class_group_id),
        title=cast(str, title),
        grade=cast(str, grade),
        type=cast(GradeType, grade_type),
    )
    helpers.display_response(response)


def edit_grade(controller: StudentsController, student: Student) -> None:
    lang = use_language()

    grade = helpers.prompt_selection_from_list(
        controller.grades_for(student.id),
        lang.t("students.edit_grade"),
        lambda g: model_formatters.format_grade_oneline(
            g, controller.class_name(g.class_group_id)
        ),
    )
    if grade is None:
        return

    new_title = helpers.prompt_user_input_or_none(
        f"{lang.t('students.forms.exam_title')} [{grade.title}]"
    )
    new_value = helpers.prompt_user_input_or_none(
        f"{lang.t('students.forms.grade_value')} [{grade.grade}]"
    )
    new_type = None
    if helpers.confirm_action(lang.t("students.forms.grade_type")):
        selected = prompt_grade_type()
        new_type = None if selected is MenuSignal.CANCEL else selected

    if new_title is None and new_value is None and new_type is None:
        helpers.returning_without_changes()
        return

    response = controller.update_grade(
        grade.id, title=new_title, grade=new_value, type=new_type
    )
    helpers.display_response(response)


def delete_grade(controller: StudentsController, student: Student) -> None:
    lang = use_language()

    grade = helpers.prompt_selection_from_list(
        controller.grades_for(student.id),
        lang.t("students.delete_grade"),
        lambda g: model_formatters.format_grade_oneline(
            g, controller.class_name(g.class_group_id)
        ),
    )
    if grade is None:
        return

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    helpers.display_response(controller.delete_grade(grade.id))


# === follow-up tab ===


def follow_up_tab(controller: StudentsController, student: Student) -> None:
    lang = use_language()

    while True:
        print(f"\n{formatters.format_banner_text(lang.t('students.tabs.followup'))}")
        helpers.display_empty_or_results(
            controller.follow_ups_for(student.id),
            model_formatters.format_follow_up_multiline,
            empty_message=lang.t("students.no_records"),
        )

        options = [
            (lang.t("students.add_follow_up"), add_follow_up),
            (lang.t("students.delete_follow_up"), delete_follow_up),
        ]

        menu_response = helpers.display_menu(lang.t("students.tabs.followup"), options)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(controller, student)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def add_follow_up(controller: StudentsController, student: Student) -> None:
    lang = use_language()

    title = helpers.prompt_user_input_or_cancel(lang.t("students.forms.follow_up_title"))
    if title is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    content = helpers.prompt_user_input_or_cancel(
        lang.t("students.forms.follow_up_content")
    )
    if content is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    response = controller.add_follow_up(student.id, cast(str, title), cast(str, content))
    helpers.display_response(response)


def delete_follow_up(controller: StudentsController, student: Student) -> None:
    note = helpers.prompt_selection_from_list(
        controller.follow_ups_for(student.id),
        use_language().t("students.delete_follow_up"),
        model_formatters.format_follow_up_oneline,
    )
    if note is None:
        return

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    helpers.display_response(controller.delete_follow_up(note.id))
