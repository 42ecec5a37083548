# cli/menus/calendar_menu.py

"""
Calendar menu for the TeacherMate CLI.

The month grid shows, per day, how many events and interventions it holds. From here the teacher
can move between months, schedule an unscheduled quick note onto a day, and open a day to add,
move or delete its events.

Scheduling a note and deleting an event both go through the controller's drag session, the same
path a pointer drag would take: pick up, hover the target, drop.
"""

import datetime
from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from controllers.calendar import CalendarController
from core.i18n import use_language
from models.calendar_event import EventType
from storage.adapter import StorageAdapter


def run(storage: StorageAdapter) -> None:
    """
    Top-level loop with dispatch for the Calendar menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    lang = use_language()
    controller = CalendarController(storage)

    while True:
        controller.refresh()
        display_month(controller)

        title = formatters.format_banner_text(lang.t("calendar.title"))
        options = [
            (lang.t("calendar.prev_month"), lambda c: c.change_month(-1)),
            (lang.t("calendar.next_month"), lambda c: c.change_month(1)),
            (lang.t("calendar.today"), open_today),
            (lang.t("calendar.day_details"), open_day),
            (lang.t("calendar.schedule_note"), schedule_note),
        ]

        menu_response = helpers.display_menu(title, options)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(controller)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def display_month(controller: CalendarController) -> None:
    lang = use_language()
    month = controller.current_month

    print(
        "\n"
        + formatters.format_month_and_year(lang.month_name(month.month), month.year)
    )
    print(
        model_formatters.format_month_grid(
            controller.month_grid,
            controller.day_intensity,
            controller.today,
            controller.selected_day,
        )
    )

    print(f"\n{lang.t('calendar.unscheduled_notes')}:")
    helpers.display_empty_or_results(
        controller.unscheduled_notes, model_formatters.format_note_oneline
    )


def prompt_day_of_month(controller: CalendarController) -> datetime.date | None:
    lang = use_language()
    month = controller.current_month

    while True:
        raw = helpers.prompt_user_input_or_cancel(lang.t("calendar.day"))

        if raw is MenuSignal.CANCEL:
            return None

        try:
            return month.replace(day=int(cast(str, raw)))

        except ValueError:
            print(lang.t("common.invalid_selection"))


# === notes to events ===


def schedule_note(controller: CalendarController) -> None:
    lang = use_language()

    note = helpers.prompt_selection_from_list(
        controller.unscheduled_notes,
        lang.t("calendar.unscheduled_notes"),
        model_formatters.format_note_oneline,
    )
    if note is None:
        return

    day = prompt_day_of_month(controller)
    if day is None:
        helpers.returning_without_changes()
        return

    response = controller.start_drag_note(note.id)
    if not response.success:
        helpers.display_response_failure(response)
        return

    controller.hover_day(day)
    helpers.display_response(controller.drop())


# === day detail ===


def open_today(controller: CalendarController) -> None:
    controller.go_to_today()
    day_detail_menu(controller)


def open_day(controller: CalendarController) -> None:
    day = prompt_day_of_month(controller)

    if day is None:
        return

    controller.select_day(day)
    day_detail_menu(controller)


def day_detail_menu(controller: CalendarController) -> None:
    lang = use_language()

    while True:
        day = controller.selected_day

        if day is None:
            break

        heading = formatters.format_date_for_language(day, lang.language)
        print(f"\n{formatters.format_banner_text(heading)}")
        display_day(controller, day)

        options = [
            (lang.t("calendar.new_event"), add_event),
            (lang.t("calendar.actions.move"), move_event),
            (lang.t("calendar.actions.delete"), delete_event),
        ]

        menu_response = helpers.display_menu(lang.t("calendar.day_details"), options)

        if menu_response is MenuSignal.EXIT:
            controller.clear_selected_day()
            break

        elif callable(menu_response):
            menu_response(controller, day)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def display_day(controller: CalendarController, day: datetime.date) -> None:
    lang = use_language()

    helpers.display_empty_or_results(
        controller.events_on(day),
        model_formatters.format_event_oneline,
        empty_message=lang.t("calendar.no_events"),
    )

    interventions = controller.interventions_on(day)
    if interventions:
        print(f"\n{lang.t('students.tabs.interventions')}:")
        helpers.display_results(
            interventions, formatter=model_formatters.format_pending_intervention
        )


def add_event(controller: CalendarController, day: datetime.date) -> None:
    lang = use_language()

    title = helpers.prompt_user_input_or_cancel(lang.t("resources.forms.title"))
    if title is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    type_options = [(lang.t(f"calendar.types.{t.value}"), t) for t in EventType]
    event_type = helpers.prompt_option_from_labels(lang.t("students.forms.type"), type_options)
    if event_type is MenuSignal.CANCEL:
        event_type = EventType.GENERAL

    time_str = helpers.prompt_user_input_or_none(f"{lang.t('calendar.time')} (HH:MM)")

    response = controller.add_event(
        cast(str, title), cast(EventType, event_type), time_str, day=day
    )
    helpers.display_response(response)


def move_event(controller: CalendarController, day: datetime.date) -> None:
    lang = use_language()

    event = helpers.prompt_selection_from_list(
        controller.events_on(day),
        lang.t("calendar.actions.move"),
        model_formatters.format_event_oneline,
    )
    if event is None:
        return

    response = controller.start_editing(event.id)
    if not response.success:
        helpers.display_response_failure(response)
        return

    date_str = helpers.prompt_user_input_or_none(
        f"{lang.t('calendar.date')} [{controller.draft_date}]"
    )
    time_str = helpers.prompt_user_input_or_none(
        f"{lang.t('calendar.time')} [{controller.draft_time}]"
    )
    controller.set_draft(date_str, time_str)

    if not helpers.confirm_action(lang.t("calendar.actions.save")):
        controller.cancel_editing()
        helpers.returning_without_changes()
        return

    helpers.display_response(controller.save_edit())


def delete_event(controller: CalendarController, day: datetime.date) -> None:
    lang = use_language()

    event = helpers.prompt_selection_from_list(
        controller.events_on(day),
        lang.t("calendar.actions.delete"),
        model_formatters.format_event_oneline,
    )
    if event is None:
        return

    response = controller.start_drag_event(event.id)
    if not response.success:
        helpers.display_response_failure(response)
        return

    controller.hover_trash()
    response = controller.drop()

    if not response.success or not response.accepted:
        helpers.display_response(response)
        return

    helpers.caution_banner()
    print(lang.t("calendar.delete_title"))
    print(lang.t("calendar.delete_warning"))

    if not helpers.confirm_make_change():
        controller.cancel_delete()
        helpers.returning_without_changes()
        return

    helpers.display_response(controller.confirm_delete())
