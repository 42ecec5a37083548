# cli/model_formatters.py

# anything that renders domain objects for the menus
from textwrap import dedent

import core.formatters as formatters
from core.i18n import use_language
from models.calendar_event import CalendarEvent
from models.class_group import ClassGroup
from models.follow_up_note import FollowUpNote
from models.grade import Grade
from models.intervention import Intervention
from models.quick_note import QuickNote
from models.resource import Resource
from models.student import Student

# === student formatters ===


def format_special_needs(special_needs: list[str]) -> str:
    options = use_language().t("students.special_needs_options")
    # known tags are stored by key, free-text tags are stored as typed
    labels = [options.get(tag, tag) for tag in special_needs]
    return formatters.format_tag_list(labels)


def format_student_oneline(student: Student, group_names: list[str]) -> str:
    groups = ", ".join(group_names) if group_names else "-"
    flag = " *" if student.has_special_needs else ""

    return f"{student.full_name:<24} | {groups}{flag}"


def format_student_multiline(student: Student, group_names: list[str]) -> str:
    lang = use_language()

    return dedent(
        f"""\
        {student.full_name} ({student.initials})
        ... {lang.t('students.forms.group')}: {', '.join(group_names) or '-'}
        ... {lang.t('students.forms.contact')}: {student.contact_info or '-'}
        ... {lang.t('students.forms.tags')}: {format_special_needs(student.special_needs)}"""
    )


# === class formatters ===


def format_class_oneline(
    class_group: ClassGroup, roster_count: int, average: float | None
) -> str:
    lang = use_language()
    subject = f" ({class_group.subject})" if class_group.subject else ""
    average_str = f"{average:.1f}" if average is not None else lang.t("classes.no_average")

    return f"{class_group.name + subject:<28} | {roster_count:>3} | {average_str}"


# === record tab formatters ===


def format_intervention_oneline(intervention: Intervention) -> str:
    lang = use_language()
    date_str = formatters.format_date_for_language(intervention.date, lang.language)
    type_label = lang.t(f"students.types.{intervention.type.value}")
    status_label = lang.t(f"students.status.{intervention.status.value}")

    return f"{date_str} | {type_label:<12} | {status_label:<10} | {formatters.truncate(intervention.description)}"


def format_pending_intervention(intervention: Intervention) -> str:
    lang = use_language()
    type_label = lang.t(f"students.types.{intervention.type.value}")

    return f"{intervention.student_name:<20} | {type_label:<12} | {formatters.truncate(intervention.description)}"


def format_grade_oneline(grade: Grade, class_name: str | None) -> str:
    lang = use_language()
    date_str = formatters.format_date_for_language(grade.date, lang.language)
    type_label = lang.t(f"students.grade_types.{grade.type.value}")

    return f"{date_str} | {grade.title:<20} | {grade.grade:>4.1f} | {type_label} | {class_name or '-'}"


def format_follow_up_multiline(note: FollowUpNote) -> str:
    lang = use_language()
    date_str = formatters.format_date_for_language(note.date, lang.language)

    return f"{date_str} | {note.title}\n    {note.content}"


def format_follow_up_oneline(note: FollowUpNote) -> str:
    lang = use_language()
    date_str = formatters.format_date_for_language(note.date, lang.language)

    return f"{date_str} | {note.title}"


# === notes and resources ===


def format_note_oneline(note: QuickNote) -> str:
    return f"[{note.color_name:<6}] {formatters.truncate(note.content, 50)}"


def format_resource_oneline(resource: Resource) -> str:
    star = "*" if resource.is_favorite else " "
    category = f" [{resource.category}]" if resource.category else ""

    return f"{star} {resource.title}{category} <{resource.url}> {formatters.format_tag_list(resource.tags)}"


# === calendar ===


def format_event_oneline(event: CalendarEvent) -> str:
    lang = use_language()
    type_label = lang.t(f"calendar.types.{event.type.value}")
    linked = " (*)" if event.linked_note_id else ""

    return f"{event.time_str} | {type_label:<10} | {event.title}{linked}"


def format_month_grid(
    grid: list[list],
    intensity_fn,
    today,
    selected_day=None,
) -> str:
    """
    Renders the month as a text grid.

    Days with events or interventions show their count after the day number. Today is marked with
    "<" and the selected day with ">".
    """
    lang = use_language()
    header = " ".join(f"{name:>5}" for name in lang.day_names())
    lines = [header]

    for week in grid:
        cells = []
        for day in week:
            if day is None:
                cells.append("     ")
                continue

            count = intensity_fn(day)
            marker = ">" if day == selected_day else ("<" if day == today else " ")
            count_str = f"{count}" if count else " "
            cells.append(f"{marker}{day.day:>2}{count_str:<2}")
        lines.append(" ".join(cells))

    return "\n".join(lines)
