# models/types.py

"""
Holds the RecordType TypeVar shared by the page controllers.
"""

from typing import TypeVar

from .calendar_event import CalendarEvent
from .class_group import ClassGroup
from .follow_up_note import FollowUpNote
from .grade import Grade
from .intervention import Intervention
from .quick_note import QuickNote
from .resource import Resource
from .student import Student

RecordType = TypeVar(
    "RecordType",
    Student,
    ClassGroup,
    Grade,
    Intervention,
    FollowUpNote,
    Resource,
    QuickNote,
    CalendarEvent,
)
