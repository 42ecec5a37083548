# tests/test_student.py

import pytest

from models.student import Student


def test_student_to_dict(sample_student):
    data = sample_student.to_dict()

    assert data["id"] == "s1"
    assert data["first_name"] == "Alex"
    assert data["last_name"] == "García"
    assert data["contact_info"] == "madre@test.com"
    assert data["special_needs"] == ["adhd"]
    assert data["groups"] == ["c1"]
    assert isinstance(data["created_at"], str)


def test_student_from_dict():
    student = Student.from_dict(
        {
            "id": "s2",
            "owner_id": "profe_master_dev",
            "first_name": "María",
            "last_name": "Lopez",
            "contact_info": "600123456",
            "special_needs": [],
            "groups": ["c1", "c2"],
            "created_at": "2025-03-10T08:00:00",
        }
    )

    assert student.id == "s2"
    assert student.owner_id == "profe_master_dev"
    assert student.full_name == "María Lopez"
    assert student.initials == "ML"
    assert not student.has_special_needs
    assert student.belongs_to("c2")
    assert student.created_at.year == 2025


def test_student_names_are_required():
    with pytest.raises(ValueError):
        Student(first_name="  ", last_name="Ruiz")

    with pytest.raises(TypeError):
        Student(first_name=None, last_name="Ruiz")


def test_student_names_are_stripped():
    student = Student(first_name="  Ana ", last_name=" Ruiz")

    assert student.full_name == "Ana Ruiz"


def test_join_and_leave_group(sample_student):
    sample_student.join_group("c2")
    sample_student.join_group("c2")

    assert sample_student.groups == ["c1", "c2"]

    sample_student.leave_group("c1")

    assert sample_student.groups == ["c2"]
    assert not sample_student.belongs_to("c1")


def test_groups_setter_removes_duplicates(sample_student):
    sample_student.groups = ["c3", "c1", "c3"]

    assert sample_student.groups == ["c3", "c1"]
