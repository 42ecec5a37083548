# tests/test_grade.py

import pytest

from models.grade import Grade, GradeType, average_grade


def make_grade(value, grade_type=GradeType.EXAM):
    return Grade(
        student_id="s1",
        class_group_id="c1",
        title="Test",
        grade=value,
        type=grade_type,
    )


def test_grade_to_dict(sample_grade):
    data = sample_grade.to_dict()

    assert data["student_id"] == "s1"
    assert data["class_group_id"] == "c1"
    assert data["grade"] == 7.5
    assert data["type"] == "exam"
    assert data["date"] == "2025-03-10T12:00:00"


def test_grade_from_dict(sample_grade):
    grade = Grade.from_dict(sample_grade.to_dict())

    assert grade.id == "g1"
    assert grade.title == "Unit 1 exam"
    assert grade.type is GradeType.EXAM
    assert not grade.is_final


def test_grade_accepts_comma_decimal():
    assert make_grade("6,5").grade == 6.5


@pytest.mark.parametrize("value", [-0.1, 10.5, float("inf")])
def test_grade_out_of_range_is_rejected(value):
    with pytest.raises(ValueError):
        make_grade(value)


def test_grade_must_be_numeric():
    with pytest.raises(TypeError):
        make_grade("seven")


def test_grade_type_must_be_known():
    with pytest.raises(ValueError):
        make_grade(5, "quiz")


def test_average_excludes_final_grades():
    grades = [
        make_grade(6.0),
        make_grade(8.0, GradeType.WORK),
        make_grade(2.0, GradeType.FINAL),
    ]

    assert average_grade(grades) == 7.0


def test_average_rounds_to_one_decimal():
    grades = [make_grade(7.0), make_grade(7.5)]

    # 7.25 rounds half-up
    assert average_grade(grades) == 7.3


def test_average_of_only_finals_is_none():
    assert average_grade([make_grade(9.0, GradeType.FINAL)]) is None
    assert average_grade([]) is None


def test_average_rounds_half_up_without_float_drift():
    grades = [make_grade(0.35), make_grade(0.35), make_grade(0.35)]

    assert average_grade(grades) == 0.4
