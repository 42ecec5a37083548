# tests/test_controllers.py

from controllers.classes import ClassesController
from controllers.dashboard import DashboardController
from controllers.notes import NotesController
from controllers.resources import ResourcesController
from controllers.settings import SettingsController
from controllers.students import StudentsController
from core.config import RemoteConfig, load_saved_remote_config
from core.response import ErrorCode
from models.grade import GradeType
from models.intervention import InterventionStatus
from models.quick_note import NOTE_COLORS


def make_controller(cls, storage, *args):
    controller = cls(storage, *args)
    controller.refresh()
    return controller


# === dashboard ===


def test_dashboard_stats_from_seed(seeded_storage):
    dashboard = make_controller(DashboardController, seeded_storage)

    assert dashboard.stats == {"students": 2, "pending": 1, "notes": 1}
    assert [i.id for i in dashboard.recent_pending] == ["i1"]


def test_dashboard_lists_five_newest_pending(storage):
    students = make_controller(StudentsController, storage)
    students.add_student("Ana", "Ruiz")
    (ana,) = students.students

    for n in range(7):
        students.add_intervention(ana.id, "academic", f"Missed homework {n}")

    dashboard = make_controller(DashboardController, storage)

    assert dashboard.stats["pending"] == 7
    assert len(dashboard.recent_pending) == 5


# === students ===


def test_search_by_name_or_group_name(seeded_storage):
    students = make_controller(StudentsController, seeded_storage)

    students.search("eso b")

    assert {s.full_name for s in students.filtered_students} == {
        "Alex García",
        "María Lopez",
    }

    students.search("lopez")

    assert [s.full_name for s in students.filtered_students] == ["María Lopez"]


def test_add_student_requires_names(storage):
    students = make_controller(StudentsController, storage)

    response = students.add_student("", "Ruiz")

    assert not response.success
    assert response.error is ErrorCode.INVALID_FIELD_VALUE
    assert students.students == []


def test_update_student_sends_only_changed_fields(seeded_storage):
    students = make_controller(StudentsController, seeded_storage)

    response = students.update_student("s2", contact_info="maria@test.com")

    assert response.success
    assert students.find_student("s2").contact_info == "maria@test.com"
    assert students.find_student("s2").first_name == "María"


def test_delete_student_clears_selection(seeded_storage):
    students = make_controller(StudentsController, seeded_storage)
    students.select_student("s1")

    assert students.delete_student("s1").success
    assert students.selected_student is None
    assert students.find_student("s1") is None
    # history is kept
    assert students.interventions_for("s1")


def test_select_missing_student(storage):
    students = make_controller(StudentsController, storage)

    response = students.select_student("nope")

    assert response.error is ErrorCode.NOT_FOUND
    assert response.status_code == 404


def test_add_intervention_records_student_name(seeded_storage):
    students = make_controller(StudentsController, seeded_storage)

    response = students.add_intervention("s2", "family", "Call with parents.")

    assert response.success
    newest = students.interventions_for("s2")[0]
    assert newest.student_name == "María Lopez"
    assert newest.status is InterventionStatus.PENDING


def test_toggle_intervention_status(seeded_storage):
    students = make_controller(StudentsController, seeded_storage)

    response = students.toggle_intervention_status("i1")

    assert response.success
    assert response.record is InterventionStatus.RESOLVED
    assert not any(i.is_pending for i in students.interventions_for("s1"))

    students.toggle_intervention_status("i1")

    assert students.interventions_for("s1")[0].is_pending


def test_grades_tab_average_excludes_finals(seeded_storage):
    students = make_controller(StudentsController, seeded_storage)

    students.add_grade("s1", "c1", "Unit 1", "6", GradeType.EXAM)
    students.add_grade("s1", "c1", "Project", 8, GradeType.WORK)
    students.add_grade("s1", "c1", "Final", 1, GradeType.FINAL)

    assert len(students.grades_for("s1")) == 3
    assert students.student_average("s1") == 7.0


def test_add_grade_requires_class(seeded_storage):
    students = make_controller(StudentsController, seeded_storage)

    response = students.add_grade("s1", "", "Unit 1", 6)

    assert not response.success
    assert students.grades_for("s1") == []


def test_add_grade_out_of_range(seeded_storage):
    students = make_controller(StudentsController, seeded_storage)

    response = students.add_grade("s1", "c1", "Unit 1", 11)

    assert response.error is ErrorCode.INVALID_FIELD_VALUE


def test_update_and_delete_grade(seeded_storage):
    students = make_controller(StudentsController, seeded_storage)
    students.add_grade("s1", "c1", "Unit 1", 6)
    (grade,) = students.grades_for("s1")

    assert not students.update_grade(grade.id, grade=12).success
    assert students.grades_for("s1")[0].grade == 6.0

    assert students.update_grade(grade.id, grade="9,5").success
    assert students.grades_for("s1")[0].grade == 9.5

    assert students.delete_grade(grade.id).success
    assert students.grades_for("s1") == []


def test_follow_up_notes(seeded_storage):
    students = make_controller(StudentsController, seeded_storage)

    assert students.add_follow_up("s1", "Tutoring", "Weekly check-in agreed.").success
    (note,) = students.follow_ups_for("s1")
    assert note.title == "Tutoring"

    assert students.delete_follow_up(note.id).success
    assert students.follow_ups_for("s1") == []


# === classes ===


def test_new_class_roster_and_average(storage):
    classes = make_controller(ClassesController, storage)

    assert classes.add_class("3A - Math", "Math").success
    (class_group,) = classes.classes
    assert classes.roster_count(class_group.id) == 0

    assert classes.add_student_to_class(class_group.id, "Ana", "Ruiz").success
    assert classes.roster_count(class_group.id) == 1
    (ana,) = classes.roster(class_group.id)

    students = make_controller(StudentsController, storage)
    students.add_grade(ana.id, class_group.id, "Unit 1", 7.5, GradeType.EXAM)
    students.add_grade(ana.id, class_group.id, "Final", 3, GradeType.FINAL)

    classes.refresh()

    assert students.student_average(ana.id) == 7.5
    assert classes.class_average(class_group.id) == 7.5


def test_class_without_grades_has_no_average(seeded_storage):
    classes = make_controller(ClassesController, seeded_storage)

    assert classes.class_average("c1") is None


def test_enroll_existing_student_keeps_other_groups(seeded_storage):
    classes = make_controller(ClassesController, seeded_storage)
    classes.add_class("4B - Physics")
    physics = next(c for c in classes.classes if c.name == "4B - Physics")

    assert classes.enroll_student(physics.id, "s1").success

    students = make_controller(StudentsController, seeded_storage)
    assert students.find_student("s1").groups == ["c1", physics.id]
    assert [s.id for s in classes.students_not_in(physics.id)] == ["s2"]


def test_failed_enroll_leaves_roster_unchanged(seeded_storage, monkeypatch):
    classes = make_controller(ClassesController, seeded_storage)
    classes.add_class("4B - Physics")
    physics = next(c for c in classes.classes if c.name == "4B - Physics")

    def broken_update(collection, id, partial):
        raise ConnectionError("offline")

    monkeypatch.setattr(seeded_storage, "update", broken_update)

    response = classes.enroll_student(physics.id, "s1")

    assert response.error is ErrorCode.INTERNAL_ERROR
    assert classes.roster_count(physics.id) == 0
    assert classes.roster_count("c1") == 2


def test_delete_class(seeded_storage):
    classes = make_controller(ClassesController, seeded_storage)
    classes.select_class("c1")

    assert classes.delete_class("c1").success
    assert classes.find_class("c1") is None
    assert classes.selected_class is None


# === notes ===


def test_archived_note_never_returns(storage):
    notes = make_controller(NotesController, storage)
    notes.create_note("Call home", NOTE_COLORS["blue"])
    (note,) = notes.notes

    assert note.color_name == "blue"
    assert notes.archive_note(note.id).success
    assert notes.notes == []

    assert make_controller(NotesController, storage).notes == []


def test_create_note_rejects_blank_and_unknown_color(storage):
    notes = make_controller(NotesController, storage)

    assert notes.create_note("   ").error is ErrorCode.INVALID_FIELD_VALUE
    assert notes.create_note("Call home", "#000000").error is ErrorCode.INVALID_FIELD_VALUE
    assert notes.notes == []


# === resources ===


def test_resources_favorites_first_and_tags(storage):
    resources = make_controller(ResourcesController, storage)
    resources.add_resource("Past exams", "https://example.com/exams", "PDF, Exam")
    resources.add_resource("Fractions video", "https://example.com/video", "Video")

    video = next(r for r in resources.resources if r.title == "Fractions video")
    resources.toggle_favorite(video.id)

    assert [r.title for r in resources.resources] == ["Fractions video", "Past exams"]
    assert resources.find_resource(video.id).is_favorite
    past_exams = resources.resources[1]
    assert past_exams.tags == ["PDF", "Exam"]

    resources.search("pdf")

    assert [r.title for r in resources.resources] == ["Past exams"]


def test_delete_resource(seeded_storage):
    resources = make_controller(ResourcesController, seeded_storage)

    assert resources.delete_resource("r1").success
    assert resources.resources == []


def test_toggle_favorite_on_missing_resource(storage):
    resources = make_controller(ResourcesController, storage)

    assert resources.toggle_favorite("nope").error is ErrorCode.NOT_FOUND


# === settings ===


def test_save_and_clear_remote_settings(storage, data_dir):
    settings = make_controller(SettingsController, storage, data_dir)

    assert settings.saved_config is None
    assert not settings.save_config("  ").success
    assert not settings.reload_requested

    assert settings.save_config("mongodb://localhost:27017", "school").success
    assert settings.reload_requested
    assert settings.saved_config == RemoteConfig("mongodb://localhost:27017", "school")

    fresh = make_controller(SettingsController, storage, data_dir)

    assert fresh.clear_config().success
    assert fresh.reload_requested
    assert load_saved_remote_config(data_dir) is None


def test_clear_without_saved_settings_does_not_reload(storage, data_dir):
    settings = make_controller(SettingsController, storage, data_dir)

    assert settings.clear_config().success
    assert not settings.reload_requested
