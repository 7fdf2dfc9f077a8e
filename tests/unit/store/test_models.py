"""Unit tests for Store models."""

from datetime import datetime

from coursecatalog.store.models import Course, CourseInstance, Semester


class TestSemesterEnum:
    """Tests for Semester enum."""

    def test_semester_values(self) -> None:
        """Winter is 1 and Fall is 2."""
        assert Semester.WINTER == 1
        assert Semester.FALL == 2
        assert len(Semester) == 2

    def test_display_name(self) -> None:
        assert Semester.WINTER.display_name == "Winter"
        assert Semester.FALL.display_name == "Fall"


class TestCourseModel:
    """Tests for Course model."""

    def test_course_defaults(self) -> None:
        """Description is optional and prerequisites start empty."""
        course = Course(course_id="CS101", title="Intro")

        assert course.course_id == "CS101"
        assert course.title == "Intro"
        assert course.description is None
        assert course.prerequisites == []
        assert isinstance(course.created_at, datetime)

    def test_prerequisite_ids(self) -> None:
        base = Course(course_id="CS101", title="Intro")
        course = Course(course_id="CS201", title="Advanced", prerequisites=[base])

        assert course.prerequisite_ids == ["CS101"]

    def test_course_repr(self) -> None:
        course = Course(course_id="CS101", title="Intro")

        assert "CS101" in repr(course)
        assert "Intro" in repr(course)


class TestCourseInstanceModel:
    """Tests for CourseInstance model."""

    def test_instance_copies_course_code(self) -> None:
        """The course business key is stored alongside the reference."""
        course = Course(course_id="CS101", title="Intro", description="Basics")
        instance = CourseInstance(course=course, year=2024, semester=1, instructor="Dr. X")

        assert instance.course is course
        assert instance.course_id == "CS101"
        assert instance.course_title == "Intro"
        assert instance.course_description == "Basics"

    def test_semester_name(self) -> None:
        course = Course(course_id="CS101", title="Intro")

        winter = CourseInstance(course=course, year=2024, semester=1, instructor="A")
        fall = CourseInstance(course=course, year=2024, semester=2, instructor="B")

        assert winter.semester_name == "Winter"
        assert fall.semester_name == "Fall"

    def test_semester_name_unknown(self) -> None:
        course = Course(course_id="CS101", title="Intro")
        instance = CourseInstance(course=course, year=2024, semester=7, instructor="A")

        assert instance.semester_name == "Semester 7"
