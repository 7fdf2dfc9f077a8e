"""Integration tests for the Store database."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import IntegrityError

from coursecatalog.store import CourseStore, Database, InstanceStore


@pytest.fixture
def temp_db_path() -> Generator[str, None, None]:
    """Create a temporary database path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        path = f.name
    yield path
    Path(path).unlink(missing_ok=True)
    Path(f"{path}-wal").unlink(missing_ok=True)
    Path(f"{path}-shm").unlink(missing_ok=True)


@pytest.fixture
def file_database(temp_db_path: str) -> Generator[Database, None, None]:
    """Create a file-backed database instance with tables."""
    db = Database(temp_db_path)
    db.create_tables()
    yield db
    db.close()


@pytest.mark.integration
class TestDatabaseSetup:
    """Tests for database setup."""

    def test_database_creates_file(self, temp_db_path: str) -> None:
        db = Database(temp_db_path)
        db.create_tables()
        assert Path(temp_db_path).exists()
        db.close()

    def test_database_creates_tables(self, file_database: Database) -> None:
        tables = inspect(file_database.engine).get_table_names()
        assert "courses" in tables
        assert "course_prerequisites" in tables
        assert "course_instances" in tables

    def test_database_wal_mode(self, file_database: Database) -> None:
        with file_database.engine.connect() as conn:
            assert conn.execute(text("PRAGMA journal_mode")).scalar() == "wal"

    def test_foreign_keys_enabled(self, file_database: Database) -> None:
        with file_database.engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1


@pytest.mark.integration
class TestConstraints:
    """Uniqueness is enforced by the database itself."""

    def test_course_code_unique_in_schema(self, file_database: Database) -> None:
        with file_database.engine.begin() as conn:
            conn.execute(
                text(
                    "INSERT INTO courses (course_id, title, created_at) "
                    "VALUES ('CS101', 'Intro', CURRENT_TIMESTAMP)"
                )
            )
        with pytest.raises(IntegrityError), file_database.engine.begin() as conn:
            conn.execute(
                text(
                    "INSERT INTO courses (course_id, title, created_at) "
                    "VALUES ('CS101', 'Again', CURRENT_TIMESTAMP)"
                )
            )

    def test_instance_term_unique_in_schema(self, file_database: Database) -> None:
        CourseStore(file_database).create_course(course_id="CS101", title="Intro")
        instance = InstanceStore(file_database).create_instance("CS101", 2024, 1, "Dr. X")

        with pytest.raises(IntegrityError), file_database.engine.begin() as conn:
            conn.execute(
                text(
                    "INSERT INTO course_instances "
                    "(course_pk, course_id, year, semester, instructor, created_at) "
                    "VALUES (:pk, 'CS101', 2024, 1, 'Dr. Y', CURRENT_TIMESTAMP)"
                ),
                {"pk": instance.course.id},
            )

    def test_prerequisite_link_restricts_delete(self, file_database: Database) -> None:
        """A course still referenced as a prerequisite cannot be deleted."""
        store = CourseStore(file_database)
        base = store.create_course(course_id="CS101", title="Intro")
        store.create_course(course_id="CS201", title="Adv", prerequisite_ids=["CS101"])

        with pytest.raises(IntegrityError), file_database.engine.begin() as conn:
            conn.execute(text("DELETE FROM courses WHERE id = :id"), {"id": base.id})

        assert store.get_course_by_code("CS201").prerequisite_ids == ["CS101"]

    def test_transaction_rolls_back_on_error(self, file_database: Database) -> None:
        """Nothing written inside a failed transaction is kept."""
        store = CourseStore(file_database)

        with pytest.raises(RuntimeError), file_database.transaction() as session:
            session.execute(
                text(
                    "INSERT INTO courses (course_id, title, created_at) "
                    "VALUES ('TMP', 'Temp', CURRENT_TIMESTAMP)"
                )
            )
            raise RuntimeError("boom")

        assert store.list_courses() == []
