import pytest

from config import TestConfig
from school import create_app
from school.database import session_scope
from school.extensions import db
from school.models import Activity, Evaluation, Student, Teacher


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def teacher(app):
    with session_scope() as session:
        return Teacher("Ion", "Popescu", 2500).add(session)


@pytest.fixture
def ana(app):
    # Ana Pop: 15 in A (3 ects), 10 in B (2 ects)
    teacher = Teacher("Ion", "Popescu", 2500)
    student = Student("Ana", "Pop")
    with session_scope() as session:
        a = Activity("A", 3).assign_teacher(session, teacher)
        b = Activity("B", 2).assign_teacher(session, teacher)
        Evaluation(15).assign_infos(session, a, student)
        Evaluation(10).assign_infos(session, b, student)
    return student
