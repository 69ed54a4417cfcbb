import logging
import re
import uuid

from sqlalchemy import Uuid, select
from sqlalchemy.orm import reconstructor, validates

from ..database import attach
from ..extensions import db

logger = logging.getLogger(__name__)

SALARY_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$", re.ASCII)
INT32_MAX = 2**31 - 1


def parse_salary(value):
    # anything that is not a non-negative 32-bit integer counts as 0
    if isinstance(value, bool):
        return 0
    if not isinstance(value, int):
        if value is None or not SALARY_PATTERN.match(str(value)):
            return 0
        value = int(str(value))
    return value if 0 <= value <= INT32_MAX else 0


def format_average(value):
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


class PersonMixin:
    id = db.Column(Uuid, primary_key=True, default=uuid.uuid4)
    firstname = db.Column(db.String(64), nullable=False)
    lastname = db.Column(db.String(64), nullable=False)

    @validates("id")
    def _validate_id(self, key, value):
        if self.id is not None and value != self.id:
            raise ValueError(f"{type(self).__name__} id cannot change once assigned")
        return value

    def add(self, session):
        person = attach(session, self)
        session.flush()
        logger.info("Saved %s %s", type(self).__name__, person.id)
        return person


class Student(PersonMixin, db.Model):
    __tablename__ = "students"

    def __init__(self, firstname, lastname, **kwargs):
        super().__init__(firstname=firstname, lastname=lastname, **kwargs)
        if self.id is None:
            self.id = uuid.uuid4()
        self.evaluations = []

    # filled only by load_evaluations()
    @reconstructor
    def _init_on_load(self):
        self.evaluations = []

    def __str__(self):
        return f"{self.firstname} {self.lastname}"

    def load_evaluations(self, session):
        from .evaluation import Evaluation

        rows = session.scalars(
            select(Evaluation).where(Evaluation.student_id == self.id)
        ).unique().all()
        self.evaluations = list(rows)
        logger.debug("Loaded %d evaluations for student %s", len(rows), self.id)
        return self.evaluations

    def average(self):
        total = 0
        ects = 0
        for evaluation in self.evaluations:
            activity = evaluation.activity
            if activity is None:
                continue
            total += evaluation.score * activity.ects
            ects += activity.ects
        return 0 if ects == 0 else total / ects

    def bulletin(self):
        lines = [f"Bulletin de {self}"]
        lines.extend(str(evaluation) for evaluation in self.evaluations)
        lines.append(f"Moyenne: {format_average(self.average())}")
        return "\n".join(lines)


class Teacher(PersonMixin, db.Model):
    __tablename__ = "teachers"
    salary = db.Column(db.Integer, nullable=False, default=0)

    def __init__(self, firstname, lastname, salary=0, **kwargs):
        super().__init__(firstname=firstname, lastname=lastname, salary=salary, **kwargs)
        if self.id is None:
            self.id = uuid.uuid4()
        self.activities = []

    # filled only by load_activities()
    @reconstructor
    def _init_on_load(self):
        self.activities = []

    @validates("salary")
    def _validate_salary(self, key, value):
        return parse_salary(value)

    def __str__(self):
        return f"{self.firstname} ({self.lastname} {self.salary})"

    def load_activities(self, session):
        from .course import Activity

        rows = session.scalars(
            select(Activity).where(Activity.teacher_id == self.id)
        ).unique().all()
        self.activities = list(rows)
        logger.debug("Loaded %d activities for teacher %s", len(rows), self.id)
        return self.activities
