import logging
import uuid

from sqlalchemy import Uuid

from ..database import attach
from ..extensions import db

logger = logging.getLogger(__name__)

APPRECIATIONS = {"X": 20, "TB": 16, "B": 12, "C": 8, "N": 4}


def appreciation_score(label):
    return APPRECIATIONS.get(label, 0)


class Evaluation(db.Model):
    __tablename__ = "evaluations"
    id = db.Column(Uuid, primary_key=True, default=uuid.uuid4)
    score = db.Column(db.Integer, nullable=False, default=0)
    student_id = db.Column(Uuid, db.ForeignKey("students.id"), nullable=False)
    activity_id = db.Column(Uuid, db.ForeignKey("activities.id"), nullable=False)

    student = db.relationship("Student", lazy="joined")
    activity = db.relationship("Activity", lazy="joined")

    def __init__(self, score=0, **kwargs):
        super().__init__(score=score, **kwargs)
        if self.id is None:
            self.id = uuid.uuid4()

    def __str__(self):
        name = self.activity.name if self.activity is not None else "?"
        return f"{name}: {self.score}/20"

    def set_score(self, score):
        self.score = score

    def set_appreciation(self, appreciation):
        self.score = appreciation_score(appreciation)

    def assign_infos(self, session, activity, student):
        activity = attach(session, activity)
        student = attach(session, student)
        self.activity = activity
        self.student = student
        evaluation = attach(session, self)
        session.flush()
        logger.info(
            "Evaluation %s saved for student %s in activity %s",
            evaluation.id, evaluation.student_id, evaluation.activity_id,
        )
        return evaluation
