import logging
import uuid

from sqlalchemy import Uuid

from ..database import attach
from ..extensions import db

logger = logging.getLogger(__name__)

class Activity(db.Model):
    __tablename__ = "activities"
    id = db.Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = db.Column(db.String(128), nullable=False)
    ects = db.Column(db.Integer, nullable=False, default=0)
    teacher_id = db.Column(Uuid, db.ForeignKey("teachers.id"), nullable=False)

    teacher = db.relationship("Teacher", lazy="joined")

    def __init__(self, name, ects, **kwargs):
        super().__init__(name=name, ects=ects, **kwargs)
        if self.id is None:
            self.id = uuid.uuid4()

    def __str__(self):
        teacher = self.teacher if self.teacher is not None else ""
        return f"[{self.id}] {self.name} ({teacher})"

    def assign_teacher(self, session, teacher):
        # saving an already stored activity relinks it instead of inserting it twice
        self.teacher = attach(session, teacher)
        activity = attach(session, self)
        session.flush()
        logger.info("Activity %s assigned to teacher %s", activity.id, activity.teacher_id)
        return activity
