import logging

from sqlalchemy import select

from .database import coerce_id
from .exceptions import EntityNotFoundError
from .models import Activity, Evaluation, Student, Teacher
from .schemas import StudentPatch, TeacherPatch

logger = logging.getLogger(__name__)


def _load_all(session, model):
    return list(session.scalars(select(model)).unique().all())


def _load_by_id(session, model, entity_id):
    entity = session.get(model, coerce_id(entity_id))
    logger.debug("Lookup %s %s: %s", model.__name__, entity_id,
                 "found" if entity is not None else "missing")
    return entity


def _get_or_raise(session, model, entity_id):
    entity = _load_by_id(session, model, entity_id)
    if entity is None:
        raise EntityNotFoundError(model.__name__, entity_id)
    return entity


def _delete(session, model, entity_id):
    entity = _get_or_raise(session, model, entity_id)
    session.delete(entity)
    session.flush()
    logger.info("Deleted %s %s", model.__name__, entity_id)


def load_all_students(session):
    return _load_all(session, Student)


def load_all_teachers(session):
    return _load_all(session, Teacher)


def load_all_activities(session):
    return _load_all(session, Activity)


def load_all_evaluations(session):
    return _load_all(session, Evaluation)


def load_student_by_id(session, student_id):
    return _load_by_id(session, Student, student_id)


def load_teacher_by_id(session, teacher_id):
    return _load_by_id(session, Teacher, teacher_id)


def load_activity_by_id(session, activity_id):
    return _load_by_id(session, Activity, activity_id)


def load_evaluation_by_id(session, evaluation_id):
    return _load_by_id(session, Evaluation, evaluation_id)


def alter_student(session, student_id, changes):
    patch = StudentPatch.parse(changes)
    student = patch.apply(_get_or_raise(session, Student, student_id))
    session.flush()
    logger.info("Updated student %s: %s", student.id, sorted(patch.model_fields_set))
    return student


def alter_teacher(session, teacher_id, changes):
    # unparsable or negative salaries are stored as 0
    patch = TeacherPatch.parse(changes)
    teacher = patch.apply(_get_or_raise(session, Teacher, teacher_id))
    session.flush()
    logger.info("Updated teacher %s: %s", teacher.id, sorted(patch.model_fields_set))
    return teacher


def delete_student(session, student_id):
    _delete(session, Student, student_id)


def delete_teacher(session, teacher_id):
    _delete(session, Teacher, teacher_id)


def delete_activity(session, activity_id):
    _delete(session, Activity, activity_id)


def delete_evaluation(session, evaluation_id):
    _delete(session, Evaluation, evaluation_id)
