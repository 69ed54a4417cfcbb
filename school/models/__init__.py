from .people import Student, Teacher
from .course import Activity
from .evaluation import Evaluation

__all__ = ["Student", "Teacher", "Activity", "Evaluation"]
