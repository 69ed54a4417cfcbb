import pytest

from school.models import Activity, Evaluation, Student
from school.models.evaluation import appreciation_score
from school.models.people import format_average


def make_student(*grades):
    student = Student("Ana", "Pop")
    for name, ects, score in grades:
        evaluation = Evaluation(score)
        evaluation.activity = Activity(name, ects)
        student.evaluations.append(evaluation)
    return student


def test_average_is_credit_weighted():
    student = make_student(("A", 3, 15), ("B", 2, 10))

    assert student.average() == 13.0


def test_average_without_evaluations_is_zero():
    assert make_student().average() == 0


def test_average_with_only_zero_credit_is_zero():
    student = make_student(("A", 0, 18), ("B", 0, 4))

    assert student.average() == 0


def test_average_keeps_out_of_range_scores():
    student = make_student(("A", 1, -4), ("B", 1, 30))

    assert student.average() == 13.0


def test_average_non_integral():
    student = make_student(("A", 2, 15), ("B", 1, 10))

    assert student.average() == pytest.approx(40 / 3)


def test_bulletin_lines():
    student = make_student(("A", 3, 15), ("B", 2, 10))

    lines = student.bulletin().split("\n")

    assert lines == ["Bulletin de Ana Pop", "A: 15/20", "B: 10/20", "Moyenne: 13"]


def test_bulletin_keeps_evaluation_order():
    student = make_student(("Z", 1, 8), ("A", 1, 12))

    assert student.bulletin().split("\n")[1:3] == ["Z: 8/20", "A: 12/20"]


def test_empty_bulletin():
    assert make_student().bulletin() == "Bulletin de Ana Pop\nMoyenne: 0"


@pytest.mark.parametrize("value, expected", [(13.0, "13"), (0, "0"), (12.5, "12.5")])
def test_format_average(value, expected):
    assert format_average(value) == expected


@pytest.mark.parametrize(
    "label, score",
    [("X", 20), ("TB", 16), ("B", 12), ("C", 8), ("N", 4), ("??", 0), ("", 0), ("tb", 0)],
)
def test_set_appreciation(label, score):
    evaluation = Evaluation(11)

    evaluation.set_appreciation(label)

    assert evaluation.score == score
    assert appreciation_score(label) == score


def test_set_score():
    evaluation = Evaluation()

    evaluation.set_score(17)

    assert evaluation.score == 17
