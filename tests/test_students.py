import copy

import pytest

from gradebook.reader import InputReader
from gradebook.students import Core, Grad, StudentInfo, compare, compare_grades


def test_core_reads_fields():
    core = Core(InputReader("alice 70 90 60 80"))
    assert core.name == "alice"
    assert core.midterm == 70.0
    assert core.final == 90.0
    assert core.homework == [60.0, 80.0]


def test_core_grade_with_equal_scores():
    assert Core(InputReader("alice 80 80 80 80")).grade() == pytest.approx(80.0)


def test_core_without_homework_raises():
    with pytest.raises(ValueError, match="No homework entered!"):
        Core(InputReader("carol 50 60")).grade()


def test_grad_reads_thesis_before_homework():
    grad = Grad(InputReader("bob 90 90 70 90 90"))
    assert grad.name == "bob"
    assert grad.thesis == 70.0
    assert grad.homework == [90.0, 90.0]


def test_grad_grade_capped_by_thesis():
    assert Grad(InputReader("bob 90 90 70 90 90")).grade() == pytest.approx(70.0)


def test_grad_grade_uses_course_grade_when_lower():
    assert Grad(InputReader("bob 60 60 100 60")).grade() == pytest.approx(60.0)


def test_compare_by_name():
    a = Core(InputReader("alice 1 1 1"))
    b = Core(InputReader("bob 1 1 1"))
    assert compare(a, b) is True
    assert compare(b, a) is False


def test_compare_grades():
    low = Core(InputReader("x 10 10 10"))
    high = Core(InputReader("y 90 90 90"))
    assert compare_grades(low, high) is True
    assert compare_grades(high, low) is False


def test_student_info_undergraduate():
    info = StudentInfo(InputReader("U alice 80 80 80"))
    assert info.name() == "alice"
    assert type(info.record) is Core
    assert info.grade() == pytest.approx(80.0)


def test_student_info_graduate():
    info = StudentInfo(InputReader("G bob 90 90 70 90"))
    assert isinstance(info.record, Grad)
    assert info.grade() == pytest.approx(70.0)


def test_uninitialized_student_raises():
    info = StudentInfo()
    with pytest.raises(RuntimeError, match="Uninitialized student!"):
        info.name()
    with pytest.raises(RuntimeError, match="Uninitialized student!"):
        info.grade()


def test_student_info_compare():
    a = StudentInfo(InputReader("U alice 1 1 1"))
    b = StudentInfo(InputReader("U bob 1 1 1"))
    assert StudentInfo.compare(a, b) is True
    assert StudentInfo.compare(b, a) is False


def test_copy_duplicates_record():
    original = StudentInfo(InputReader("G bob 90 90 70 90"))
    duplicate = copy.copy(original)
    assert duplicate.record is not original.record
    assert duplicate.name() == original.name()
    duplicate.record.name = "zed"
    assert original.name() == "bob"