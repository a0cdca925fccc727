"""Student records: undergraduates, graduates and a record holder."""

import copy
from typing import Optional

from .grade import grade as _grade
from .reader import InputReader, read_hw


class Core:
    """An undergraduate record: name, midterm, final and homework scores."""

    def __init__(self, reader: Optional[InputReader] = None) -> None:
        self.name = ""
        self.midterm = 0.0
        self.final = 0.0
        self.homework: list[float] = []
        if reader is not None:
            self.read(reader)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    def _read_common(self, reader: InputReader) -> None:
        name = reader.read_word()
        if name is not None:
            self.name = name
        midterm = reader.read_number()
        if midterm is not None:
            self.midterm = midterm
        final = reader.read_number()
        if final is not None:
            self.final = final

    def read(self, reader: InputReader) -> "Core":
        """Read name, midterm, final and homework from ``reader``."""
        self._read_common(reader)
        self.homework = read_hw(reader)
        return self

    def grade(self) -> float:
        """Final grade; raises ValueError when there is no homework."""
        return _grade(self.midterm, self.final, self.homework)


class Grad(Core):
    """A graduate record, which also carries a thesis score."""

    def __init__(self, reader: Optional[InputReader] = None) -> None:
        self.thesis = 0.0
        super().__init__(reader)

    def read(self, reader: InputReader) -> "Grad":
        """Read name, midterm, final, thesis and homework from ``reader``."""
        self._read_common(reader)
        thesis = reader.read_number()
        if thesis is not None:
            self.thesis = thesis
        self.homework = read_hw(reader)
        return self

    def grade(self) -> float:
        """The lower of the course grade and the thesis score."""
        return min(super().grade(), self.thesis)


def compare(c1: Core, c2: Core) -> bool:
    """True when ``c1`` sorts before ``c2`` by name."""
    return c1.name < c2.name


def compare_grades(c1: Core, c2: Core) -> bool:
    """True when ``c1`` has the lower grade."""
    return c1.grade() < c2.grade()


class StudentInfo:
    """Holds either an undergraduate or a graduate record."""

    def __init__(self, reader: Optional[InputReader] = None) -> None:
        self.record: Optional[Core] = None
        if reader is not None:
            self.read(reader)

    def __copy__(self) -> "StudentInfo":
        duplicate = StudentInfo()
        duplicate.record = copy.deepcopy(self.record)
        return duplicate

    def read(self, reader: InputReader) -> "StudentInfo":
        """Read a record type character ('U' for undergraduate) and the record."""
        kind = reader.read_char()
        self.record = Core(reader) if kind == "U" else Grad(reader)
        return self

    def _require(self) -> Core:
        if self.record is None:
            raise RuntimeError("Uninitialized student!")
        return self.record

    def name(self) -> str:
        """The student's name."""
        return self._require().name

    def grade(self) -> float:
        """The student's final grade."""
        return self._require().grade()

    @staticmethod
    def compare(s1: "StudentInfo", s2: "StudentInfo") -> bool:
        """True when ``s1`` sorts before ``s2`` by name."""
        return s1.name() < s2.name()