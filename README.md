# gradebook

Computes final grades for a class of students from plain-text records.
It prints a report sorted by name.

## Input

Records are separated by whitespace. Each record starts with a type
letter:

- `U name midterm final hw1 hw2 ...` for an undergraduate
- `G name midterm final thesis hw1 hw2 ...` for a graduate student

A record's homework list ends at the first token that does not begin
with a number. That token is normally the type letter of the next
record. If a record starts with any character other than `U` or `G`,
the rest of that line is skipped.

## Grading

The grade is `0.2 * midterm + 0.4 * final + 0.4 * median(homework)`.
A graduate student's grade is the lower of that value and the thesis
score. A student with no homework gets the message
`No homework entered!` in place of a grade.

## Usage

```console
$ printf 'U Bob 80 90 70 75 80\nG Ann 90 95 85 88 92 91\nU Carol 70 80\n' | gradebook
(G) Ann   85
(U) Bob   82
(U) Carol No homework entered!
```

`gradebook` reads records from standard input. It writes one line per
student, sorted by name. Each line gives:

- the record type,
- the name, padded to one space more than the longest name,
- the grade to three significant digits.

The command takes no options other than `--help`.

## Library use

```python
from gradebook.reader import InputReader
from gradebook.cli import read_records, format_report
from gradebook.median import median
from gradebook.grade import grade

records = read_records(InputReader("U Bob 80 90 70 75 80\nG Ann 90 95 85 88 92 91"))
print(format_report(records), end="")

median([3, 1, 2])        # 2
grade(80, 90, [70, 80])  # 82.0
grade(80, 90, 75)        # a single homework score is used as given
```

Modules:

- `gradebook.reader`: `InputReader`, which reads characters, words and numbers from text and skips whitespace, and `read_hw`, which reads a homework list.
- `gradebook.students`:
  - `Core`, an undergraduate record.
  - `Grad`, a graduate record with a thesis score.
  - `StudentInfo`, which holds either kind of record. It reads it after a type letter.
  - `compare` and `compare_grades`, which compare records by name and by grade.
- `gradebook.cli`: `read_records`, `format_report` and `main`.

`median` raises `ValueError` for an empty list, and so does `grade` when
given an empty homework list. `StudentInfo.name()` and
`StudentInfo.grade()` raise `RuntimeError` when no record has been read.

## Limitations

The command reads only standard input. It cannot be given a file name.
Records are not stored anywhere: each run reads, grades and prints them,
and that is all.