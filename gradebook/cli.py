"""Read student records and print a sorted grade report."""

import argparse
import sys
from collections.abc import Iterable
from typing import Optional

from .reader import InputReader
from .students import Core, Grad


def read_records(reader: InputReader) -> list[Core]:
    """Read 'U' and 'G' records; lines starting with anything else are skipped."""
    records: list[Core] = []
    while (kind := reader.read_char()) is not None:
        if kind not in ("U", "G"):
            reader.ignore_line()
            continue
        record = Core() if kind == "U" else Grad()
        record.read(reader)
        records.append(record)
    return records


def _format_grade(value: float) -> str:
    return f"{value:.3g}"


def format_report(records: Iterable[Core]) -> str:
    """One line per record, sorted by name, with names padded to a column."""
    ordered = sorted(records, key=lambda record: record.name)
    width = max((len(record.name) for record in ordered), default=0) + 1
    lines = []
    for record in ordered:
        tag = "(G) " if isinstance(record, Grad) else "(U) "
        try:
            result = _format_grade(record.grade())
        except ValueError as error:
            result = str(error)
        lines.append(f"{tag}{record.name.ljust(width)}{result}\n")
    return "".join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gradebook",
        description="Read student records from standard input and print final grades.",
    )
    parser.parse_args(argv)
    reader = InputReader(sys.stdin.read())
    sys.stdout.write(format_report(read_records(reader)))
    return 0


if __name__ == "__main__":
    sys.exit(main())