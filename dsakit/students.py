"""Sequential file of fixed-size student records with soft deletion."""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

DELETED_ROLL = -1
_TEXT_FIELD = 10
_RECORD = struct.Struct(f"<i{_TEXT_FIELD}sc{_TEXT_FIELD}s3x")


@dataclass(frozen=True)
class Student:
    roll: int
    name: str
    division: str
    address: str


def _encode_text(value: str, field: str) -> bytes:
    data = value.encode()
    if b"\0" in data or len(data) >= _TEXT_FIELD:
        raise ValueError(f"{field} must be under {_TEXT_FIELD} bytes: {value!r}")
    return data


def _decode_text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode(errors="replace")


def _pack(student: Student) -> bytes:
    division = student.division.encode()
    if len(division) != 1:
        raise ValueError(f"division must be a single character: {student.division!r}")
    return _RECORD.pack(
        student.roll,
        _encode_text(student.name, "name"),
        division,
        _encode_text(student.address, "address"),
    )


_TOMBSTONE = Student(DELETED_ROLL, "NULL", "N", "NULL")


class StudentFile:
    """Student records stored one after another in a binary file."""

    def __init__(self, path) -> None:
        self.path = Path(path)

    def create(self, students: Iterable[Student]) -> None:
        """Replace the file with the given records."""
        data = b"".join(_pack(student) for student in students)
        self.path.write_bytes(data)

    def _all(self) -> list[Student]:
        if not self.path.exists():
            return []
        data = self.path.read_bytes()
        whole = len(data) - len(data) % _RECORD.size
        return [
            Student(roll, _decode_text(name), division.decode(errors="replace"), _decode_text(address))
            for roll, name, division, address in _RECORD.iter_unpack(data[:whole])
        ]

    def records(self) -> list[Student]:
        """Records not marked as deleted, in file order."""
        return [student for student in self._all() if student.roll != DELETED_ROLL]

    def _locate(self, roll: int) -> tuple[int, Student]:
        for position, student in enumerate(self._all()):
            if student.roll == roll:
                return position, student
        raise KeyError(roll)

    def search(self, roll: int) -> Student:
        """First record with this roll number; raise KeyError if none."""
        return self._locate(roll)[1]

    def delete(self, roll: int) -> None:
        """Mark the record as deleted in place; raise KeyError if none."""
        position, _ = self._locate(roll)
        with self.path.open("r+b") as handle:
            handle.seek(position * _RECORD.size)
            handle.write(_pack(_TOMBSTONE))


def _reader(stream: TextIO):
    words = (word for line in stream for word in line.split())

    def read(convert=str):
        try:
            return convert(next(words))
        except (StopIteration, ValueError):
            raise EOFError from None

    return read


_HEADER = "\n\tRoll\tName\tDiv\tAddress"


def _row(student: Student) -> str:
    return f"\n\t{student.roll}\t{student.name}\t{student.division}\t{student.address}"


def _read_students(read, out: TextIO) -> list[Student]:
    students = []
    while True:
        out.write("\n\tEnter Roll No of Student : ")
        roll = read(int)
        out.write("\n\tEnter Name of Student : ")
        name = read()
        out.write("\n\tEnter Division of Student : ")
        division = read()[0]
        out.write("\n\tEnter Address of Student : ")
        students.append(Student(roll, name, division, read()))
        out.write("\n\tDo You Want to Add More Records (y/n)? ")
        if read()[0] not in "yY":
            return students


def _search(book: StudentFile, read, out: TextIO) -> int | None:
    out.write("\n\tEnter Roll No to Search: ")
    roll = read(int)
    try:
        student = book.search(roll)
    except KeyError:
        return None
    out.write("\n\tRecord Found...\n" + _HEADER + _row(student))
    return roll


def main(argv=None) -> int:
    """Run the interactive student information menu."""
    parser = argparse.ArgumentParser(description="Student information file")
    parser.add_argument("--file", default="stud.dat", help="record file to use")
    args = parser.parse_args(argv)
    book = StudentFile(args.file)
    out = sys.stdout
    read = _reader(sys.stdin)
    try:
        while True:
            out.write("\n\t Student Information System")
            out.write("\n\t1. Create\n\t2. Display\n\t3. Delete\n\t4. Search\n\t5. Exit")
            out.write("\n\t..... Enter Your Choice: ")
            choice = read(int)
            if choice == 1:
                try:
                    book.create(_read_students(read, out))
                except ValueError as error:
                    out.write(f"\n\t{error}\n")
            elif choice == 2:
                out.write("\n\tThe Contents of File are:\n" + _HEADER)
                out.write("".join(_row(student) for student in book.records()))
            elif choice == 3:
                roll = _search(book, read, out)
                if roll is None:
                    out.write("\n\tRecord Not Found.\n")
                else:
                    book.delete(roll)
                    out.write("\n\tRecord Deleted Successfully.")
            elif choice == 4:
                if _search(book, read, out) is None:
                    out.write("\n\tRecord Not Found...\n")
            elif choice == 5:
                out.write("\n\tExiting...\n")
                return 0
            else:
                out.write("\n\tInvalid Choice!")
            out.write("\n\t..... Do You Want to Continue in Main Menu (y/n)? ")
            if read()[0] not in "yY":
                break
    except EOFError:
        pass
    return 0