"""Employee records in a data file with a separate index file."""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

DELETED_ID = -1
_NAME_FIELD = 10
_RECORD = struct.Struct(f"<i{_NAME_FIELD}s2xi")
_INDEX = struct.Struct("<ii")


@dataclass(frozen=True)
class Employee:
    emp_id: int
    name: str
    salary: int


def _pack_record(employee: Employee) -> bytes:
    name = employee.name.encode()
    if b"\0" in name or len(name) >= _NAME_FIELD:
        raise ValueError(f"name must be under {_NAME_FIELD} bytes: {employee.name!r}")
    try:
        return _RECORD.pack(employee.emp_id, name, employee.salary)
    except struct.error as error:
        raise ValueError(str(error)) from None


def _pack_index(emp_id: int, position: int) -> bytes:
    try:
        return _INDEX.pack(emp_id, position)
    except struct.error as error:
        raise ValueError(str(error)) from None


def _unpack_record(data: bytes) -> Employee:
    emp_id, name, salary = _RECORD.unpack(data)
    return Employee(emp_id, name.split(b"\0", 1)[0].decode(errors="replace"), salary)


_TOMBSTONE = Employee(DELETED_ID, "", -1)


class EmployeeStore:
    """Fixed-size employee records located through an (id, position) index."""

    def __init__(self, data_path, index_path) -> None:
        self.data_path = Path(data_path)
        self.index_path = Path(index_path)

    def create(self, employees: Iterable[Employee]) -> None:
        """Replace both files with the given records, indexed in order."""
        staff = list(employees)
        records = b"".join(_pack_record(employee) for employee in staff)
        index = b"".join(
            _pack_index(employee.emp_id, position) for position, employee in enumerate(staff)
        )
        self.data_path.write_bytes(records)
        self.index_path.write_bytes(index)

    def _index(self) -> list[tuple[int, int]]:
        data = self.index_path.read_bytes()
        whole = len(data) - len(data) % _INDEX.size
        return list(_INDEX.iter_unpack(data[:whole]))

    def _read_record(self, position: int) -> Optional[Employee]:
        with self.data_path.open("rb") as handle:
            handle.seek(position * _RECORD.size)
            data = handle.read(_RECORD.size)
        return _unpack_record(data) if len(data) == _RECORD.size else None

    def _position(self, emp_id: int) -> tuple[int, int]:
        """Slot in the index and record position of the first matching entry."""
        for slot, (indexed_id, position) in enumerate(self._index()):
            if indexed_id == emp_id:
                return slot, position
        raise KeyError(emp_id)

    def _write_record(self, position: int, employee: Employee) -> None:
        data = _pack_record(employee)
        with self.data_path.open("r+b") as handle:
            handle.seek(position * _RECORD.size)
            handle.write(data)

    def records(self) -> list[Employee]:
        """Live records in index order; raise OSError if a file is missing."""
        result = []
        for _, position in self._index():
            employee = self._read_record(position)
            if employee is not None and employee.emp_id != DELETED_ID:
                result.append(employee)
        return result

    def update(self, emp_id: int, name: str, salary: int) -> None:
        """Overwrite the record for emp_id; raise KeyError if it is not indexed."""
        _, position = self._position(emp_id)
        self._write_record(position, Employee(emp_id, name, salary))

    def delete(self, emp_id: int) -> None:
        """Mark the record and its index entry deleted; raise KeyError if absent."""
        slot, position = self._position(emp_id)
        self._write_record(position, _TOMBSTONE)
        with self.index_path.open("r+b") as handle:
            handle.seek(slot * _INDEX.size)
            handle.write(_pack_index(DELETED_ID, position))

    def append(self, employee: Employee) -> None:
        """Add a record at the end of both files."""
        try:
            position = self.index_path.stat().st_size // _INDEX.size
        except FileNotFoundError:
            position = 0
        record = _pack_record(employee)
        entry = _pack_index(employee.emp_id, position)
        with self.data_path.open("ab") as handle:
            handle.write(record)
        with self.index_path.open("ab") as handle:
            handle.write(entry)

    def search(self, emp_id: int) -> Employee:
        """Record for emp_id; raise KeyError if absent or logically deleted."""
        _, position = self._position(emp_id)
        employee = self._read_record(position)
        if employee is None or employee.emp_id == DELETED_ID:
            raise KeyError(emp_id)
        return employee


def _reader(stream: TextIO):
    words = (word for line in stream for word in line.split())

    def read(convert=str):
        try:
            return convert(next(words))
        except (StopIteration, ValueError):
            raise EOFError from None

    return read


def _describe(employee: Employee) -> str:
    return f"\nName: {employee.name}\nEmp_ID: {employee.emp_id}\nSalary: {employee.salary}\n"


def _read_employees(read, out: TextIO) -> list[Employee]:
    staff = []
    while True:
        out.write("\nEnter Emp_ID: ")
        emp_id = read(int)
        out.write("Enter Name: ")
        name = read()
        out.write("Enter Salary: ")
        staff.append(Employee(emp_id, name, read(int)))
        out.write("Do you want to add more records? (y/n): ")
        if read()[0] not in "yY":
            return staff


def _found(store: EmployeeStore, emp_id: int) -> bool:
    try:
        store._position(emp_id)
    except (KeyError, OSError):
        return False
    return True


_MENU = (
    "\nMain Menu\n1. Create\n2. Display\n3. Update\n4. Delete\n"
    "5. Append\n6. Search\n7. Exit\nEnter your choice: "
)


def main(argv=None) -> int:
    """Run the interactive employee records menu."""
    parser = argparse.ArgumentParser(description="Indexed employee records")
    parser.add_argument("--data", default="EMP.DAT", help="record file to use")
    parser.add_argument("--index", default="IND.DAT", help="index file to use")
    args = parser.parse_args(argv)
    store = EmployeeStore(args.data, args.index)
    out = sys.stdout
    read = _reader(sys.stdin)
    try:
        while True:
            out.write(_MENU)
            choice = read(int)
            try:
                if choice == 1:
                    store.create(_read_employees(read, out))
                elif choice == 2:
                    try:
                        staff = store.records()
                    except OSError:
                        out.write("File error!\n")
                    else:
                        out.write("\nThe Contents of file are:\n")
                        out.write("".join(_describe(employee) for employee in staff))
                elif choice == 3:
                    out.write("\nEnter the Emp_ID for updating: ")
                    emp_id = read(int)
                    if not _found(store, emp_id):
                        out.write("Record not found.\n")
                        continue
                    out.write("\nEnter new Name: ")
                    name = read()
                    out.write("Enter new Salary: ")
                    store.update(emp_id, name, read(int))
                    out.write("Record updated successfully.\n")
                elif choice == 4:
                    out.write("\nEnter the Emp_ID to delete: ")
                    emp_id = read(int)
                    if not _found(store, emp_id):
                        out.write("Record not found.\n")
                        continue
                    store.delete(emp_id)
                    out.write("Record deleted successfully.\n")
                elif choice == 5:
                    out.write("\nEnter Name: ")
                    name = read()
                    out.write("Enter Emp_ID: ")
                    emp_id = read(int)
                    out.write("Enter Salary: ")
                    store.append(Employee(emp_id, name, read(int)))
                    out.write("Record appended successfully.\n")
                elif choice == 6:
                    out.write("\nEnter Emp_ID to search: ")
                    emp_id = read(int)
                    if not _found(store, emp_id):
                        out.write("Record not found.\n")
                        continue
                    try:
                        employee = store.search(emp_id)
                    except KeyError:
                        out.write("Record is logically deleted.\n")
                    else:
                        out.write("\nRecord found:" + _describe(employee))
                elif choice == 7:
                    break
                else:
                    out.write("Invalid choice!\n")
            except ValueError as error:
                out.write(f"{error}\n")
    except EOFError:
        pass
    return 0