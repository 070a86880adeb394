import io
import sys

import pytest

from dsakit.students import Student, StudentFile, main

STUDENTS = [
    Student(7, "Ravi", "A", "Pune"),
    Student(12, "Meera", "B", "Nashik"),
    Student(3, "Kiran", "A", "Satara"),
]


@pytest.fixture
def book(tmp_path):
    store = StudentFile(tmp_path / "stud.dat")
    store.create(STUDENTS)
    return store


def test_round_trip(book):
    assert book.records() == STUDENTS


def test_fixed_record_size(book):
    assert book.path.stat().st_size == 28 * len(STUDENTS)


def test_roll_stored_little_endian(book):
    assert book.path.read_bytes()[:4] == (7).to_bytes(4, "little", signed=True)


def test_search_finds_record(book):
    assert book.search(12) == STUDENTS[1]


def test_search_missing_raises(book):
    with pytest.raises(KeyError):
        book.search(99)


def test_delete_hides_record(book):
    book.delete(12)
    assert book.records() == [STUDENTS[0], STUDENTS[2]]
    with pytest.raises(KeyError):
        book.search(12)


def test_delete_keeps_slot_with_marker(book):
    size = book.path.stat().st_size
    book.delete(7)
    data = book.path.read_bytes()
    assert len(data) == size
    assert data[:4] == (-1).to_bytes(4, "little", signed=True)
    assert b"NULL" in data[:28]


def test_delete_missing_raises(book):
    with pytest.raises(KeyError):
        book.delete(99)


def test_missing_file_is_empty(tmp_path):
    store = StudentFile(tmp_path / "none.dat")
    assert store.records() == []
    with pytest.raises(KeyError):
        store.delete(1)


@pytest.mark.parametrize(
    "student",
    [Student(1, "Abcdefghij", "A", "Pune"), Student(1, "Ravi", "AB", "Pune"), Student(1, "Ravi", "A", "x" * 10)],
)
def test_invalid_fields_rejected(tmp_path, student):
    with pytest.raises(ValueError):
        StudentFile(tmp_path / "s.dat").create([student])


def test_create_replaces_contents(book):
    book.create([STUDENTS[2]])
    assert book.records() == [STUDENTS[2]]


def test_main_create_and_display(tmp_path, monkeypatch, capsys):
    path = tmp_path / "stud.dat"
    answers = "1\n7\nRavi\nA\nPune\nn\ny\n2\nn\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(answers))
    assert main(["--file", str(path)]) == 0
    assert "\n\t7\tRavi\tA\tPune" in capsys.readouterr().out
    assert StudentFile(path).records() == [Student(7, "Ravi", "A", "Pune")]