import io

import pytest

from dsakit.employees import Employee, EmployeeStore, main


@pytest.fixture
def store(tmp_path):
    return EmployeeStore(tmp_path / "EMP.DAT", tmp_path / "IND.DAT")


@pytest.fixture
def staff():
    return [
        Employee(101, "alice", 5000),
        Employee(102, "bob", 4200),
        Employee(103, "carol", 6100),
    ]


def test_create_then_records_round_trip(store, staff):
    store.create(staff)
    assert store.records() == staff


def test_file_sizes_follow_fixed_layout(store, staff):
    store.create(staff)
    assert store.data_path.stat().st_size == 20 * len(staff)
    assert store.index_path.stat().st_size == 8 * len(staff)


def test_index_entry_bytes(store):
    store.create([Employee(7, "x", 1)])
    assert store.index_path.read_bytes() == b"\x07\x00\x00\x00\x00\x00\x00\x00"


def test_search_finds_record(store, staff):
    store.create(staff)
    assert store.search(102) == Employee(102, "bob", 4200)


def test_search_missing_raises(store, staff):
    store.create(staff)
    with pytest.raises(KeyError):
        store.search(999)


def test_update_changes_record(store, staff):
    store.create(staff)
    store.update(102, "robert", 4800)
    assert store.search(102) == Employee(102, "robert", 4800)
    assert store.records()[1] == Employee(102, "robert", 4800)
    assert store.records()[0] == staff[0]


def test_update_missing_raises(store, staff):
    store.create(staff)
    with pytest.raises(KeyError):
        store.update(555, "nobody", 1)


def test_delete_hides_record_and_keeps_sizes(store, staff):
    store.create(staff)
    sizes = (store.data_path.stat().st_size, store.index_path.stat().st_size)
    store.delete(101)
    assert store.records() == staff[1:]
    with pytest.raises(KeyError):
        store.search(101)
    assert (store.data_path.stat().st_size, store.index_path.stat().st_size) == sizes


def test_delete_missing_raises(store, staff):
    store.create(staff)
    with pytest.raises(KeyError):
        store.delete(404)


def test_delete_twice_raises(store, staff):
    store.create(staff)
    store.delete(103)
    with pytest.raises(KeyError):
        store.delete(103)


def test_append_after_create(store, staff):
    store.create(staff[:2])
    store.append(staff[2])
    assert store.records() == staff
    assert store.search(103) == staff[2]


def test_append_without_files(store, staff):
    for employee in staff:
        store.append(employee)
    assert store.records() == staff


def test_append_after_delete(store, staff):
    store.create(staff[:2])
    store.delete(101)
    store.append(staff[2])
    assert store.records() == [staff[1], staff[2]]
    assert store.search(103) == staff[2]


def test_name_too_long_rejected(store):
    with pytest.raises(ValueError):
        store.create([Employee(1, "abcdefghij", 10)])


def test_name_of_nine_bytes_round_trips(store):
    employee = Employee(1, "abcdefghi", 10)
    store.create([employee])
    assert store.search(1) == employee


def test_records_without_files_raise(store):
    with pytest.raises(FileNotFoundError):
        store.records()


def test_main_create_and_display(store, monkeypatch, capsys):
    script = "1\n101 alice 5000 y\n102 bob 4200 n\n2\n7\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    result = main(["--data", str(store.data_path), "--index", str(store.index_path)])
    output = capsys.readouterr().out
    assert result == 0
    assert "\nName: alice\nEmp_ID: 101\nSalary: 5000\n" in output
    assert store.records() == [Employee(101, "alice", 5000), Employee(102, "bob", 4200)]


def test_main_search_missing_reports(store, staff, monkeypatch, capsys):
    store.create(staff)
    monkeypatch.setattr("sys.stdin", io.StringIO("6\n999\n7\n"))
    main(["--data", str(store.data_path), "--index", str(store.index_path)])
    assert "Record not found." in capsys.readouterr().out


def test_main_update_and_delete(store, staff, monkeypatch, capsys):
    store.create(staff)
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n101\nalicia 5500\n4\n102\n7\n"))
    main(["--data", str(store.data_path), "--index", str(store.index_path)])
    output = capsys.readouterr().out
    assert "Record updated successfully." in output
    assert "Record deleted successfully." in output
    assert store.records() == [Employee(101, "alicia", 5500), staff[2]]