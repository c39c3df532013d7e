import io

import pytest

from drillbox.students import Student, StudentFile, main


def test_pack_unpack_round_trip():
    student = Student(7, "Asha", 87.5)
    assert Student.unpack(student.pack()) == student


def test_pack_has_fixed_size():
    short = Student(1, "A", 1.0).pack()
    longer = Student(2, "A" * 49, 2.0).pack()
    assert len(short) == len(longer) == Student.SIZE


def test_pack_starts_with_little_endian_roll():
    data = Student(258, "Bo", 50.0).pack()
    assert data[:4] == (258).to_bytes(4, "little")


def test_name_too_long():
    with pytest.raises(ValueError):
        Student(1, "x" * 50, 10.0).pack()


def test_unpack_wrong_length():
    with pytest.raises(ValueError):
        Student.unpack(b"\0" * (Student.SIZE - 1))


def test_str_shows_details():
    assert str(Student(3, "Ravi", 92.25)) == "Roll: 3\nName: Ravi\nMarks: 92.25"


def test_file_add_iterate_find(tmp_path):
    records = StudentFile(tmp_path / "students.txt")
    people = [Student(1, "Asha", 87.5), Student(2, "Ravi", 92.25), Student(3, "Mina", 70.0)]
    for person in people:
        records.add(person)
    assert list(records) == people
    assert records.find(2) == people[1]
    assert records.find(99) is None


def test_missing_file_is_empty(tmp_path):
    records = StudentFile(tmp_path / "absent.dat")
    assert list(records) == []
    assert records.find(1) is None


def test_trailing_partial_record_is_ignored(tmp_path):
    path = tmp_path / "students.txt"
    records = StudentFile(path)
    records.add(Student(1, "Asha", 87.5))
    with path.open("ab") as handle:
        handle.write(b"\1\2\3")
    assert list(records) == [Student(1, "Asha", 87.5)]


def test_main_add_display_search(tmp_path, monkeypatch, capsys):
    path = tmp_path / "students.txt"
    session = "1\n7\nAsha\n87.5\n2\n3\n7\n3\n8\n4\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(session))
    assert main(["--file", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Student added successfully!" in out
    assert "Roll: 7 | Name: Asha | Marks: 87.50" in out
    assert "Found: Asha | Marks: 87.50" in out
    assert "Student not found!" in out
    assert StudentFile(path).find(7) == Student(7, "Asha", 87.5)


def test_main_invalid_choice_then_eof(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n"))
    assert main(["--file", str(tmp_path / "s.dat")]) == 0
    assert "Invalid choice!" in capsys.readouterr().out