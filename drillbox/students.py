"""Student records and a file of fixed-size binary student records."""

import argparse
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

_NAME_SIZE = 50
_RECORD = struct.Struct(f"<i{_NAME_SIZE}s2xf")


@dataclass(frozen=True)
class Student:
    """One student: roll number, name and marks."""

    roll: int
    name: str
    marks: float

    SIZE: ClassVar[int] = _RECORD.size

    def pack(self):
        """Encode as one fixed-size record: int32 roll, 50-byte name, float32 marks."""
        encoded = self.name.encode("utf-8")
        if b"\0" in encoded:
            raise ValueError("name must not contain NUL characters")
        if len(encoded) >= _NAME_SIZE:
            raise ValueError(f"name must be shorter than {_NAME_SIZE} bytes")
        try:
            return _RECORD.pack(self.roll, encoded, self.marks)
        except struct.error as exc:
            raise ValueError(str(exc)) from exc

    @classmethod
    def unpack(cls, data):
        """Decode one record produced by pack."""
        if len(data) != _RECORD.size:
            raise ValueError(f"a record is {_RECORD.size} bytes, got {len(data)}")
        roll, raw_name, marks = _RECORD.unpack(data)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        return cls(roll, name, marks)

    def __str__(self):
        return f"Roll: {self.roll}\nName: {self.name}\nMarks: {self.marks:.2f}"


class StudentFile:
    """An append-only file of packed student records."""

    def __init__(self, path):
        self.path = Path(path)

    def add(self, student):
        """Append a student record to the file."""
        data = student.pack()
        with self.path.open("ab") as handle:
            handle.write(data)

    def __iter__(self):
        try:
            handle = self.path.open("rb")
        except FileNotFoundError:
            return
        with handle:
            while True:
                chunk = handle.read(Student.SIZE)
                if len(chunk) < Student.SIZE:
                    return
                yield Student.unpack(chunk)

    def find(self, roll):
        """Return the first student with this roll number, or None."""
        return next((student for student in self if student.roll == roll), None)


_MENU = (
    "\n--- Student Management System ---\n"
    "1. Add Student\n"
    "2. Display Students\n"
    "3. Search Student\n"
    "4. Exit\n"
)


def _read_int(prompt):
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _read_student():
    roll = _read_int("Enter Roll Number: ")
    words = input("Enter Name: ").split()
    marks_text = input("Enter Marks: ").strip()
    if roll is None or not words:
        return None
    try:
        marks = float(marks_text)
    except ValueError:
        return None
    return Student(roll, words[0], marks)


def main(argv=None):
    """Run the interactive student records menu."""
    parser = argparse.ArgumentParser(prog="students", description="Student records menu.")
    parser.add_argument("--file", default="students.txt", help="record file to use")
    args = parser.parse_args(argv)
    records = StudentFile(args.file)
    try:
        while True:
            print(_MENU, end="")
            choice = _read_int("Enter choice: ")
            if choice == 1:
                student = _read_student()
                if student is None:
                    print("Invalid input!")
                    continue
                try:
                    records.add(student)
                except ValueError as exc:
                    print(f"Cannot add student: {exc}")
                else:
                    print("Student added successfully!")
            elif choice == 2:
                print("\n--- Student Records ---")
                for student in records:
                    print(
                        f"Roll: {student.roll} | Name: {student.name} "
                        f"| Marks: {student.marks:.2f}"
                    )
            elif choice == 3:
                roll = _read_int("Enter Roll Number to search: ")
                student = None if roll is None else records.find(roll)
                if student is None:
                    print("Student not found!")
                else:
                    print(f"Found: {student.name} | Marks: {student.marks:.2f}")
            elif choice == 4:
                print("Exiting...")
                return 0
            else:
                print("Invalid choice!")
    except EOFError:
        return 0