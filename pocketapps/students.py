"""A small console manager for students and their subjects."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Callable

from pocketapps.prompts import clear_screen, main_menu, read_number

Reader = Callable[[], str]
Writer = Callable[[str], object]

MAX_STUDENT_ID = 10000

EMPTY_MESSAGE = "The Students List is currently empty \n Add a Student!!"

STUDENTS_MENU = (
    "Students Menu\n"
    "1. Show Student Detail\n"
    "2. Edit Student\n"
    "3. Delete Student\n"
    "4. Go back to Main Menu\n"
    "Choose a number: "
)


@dataclass
class Subject:
    """A subject a student takes, with an optional grade."""

    name: str
    description: str
    class_id: int = 0
    grade: int | None = None


@dataclass
class Student:
    """A student identified by a numeric id."""

    name: str
    student_id: int
    subjects: list[Subject] = field(default_factory=list)

    def add_subject(self, subject: Subject) -> None:
        self.subjects.append(subject)

    def render(self) -> str:
        lines = [f"{self.student_id}| {self.name}\n"]
        lines.extend(f"  {s.name}: {s.description}\n" for s in self.subjects)
        return "".join(lines)


def _default_read() -> str:
    return input()


def _default_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


@dataclass
class StudentManager:
    """Keeps the students in the order they were added."""

    students: list[Student] = field(default_factory=list)
    file_name: str = ""

    def __len__(self) -> int:
        return len(self.students)

    def add_student(self, student: Student) -> None:
        self.students.append(student)

    def find_student(self, student_id: int) -> Student | None:
        """The first student with ``student_id``, or None."""
        return next((s for s in self.students if s.student_id == student_id), None)

    def delete_student(self, student_id: int) -> bool:
        """Remove the first student with ``student_id``; report whether one was found."""
        student = self.find_student(student_id)
        if student is None:
            return False
        self.students.remove(student)
        return True

    def render(self) -> str:
        if not self.students:
            return EMPTY_MESSAGE
        return "\n--- Current Student List ---\n" + "".join(
            f"{s.student_id}| {s.name}\n" for s in self.students
        )

    def students_menu(
        self,
        read: Reader | None = None,
        write: Writer | None = None,
    ) -> None:
        """Show the students menu until the user goes back."""
        read = read or _default_read
        write = write or _default_write
        while True:
            clear_screen(write)
            write(self.render())
            write(STUDENTS_MENU)
            choice = read_number(4, read, write)
            if choice == 4:
                return
            if choice == 1:
                write("Type the Student ID you want to see: \n")
                student = self.find_student(read_number(MAX_STUDENT_ID, read, write))
                write(student.render() if student else "Student not Found!!")
            elif choice == 2:
                write("Type the Student ID you want to edit: \n")
                student = self.find_student(read_number(MAX_STUDENT_ID, read, write))
                if student is None:
                    write("Student not Found!!")
                else:
                    write("New name: ")
                    student.name = read().strip()
                    write("Edited Successfully!")
            else:
                write("Type the Student ID you want to delete: \n")
                if self.delete_student(read_number(MAX_STUDENT_ID, read, write)):
                    write("Deleted Successfully!")
                else:
                    write("Student not Found!!")


def main(argv: list[str] | None = None) -> int:
    """Run the student manager on the console."""
    parser = argparse.ArgumentParser(description="Manage students and subjects.")
    parser.parse_args(argv)
    manager = StudentManager()
    _default_write("Welcome to the Student Management System\n")
    try:
        while True:
            main_menu()
            choice = read_number(3)
            if choice == 1:
                manager.students_menu()
            elif choice == 2:
                subjects = [
                    f"{s.student_id}| {sub.name}: {sub.description}\n"
                    for s in manager.students
                    for sub in s.subjects
                ]
                _default_write("".join(subjects) or "No subjects yet\n")
            else:
                _default_write("Closing Program\n")
                return 0
    except EOFError:
        return 0