"""
Sample data for local development.

Seeding goes through the repository and is safe to repeat: records that
already exist (matched by email, or by name for departments) are not
duplicated, and a sample student missing its enrollment is enrolled.
"""

from __future__ import annotations

from typing import Any

from ..logging import get_logger
from ..repository import Repository

logger = get_logger(__name__)

SAMPLE_DEPARTMENT = {
    "name": "Computer Science",
    "description": "Programming, algorithms and systems",
}

SAMPLE_TEACHER: dict[str, Any] = {
    "email": "ada.lovelace@example.edu",
    "full_name": "Ada Lovelace",
    "courses": [
        {"code": "CS101", "name": "Introduction to Programming", "description": None},
        {"code": "CS201", "name": "Data Structures", "description": "Lists, trees and graphs"},
    ],
}

SAMPLE_STUDENTS = [
    {"email": "grace.hopper@example.edu", "full_name": "Grace Hopper", "enrolled": True},
    {"email": "alan.turing@example.edu", "full_name": "Alan Turing", "enrolled": False},
]


async def seed_sample_data(repository: Repository) -> dict[str, int]:
    """
    Insert the sample department, teacher, courses and students.

    Returns:
        Number of records created per entity
    """
    created = {"departments": 0, "teachers": 0, "students": 0}

    departments = await repository.list_departments()
    department = next((d for d in departments if d.name == SAMPLE_DEPARTMENT["name"]), None)
    if department is None:
        department = await repository.create_department(**SAMPLE_DEPARTMENT)
        created["departments"] += 1

    if await repository.get_teacher_by_email(SAMPLE_TEACHER["email"]) is None:
        await repository.create_teacher(**SAMPLE_TEACHER)
        created["teachers"] += 1

    existing = {student.email: student for student in await repository.list_students()}
    for sample in SAMPLE_STUDENTS:
        student = existing.get(sample["email"])
        if student is None:
            student = await repository.create_student(
                email=sample["email"], full_name=sample["full_name"], dept_id=department.id
            )
            created["students"] += 1
        # A previous run may have stopped between creating and enrolling
        if sample["enrolled"] and not student.enrolled:
            await repository.enroll_student(student.id)

    logger.info("Sample data seeded", **created)
    return created
