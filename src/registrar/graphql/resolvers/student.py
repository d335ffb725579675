from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import NotFoundError
from ...logging import get_logger
from ..context import get_loaders, get_repository, parse_id

if TYPE_CHECKING:
    from ..types.department import Department
    from ..types.student import Student

logger = get_logger(__name__)


# Query resolvers
async def resolve_enrollment(info: strawberry.Info) -> list[Student]:
    """Resolve the students whose enrollment has been confirmed."""
    from ..types.student import Student as StudentType

    students = await get_repository(info).list_students(enrolled=True)
    return [StudentType.from_model(student) for student in students]


async def resolve_students(info: strawberry.Info) -> list[Student]:
    from ..types.student import Student as StudentType

    students = await get_repository(info).list_students()
    return [StudentType.from_model(student) for student in students]


async def resolve_student_by_id(info: strawberry.Info, id: str) -> Student | None:
    student_id = parse_id(id)
    if student_id is None:
        logger.info("Student not found", student_id=id)
        return None

    student = await get_repository(info).get_student(student_id)
    if student is None:
        logger.info("Student not found", student_id=id)
        return None

    from ..types.student import Student as StudentType

    return StudentType.from_model(student)


# Field resolvers
async def resolve_student_dept(student: Student, info: strawberry.Info) -> Department | None:
    if student.dept_id is None:
        return None

    department = await get_loaders(info).department_loader.load(student.dept_id)
    if department is None:
        return None

    from ..types.department import Department as DepartmentType

    return DepartmentType.from_model(department)


# Mutation resolvers
async def register_student(
    info: strawberry.Info, email: str, full_name: str, dept: str | None = None
) -> Student:
    """
    Register a new student. Students always start out not enrolled.

    Raises:
        NotFoundError: If ``dept`` is given but names no department
    """
    repository = get_repository(info)

    dept_id = None
    if dept is not None:
        dept_id = parse_id(dept)
        department = await repository.get_department(dept_id) if dept_id is not None else None
        if department is None:
            raise NotFoundError("Department", "id", dept)

    student = await repository.create_student(email=email, full_name=full_name, dept_id=dept_id)

    from ..types.student import Student as StudentType

    return StudentType.from_model(student)


async def enroll_student(info: strawberry.Info, id: str) -> Student:
    """
    Mark a student as enrolled. Enrolling twice is allowed and changes nothing.

    Raises:
        NotFoundError: If no student has this ID
    """
    student_id = parse_id(id)
    student = None
    if student_id is not None:
        student = await get_repository(info).enroll_student(student_id)

    if student is None:
        logger.info("Cannot enroll unknown student", student_id=id)
        raise NotFoundError("Student", "id", id)

    from ..types.student import Student as StudentType

    return StudentType.from_model(student)
