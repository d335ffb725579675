from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_loaders, get_repository, parse_id

if TYPE_CHECKING:
    from ..mutations.root import TeacherCreateInput
    from ..types.course import Course
    from ..types.teacher import Teacher

logger = get_logger(__name__)


async def resolve_teachers(info: strawberry.Info) -> list[Teacher]:
    from ..types.teacher import Teacher as TeacherType

    teachers = await get_repository(info).list_teachers()
    return [TeacherType.from_model(teacher) for teacher in teachers]


async def resolve_teacher_by_id(info: strawberry.Info, id: str) -> Teacher | None:
    teacher_id = parse_id(id)
    teacher = await get_repository(info).get_teacher(teacher_id) if teacher_id is not None else None
    if teacher is None:
        logger.info("Teacher not found", teacher_id=id)
        return None

    from ..types.teacher import Teacher as TeacherType

    return TeacherType.from_model(teacher)


async def resolve_teacher_courses(teacher: Teacher, info: strawberry.Info) -> list[Course]:
    from ..types.course import Course as CourseType

    courses = await get_loaders(info).teacher_courses_loader.load(int(teacher.id))
    return [CourseType.from_model(course) for course in courses]


async def create_teacher(info: strawberry.Info, data: TeacherCreateInput) -> Teacher:
    """Create a teacher along with the courses listed in ``data.courses``."""
    courses = [
        {"code": course.code, "name": course.name, "description": course.description}
        for course in data.courses or []
    ]
    teacher = await get_repository(info).create_teacher(
        email=data.email, full_name=data.full_name, courses=courses
    )

    from ..types.teacher import Teacher as TeacherType

    return TeacherType.from_model(teacher)
