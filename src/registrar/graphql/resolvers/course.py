from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import NotFoundError
from ...logging import get_logger
from ..context import get_loaders, get_repository, parse_id

if TYPE_CHECKING:
    from ..types.course import Course
    from ..types.teacher import Teacher

logger = get_logger(__name__)


async def resolve_courses(info: strawberry.Info) -> list[Course]:
    from ..types.course import Course as CourseType

    courses = await get_repository(info).list_courses()
    return [CourseType.from_model(course) for course in courses]


async def resolve_course_by_id(info: strawberry.Info, id: str) -> Course | None:
    course_id = parse_id(id)
    course = await get_repository(info).get_course(course_id) if course_id is not None else None
    if course is None:
        logger.info("Course not found", course_id=id)
        return None

    from ..types.course import Course as CourseType

    return CourseType.from_model(course)


async def resolve_course_teacher(course: Course, info: strawberry.Info) -> Teacher | None:
    if course.teacher_id is None:
        return None

    teacher = await get_loaders(info).teacher_loader.load(course.teacher_id)
    if teacher is None:
        return None

    from ..types.teacher import Teacher as TeacherType

    return TeacherType.from_model(teacher)


async def create_course(
    info: strawberry.Info,
    teacher_email: str,
    code: str,
    name: str,
    description: str | None = None,
) -> Course:
    """
    Create a course taught by the teacher with ``teacher_email``.

    Raises:
        NotFoundError: If no teacher has that email; nothing is written
    """
    repository = get_repository(info)

    teacher = await repository.get_teacher_by_email(teacher_email)
    if teacher is None:
        logger.info("Cannot create course for unknown teacher", lookup="email")
        raise NotFoundError("Teacher", "email", teacher_email, expose_value=False)

    course = await repository.create_course(
        code=code, name=name, description=description, teacher_id=teacher.id
    )

    from ..types.course import Course as CourseType

    return CourseType.from_model(course)
