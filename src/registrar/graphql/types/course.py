"""
Course GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Courses
    from .teacher import Teacher


@strawberry.type
class Course:
    """Course type for GraphQL API."""

    id: strawberry.ID
    code: str
    name: str
    description: str | None
    teacher_id: strawberry.Private[int | None]

    @strawberry.field
    async def teacher(
        self, info: strawberry.Info
    ) -> Annotated["Teacher", strawberry.lazy(".teacher")] | None:
        """Get the teacher of this course."""
        from ..resolvers.course import resolve_course_teacher

        return await resolve_course_teacher(self, info)

    @classmethod
    def from_model(cls, course: "Courses") -> "Course":
        return cls(
            id=strawberry.ID(str(course.id)),
            code=course.code,
            name=course.name,
            description=course.description,
            teacher_id=course.teacher_id,
        )
