"""
Teacher GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Teachers
    from .course import Course


@strawberry.type
class Teacher:
    """Teacher type for GraphQL API."""

    id: strawberry.ID
    email: str
    full_name: str | None

    @strawberry.field
    async def courses(
        self, info: strawberry.Info
    ) -> list[Annotated["Course", strawberry.lazy(".course")]]:
        """Get the courses taught by this teacher."""
        from ..resolvers.teacher import resolve_teacher_courses

        return await resolve_teacher_courses(self, info)

    @classmethod
    def from_model(cls, teacher: "Teachers") -> "Teacher":
        return cls(
            id=strawberry.ID(str(teacher.id)),
            email=teacher.email,
            full_name=teacher.full_name,
        )
