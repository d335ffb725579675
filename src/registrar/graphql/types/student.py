"""
Student GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Students
    from .department import Department


@strawberry.type
class Student:
    """Student type for GraphQL API."""

    id: strawberry.ID
    email: str
    full_name: str
    enrolled: bool
    dept_id: strawberry.Private[int | None]

    @strawberry.field
    async def dept(
        self, info: strawberry.Info
    ) -> Annotated["Department", strawberry.lazy(".department")] | None:
        """Get the department this student belongs to."""
        from ..resolvers.student import resolve_student_dept

        return await resolve_student_dept(self, info)

    @classmethod
    def from_model(cls, student: "Students") -> "Student":
        return cls(
            id=strawberry.ID(str(student.id)),
            email=student.email,
            full_name=student.full_name,
            enrolled=bool(student.enrolled),
            dept_id=student.dept_id,
        )
