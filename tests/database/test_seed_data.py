"""
Tests for the sample data seeder
"""

import pytest

from registrar.database.seed_data import SAMPLE_STUDENTS, seed_sample_data


@pytest.mark.integration
@pytest.mark.asyncio
async def test_seed_is_repeatable(repository):
    first = await seed_sample_data(repository)
    second = await seed_sample_data(repository)

    assert first == {"departments": 1, "teachers": 1, "students": len(SAMPLE_STUDENTS)}
    assert second == {"departments": 0, "teachers": 0, "students": 0}

    assert len(await repository.list_departments()) == 1
    assert len(await repository.list_courses()) == 2
    enrolled = await repository.list_students(enrolled=True)
    assert [s.email for s in enrolled] == ["grace.hopper@example.edu"]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_seed_enrolls_existing_sample_student(repository):
    """A sample student left unenrolled by an interrupted run gets enrolled."""
    await repository.create_student(email="grace.hopper@example.edu", full_name="Grace Hopper")

    created = await seed_sample_data(repository)

    assert created["students"] == len(SAMPLE_STUDENTS) - 1
    students = await repository.list_students()
    assert [s.email for s in students].count("grace.hopper@example.edu") == 1
    enrolled = await repository.list_students(enrolled=True)
    assert [s.email for s in enrolled] == ["grace.hopper@example.edu"]
