from __future__ import annotations

from models.catalog import Catalog
from models.course import Course


class CourseNotFoundError(LookupError):
    def __init__(self, number: str):
        super().__init__(f"Course {number} not found.")
        self.number = number


def format_course(course: Course) -> list[str]:
    prereqs = " ".join(course.prerequisites) if course.has_prerequisites else "None"
    return [
        f"Course Number: {course.number}",
        f"Course Title: {course.title}",
        f"Prerequisites: {prereqs}",
    ]


def search_course(catalog: Catalog, number: str) -> list[str]:
    """Formatted lines for one course. Exact, case-sensitive match."""
    course = catalog.lookup(number)
    if course is None:
        raise CourseNotFoundError(number)
    return format_course(course)


def list_courses(catalog: Catalog) -> list[str]:
    # "<number>: <title>" sorted by course number
    lines = []
    for number in catalog.sorted_identifiers():
        course = catalog.lookup(number)
        lines.append(f"{course.number}: {course.title}")
    return lines
