# services/validation.py

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from models.catalog import Catalog


@dataclass(frozen=True)
class DanglingPrerequisite:
    course: str
    prerequisite: str

    def __str__(self) -> str:
        return f"Prerequisite {self.prerequisite} of {self.course} does not exist as a course."


def find_dangling_prerequisite(catalog: Catalog) -> Optional[DanglingPrerequisite]:
    """
    Return the first prerequisite that names a course missing from the catalog.
    Courses are visited in catalog order, prerequisites in file order.
    Returns None when every prerequisite resolves.
    """
    for course in catalog:
        for prereq in course.prerequisites:
            if prereq not in catalog:
                return DanglingPrerequisite(course=course.number, prerequisite=prereq)
    return None


def validate_catalog(catalog: Catalog, stderr: Optional[TextIO] = None) -> bool:
    """
    Check that every prerequisite is itself a course in the catalog.

    Stops at the first problem (it is reported, the rest are not looked at)
    and returns False. Does not touch the catalog.
    """
    problem = find_dangling_prerequisite(catalog)
    if problem is None:
        return True

    print(f"[validate] {problem}", file=stderr or sys.stderr)
    return False
