from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from models.course import Course


class CatalogLoadError(Exception):
    """The catalog source could not be opened or read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to open file {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class MalformedRecord:
    line_no: int | None
    line: str
    reason: str


class Catalog:
    """
    In-memory course catalog keyed by course number.

    Built in one go from a list of courses (later duplicates win) and
    never edited afterwards; a new load produces a new Catalog.
    """

    def __init__(
        self,
        courses: Iterable[Course] = (),
        *,
        source: str | None = None,
        skipped: Iterable[MalformedRecord] = (),
    ):
        self._courses: dict[str, Course] = {}
        for course in courses:
            self._courses[course.number] = course

        self.source = source
        self.skipped: tuple[MalformedRecord, ...] = tuple(skipped)

    def lookup(self, number: str) -> Course | None:
        return self._courses.get(number)

    def all_identifiers(self) -> list[str]:
        return list(self._courses)

    def sorted_identifiers(self) -> list[str]:
        # plain str ordering = codepoint order
        return sorted(self._courses)

    def __len__(self) -> int:
        return len(self._courses)

    def __contains__(self, number: object) -> bool:
        return number in self._courses

    def __iter__(self) -> Iterator[Course]:
        return iter(self._courses.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Catalog):
            return NotImplemented
        return self._courses == other._courses

    def __repr__(self) -> str:
        return f"<Catalog {len(self)} courses from {self.source or '-'}>"
