from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Course:
    number: str
    title: str

    # soft references into the same catalog (file order kept for display)
    prerequisites: tuple[str, ...] = ()

    @property
    def has_prerequisites(self) -> bool:
        return bool(self.prerequisites)

    def __repr__(self) -> str:
        return f"<Course {self.number}>"
