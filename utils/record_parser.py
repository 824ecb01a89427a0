from __future__ import annotations

from config import Config
from models.catalog import MalformedRecord
from models.course import Course


class MalformedRecordError(ValueError):
    def __init__(self, line: str, reason: str, line_no: int | None = None):
        where = f"line {line_no}" if line_no is not None else "line"
        super().__init__(f"{where}: {reason}")
        self.line = line
        self.reason = reason
        self.line_no = line_no

    def to_record(self) -> MalformedRecord:
        return MalformedRecord(line_no=self.line_no, line=self.line, reason=self.reason)


def split_fields(line: str, delimiter: str = Config.DELIMITER) -> list[str]:
    # strip() also drops "\n" / "\r\n" left over from file reads
    return [token.strip() for token in line.split(delimiter)]


def parse_course_line(
    line: str,
    delimiter: str = Config.DELIMITER,
    line_no: int | None = None,
) -> Course:
    """
    Turn one catalog line into a Course.

    Format: identifier,title[,prerequisite]*
      - at least identifier and title are required
      - identifier must be non-empty, title may be empty
      - every token after the title is a prerequisite, in file order
        (one trailing delimiter adds nothing, an empty token in the
        middle is kept and fails validation)

    Raises MalformedRecordError for lines that don't describe a course.
    """
    fields = split_fields(line, delimiter)

    if len(fields) < Config.MIN_FIELDS:
        raise MalformedRecordError(
            line,
            f"Line has less than {Config.MIN_FIELDS} parameters.",
            line_no,
        )

    number, title, *rest = fields
    if not number:
        raise MalformedRecordError(line, "Missing course number.", line_no)

    if rest and not rest[-1]:
        # "a,b,c," ends with a delimiter, it does not name an empty prerequisite
        rest = rest[:-1]

    prerequisites = tuple(rest)
    return Course(number=number, title=title, prerequisites=prerequisites)
