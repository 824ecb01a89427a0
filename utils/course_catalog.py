from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from config import Config
from models.catalog import Catalog, CatalogLoadError
from models.course import Course
from utils.record_parser import MalformedRecordError, parse_course_line


def load_catalog(
    path: str,
    delimiter: str = Config.DELIMITER,
    stderr: TextIO | None = None,
) -> Catalog:
    """
    Read a whole catalog file into a new Catalog.

    - one course per line, malformed lines are reported and skipped
    - a repeated course number replaces the earlier line (last one wins)
    - blank lines are malformed as well (reported, not loaded)
    - an empty file gives an empty Catalog

    Raises CatalogLoadError if the file can't be opened or decoded, so
    "failed to open" is never confused with "file had no courses".
    """
    err = stderr or sys.stderr
    p = Path(path)

    courses: list[Course] = []
    skipped = []

    try:
        # utf-8-sig: tolerate a BOM from spreadsheet exports
        with p.open(encoding="utf-8-sig", newline="") as fh:
            for line_no, line in enumerate(fh, start=1):
                try:
                    courses.append(parse_course_line(line, delimiter, line_no))
                except MalformedRecordError as e:
                    print(f"[catalog] Skipping {e}", file=err)
                    skipped.append(e.to_record())
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError(str(path), str(e)) from e

    return Catalog(courses, source=str(path), skipped=skipped)


def load_catalog_or_empty(
    path: str,
    delimiter: str = Config.DELIMITER,
    stderr: TextIO | None = None,
) -> tuple[Catalog, CatalogLoadError | None]:
    # Old behaviour: an unreadable file just means "no courses".
    # The error is still handed back for callers that care.
    try:
        return load_catalog(path, delimiter, stderr=stderr), None
    except CatalogLoadError as e:
        print(f"[catalog] {e}", file=stderr or sys.stderr)
        return Catalog(source=str(path)), e
