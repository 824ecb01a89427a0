import io

import pytest

from models.catalog import Catalog
from models.course import Course
from routes.menu import Session


@pytest.fixture
def write_catalog(tmp_path):
    def _write(text, name="courses.txt"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return str(p)

    return _write


@pytest.fixture
def sample_catalog():
    return Catalog(
        [
            Course("CS101", "Intro to CS"),
            Course("CS201", "Data Structures", ("CS101",)),
            Course("CS301", "Algorithms", ("CS201", "CS999")),
        ]
    )


@pytest.fixture
def make_session():
    def _make(input_text="", catalog=None, **kwargs):
        return Session(
            catalog=catalog if catalog is not None else Catalog(),
            stdin=io.StringIO(input_text),
            stdout=io.StringIO(),
            stderr=io.StringIO(),
            **kwargs,
        )

    return _make
