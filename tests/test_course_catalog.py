import pytest

from models.catalog import Catalog, CatalogLoadError
from models.course import Course
from utils.course_catalog import load_catalog, load_catalog_or_empty


EXAMPLE = "CS101,Intro to CS\nCS201,Data Structures,CS101\nCS301,Algorithms,CS201,CS999\n"


def test_load_example(write_catalog):
    catalog = load_catalog(write_catalog(EXAMPLE))
    assert len(catalog) == 3
    assert catalog.lookup("CS301") == Course("CS301", "Algorithms", ("CS201", "CS999"))
    assert catalog.skipped == ()


def test_malformed_lines_are_skipped_and_reported(write_catalog, capsys):
    path = write_catalog("CS101,Intro to CS\nBROKEN\n\nCS201,Data Structures,CS101\n")
    catalog = load_catalog(path)

    # count == lines with at least two fields
    assert len(catalog) == 2
    assert [r.line_no for r in catalog.skipped] == [2, 3]
    assert "[catalog] Skipping line 2" in capsys.readouterr().err


def test_last_write_wins(write_catalog):
    path = write_catalog("CS101,Old Title,MATH100\nCS101,New Title,MATH200,MATH300\n")
    catalog = load_catalog(path)
    assert len(catalog) == 1
    assert catalog.lookup("CS101").title == "New Title"
    assert catalog.lookup("CS101").prerequisites == ("MATH200", "MATH300")


def test_loading_twice_gives_same_catalog(write_catalog):
    path = write_catalog(EXAMPLE)
    first, second = load_catalog(path), load_catalog(path)
    assert first is not second
    assert sorted(first.all_identifiers()) == sorted(second.all_identifiers())
    assert first == second


def test_lookup_is_case_sensitive(write_catalog):
    catalog = load_catalog(write_catalog(EXAMPLE))
    assert catalog.lookup("cs101") is None
    assert "CS101" in catalog


def test_empty_file_is_empty_catalog(write_catalog):
    catalog = load_catalog(write_catalog(""))
    assert len(catalog) == 0
    assert catalog.source.endswith("courses.txt")


def test_bom_and_crlf(tmp_path):
    p = tmp_path / "win.txt"
    p.write_bytes("\ufeffCS101,Intro to CS\r\nCS201,Data Structures,CS101\r\n".encode("utf-8"))
    catalog = load_catalog(str(p))
    assert catalog.all_identifiers() == ["CS101", "CS201"]
    assert catalog.lookup("CS201").prerequisites == ("CS101",)


def test_missing_file_raises(tmp_path):
    missing = str(tmp_path / "nope.txt")
    with pytest.raises(CatalogLoadError) as exc:
        load_catalog(missing)
    assert exc.value.path == missing
    assert isinstance(exc.value.__cause__, OSError)


def test_directory_raises(tmp_path):
    with pytest.raises(CatalogLoadError):
        load_catalog(str(tmp_path))


def test_load_or_empty_keeps_old_behaviour(tmp_path, capsys):
    catalog, error = load_catalog_or_empty(str(tmp_path / "nope.txt"))
    assert len(catalog) == 0
    assert isinstance(error, CatalogLoadError)
    assert "Unable to open file" in capsys.readouterr().err


def test_load_or_empty_success(write_catalog):
    catalog, error = load_catalog_or_empty(write_catalog(EXAMPLE))
    assert error is None
    assert len(catalog) == 3


def test_catalog_sorted_identifiers():
    catalog = Catalog([Course("b2", ""), Course("A1", ""), Course("a1", ""), Course("B10", "")])
    assert catalog.sorted_identifiers() == ["A1", "B10", "a1", "b2"]


def test_sample_data_file_loads():
    from config import Config
    import os

    catalog = load_catalog(os.path.join(Config.DATA_DIR, "courses.txt"))
    assert len(catalog) == 8
    assert catalog.skipped == ()


def test_blank_lines_are_reported(write_catalog, capsys):
    catalog = load_catalog(write_catalog("CS101,Intro\n\n   \n"))

    assert catalog.all_identifiers() == ["CS101"]
    assert [r.line_no for r in catalog.skipped] == [2, 3]
    assert capsys.readouterr().err.count("[catalog] Skipping") == 2


def test_final_newline_is_not_a_blank_line(write_catalog, capsys):
    catalog = load_catalog(write_catalog("CS101,Intro\nCS201,Data Structures\n"))
    assert len(catalog) == 2
    assert catalog.skipped == ()
    assert capsys.readouterr().err == ""


def test_empty_middle_prerequisite_is_kept(write_catalog):
    catalog = load_catalog(write_catalog("CS100,Basics\nCS101,Intro,,CS100\n"))
    assert catalog.lookup("CS101").prerequisites == ("", "CS100")
