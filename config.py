import os

# Absolute path to project root
# (a stable anchor for all file paths)
basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    # Sample catalog files live here. Nothing is loaded from it automatically.
    DATA_DIR = os.path.join(basedir, "data")

    # Catalog line format: identifier,title[,prerequisite]*
    # No quoting/escaping, a plain split on the delimiter.
    DELIMITER = ","
    MIN_FIELDS = 2

    MENU_OPTIONS = (
        ("1", "Load file"),
        ("2", "Print List"),
        ("3", "Search for Course"),
        ("9", "Exit"),
    )
    CHOICE_PROMPT = "Enter your choice: "
    PATH_PROMPT = "Enter filepath to load: "
    SEARCH_PROMPT = "Enter course number to search: "

    LIST_HEADER = "Courses in the Computer Science department:"
    FAREWELL = "Goodbye!"
