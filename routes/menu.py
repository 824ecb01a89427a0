from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO

from config import Config
from models.catalog import Catalog, CatalogLoadError
from services.query import CourseNotFoundError, list_courses, search_course
from services.validation import validate_catalog
from utils.course_catalog import load_catalog


@dataclass
class Session:
    """Everything the menu works on. Handlers only touch what is in here."""

    catalog: Catalog = field(default_factory=Catalog)
    last_path: Optional[str] = None
    validate_on_load: bool = False
    delimiter: str = Config.DELIMITER

    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)

    def say(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.stdout)
        self.stdout.flush()

    def error(self, text: str) -> None:
        print(text, file=self.stderr)

    def ask(self, prompt: str) -> Optional[str]:
        # None => input is exhausted
        self.say(prompt, end="")
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")


def handle_load(session: Session, path: Optional[str] = None) -> None:
    if path is None:
        path = session.ask(Config.PATH_PROMPT)
        if path is None:
            return
        path = path.strip()
        # just Enter => reload the previous file
        if not path and session.last_path:
            path = session.last_path

    session.last_path = path
    try:
        session.catalog = load_catalog(path, session.delimiter, stderr=session.stderr)
    except CatalogLoadError as e:
        # the previous catalog is dropped either way
        session.catalog = Catalog(source=path)
        session.error(f"Error: {e}")
        return

    session.say(f"Loaded {len(session.catalog)} courses from {path}.")
    if session.validate_on_load:
        if validate_catalog(session.catalog, stderr=session.stderr):
            session.say("All prerequisites exist as courses.")
        else:
            session.say("Catalog has prerequisites that are not courses.")


def handle_list(session: Session) -> None:
    session.say(Config.LIST_HEADER)
    for line in list_courses(session.catalog):
        session.say(line)


def handle_search(session: Session) -> None:
    answer = session.ask(Config.SEARCH_PROMPT)
    if answer is None:
        return

    tokens = answer.split()
    if not tokens:
        session.error("Error: No course number entered.")
        return

    try:
        lines = search_course(session.catalog, tokens[0])
    except CourseNotFoundError as e:
        session.error(f"Error: {e}")
        return

    for line in lines:
        session.say(line)


def handle_exit(session: Session) -> int:
    session.say(Config.FAREWELL)
    return 0


HANDLERS: dict[int, Callable[[Session], Optional[int]]] = {
    1: handle_load,
    2: handle_list,
    3: handle_search,
    9: handle_exit,
}


def print_menu(session: Session) -> None:
    session.say("Menu:")
    for key, label in Config.MENU_OPTIONS:
        session.say(f"{key}. {label}")


def run(session: Session) -> int:
    """
    Menu loop. Returns the exit status: 0 on "9. Exit" or when input runs out.
    Bad menu input is never fatal, it just re-prompts.
    """
    while True:
        print_menu(session)
        answer = session.ask(Config.CHOICE_PROMPT)
        if answer is None:
            return 0

        try:
            choice = int(answer.strip())
        except ValueError:
            choice = None

        handler = HANDLERS.get(choice)
        if handler is None:
            session.say("Invalid choice. Please try again.")
            continue

        status = handler(session)
        if status is not None:
            return status
