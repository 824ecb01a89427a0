import argparse

from config import Config
from routes import Session, run
from routes.menu import handle_load


def create_session(path=None, validate=False, delimiter=Config.DELIMITER) -> Session:
    session = Session(validate_on_load=validate, delimiter=delimiter)

    # optional catalog to have ready before the first menu
    if path:
        handle_load(session, path)

    return session


def delimiter_arg(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("delimiter must not be empty")
    return value


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Look up courses in a catalog file.")
    parser.add_argument("path", nargs="?", help="catalog file to load at startup")
    parser.add_argument(
        "--validate",
        action="store_true",
        help="check that every prerequisite is a course after each load",
    )
    parser.add_argument(
        "--delimiter",
        type=delimiter_arg,
        default=Config.DELIMITER,
        help="field separator (default: ,)",
    )
    args = parser.parse_args(argv)

    session = create_session(args.path, validate=args.validate, delimiter=args.delimiter)
    return run(session)


if __name__ == "__main__":
    raise SystemExit(main())
