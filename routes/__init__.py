
# menu handlers for the interactive shell (one per menu option)
from .menu import Session, run, HANDLERS    # noqa: F401
