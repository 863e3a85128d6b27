# access.py
# Decides whether a requested file can be shown inline.
import enum
import os
from typing import NamedTuple

VIEWABLE_EXTENSIONS = {".md", ".pdf", ".html", ".txt", ".png", ".jpg", ".jpeg", ".gif"}
REFUSAL_MESSAGE = "This file cannot be viewed in the browser."
SEPARATORS = os.sep + (os.altsep or "")


class Outcome(enum.Enum):
    VIEWABLE = "viewable"
    REFUSED = "refused"
    NOT_FOUND = "not_found"


class ViewDecision(NamedTuple):
    outcome: Outcome
    path: str


def join_base(base_directory: str, relative_path: str) -> str:
    """
    Join a request path onto the base directory.
    Leading separators are dropped so the result starts at the base,
    but '..' segments are kept as given.
    """
    relative_path = (relative_path or "").lstrip(SEPARATORS)
    return os.path.normpath(os.path.join(base_directory, relative_path))


def is_viewable_name(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in VIEWABLE_EXTENSIONS


def classify_file(path) -> ViewDecision:
    if path is None or not os.path.exists(path):
        return ViewDecision(Outcome.NOT_FOUND, path)
    if os.path.isfile(path) and is_viewable_name(path):
        return ViewDecision(Outcome.VIEWABLE, path)
    return ViewDecision(Outcome.REFUSED, path)


def resolve_for_view(base_directory: str, relative_path: str) -> ViewDecision:
    return classify_file(join_base(base_directory, relative_path))
