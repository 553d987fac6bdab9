"""Loading of page definitions from JSON documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import cast

from pydantic import ValidationError

from formcheck.exceptions import PageLoadError
from formcheck.logging import get_logger
from formcheck.typing.models import Page

PAGE_FILE_SUFFIX = ".page.json"

logger = get_logger(__name__)


def load_page(path: Path) -> Page:
    """Load one page document.

    The document holds ``id``, ``title`` and a ``fields`` object keyed by field
    key, using the camelCase attribute names. Only literal and field reference
    bounds can be expressed; ``regex`` is a pattern string.

    Args:
        path (Path): Page document path.

    Raises:
        PageLoadError: If the file is missing, not JSON or not a valid page.

    Returns:
        Page: Loaded page; its id defaults to the file name without suffix.
    """
    _validate_page_file_path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PageLoadError(message=f"Page document is not valid JSON: {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise PageLoadError(message=f"Page document must be a JSON object: {path}")

    document = dict(cast("dict[str, object]", payload))
    document.setdefault("id", path.name.removesuffix(PAGE_FILE_SUFFIX))
    try:
        page = Page.model_validate(document)
    except ValidationError as exc:
        raise PageLoadError(message=f"Invalid page document {path}: {exc}") from exc

    logger.debug("Page loaded", extra={"page_path": str(path), "page_id": page.id})
    return page


def load_schema(directory: Path) -> dict[str, Page]:
    """Load every page document of a directory, ordered by file name.

    Args:
        directory (Path): Directory holding ``*.page.json`` files.

    Raises:
        PageLoadError: If the directory does not exist or a document is invalid.

    Returns:
        dict[str, Page]: Pages keyed by page id.
    """
    if not directory.is_dir():
        raise PageLoadError(message=f"Schema directory does not exist: {directory}")

    pages: dict[str, Page] = {}
    for path in sorted(directory.glob(f"*{PAGE_FILE_SUFFIX}")):
        page = load_page(path)
        pages[page.id or path.name] = page
    return pages


def _validate_page_file_path(path: Path) -> None:
    """Validate a page document path before loading.

    Args:
        path (Path): Page document path.

    Raises:
        PageLoadError: If path is not a `pathlib.Path` or not a page document file.
    """
    if not isinstance(path, Path):
        raise PageLoadError(message=f"Page path must be a pathlib.Path instance, got: {type(path)!r}")
    if not path.is_file():
        raise PageLoadError(message=f"Page path is not a file: {path}")
    if not path.name.endswith(PAGE_FILE_SUFFIX):
        raise PageLoadError(message=f"Page path must end with '{PAGE_FILE_SUFFIX}': {path}")
