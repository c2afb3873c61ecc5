"""Routes raw input to one of: arithmetic preview, direct address, or search query."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import quote

from . import config
from .calculator import classify_arithmetic
from .logging_config import get_logger
from .types import Address, Arithmetic, ClassificationOutcome, SearchEngine, SearchQuery
from .url import is_navigable_address

logger = get_logger("router")

# Characters encodeURIComponent leaves untouched besides letters, digits and "-_."
_URI_COMPONENT_SAFE = "!~*'()"


def route(text: str) -> ClassificationOutcome:
    """Classify raw input. Exactly one outcome holds for every input."""
    value = classify_arithmetic(text)
    if value is not None:
        return Arithmetic(value)
    trimmed = text.strip()
    if is_navigable_address(trimmed):
        return Address(trimmed)
    return SearchQuery(trimmed)


def is_command(text: str) -> bool:
    """A slash command such as ``/g`` or ``/dark``; never submitted as a search."""
    trimmed = text.strip()
    return trimmed.startswith("/") and " " not in trimmed


def resolve_engine_command(
    text: str, engines: Mapping[str, SearchEngine] = config.SEARCH_ENGINES
) -> SearchEngine | None:
    """Return the engine named by ``/<key>``, or None."""
    if not is_command(text):
        return None
    return engines.get(text.strip()[1:].lower())


def search_url(engine: SearchEngine, query: str) -> str:
    """URL that runs ``query`` on ``engine``."""
    return f"{engine.action}?{engine.param}={quote(query, safe=_URI_COMPONENT_SAFE)}"


def submit(text: str, engine: SearchEngine) -> str | None:
    """Return the URL to open when the user submits ``text``, or None if nothing opens.

    Arithmetic input is searched like any other text; the preview only
    replaces the input through ``accept_preview``.
    """
    trimmed = text.strip()
    if not trimmed or is_command(trimmed):
        return None
    if is_navigable_address(trimmed):
        url = Address(trimmed).url
        logger.info("Navigating to %s", url)
        return url
    url = search_url(engine, trimmed)
    logger.info("Searching for %r", trimmed, extra={"engine": engine.key})
    return url


def accept_preview(text: str) -> str:
    """Replace the input with its arithmetic result when there is one."""
    value = classify_arithmetic(text)
    return text if value is None else value
