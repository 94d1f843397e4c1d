"""Content negotiation: browsers get HTML pages, everything else gets JSON."""

from typing import Optional

from numguess.core.shared_types import MediaType

_HTML_TYPES = (MediaType.HTML, MediaType.XHTML)


def wants_html(accept: Optional[str]) -> bool:
    """True if the Accept header asks for HTML. A missing header means JSON."""
    if not accept:
        return False
    requested = [part.split(";")[0].strip().lower() for part in accept.split(",")]
    return any(media_type in requested for media_type in _HTML_TYPES)
