"""Routes completed permalink-generation requests to the preview."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import parse_qs

from bs4 import BeautifulSoup

from seo_sync.obs.log import get_logger

logger = get_logger(__name__)

AJAX_ENDPOINT = "/admin-ajax.php"
PERMALINK_ACTION = "action=sample-permalink"
SLUG_ELEMENT_ID = "editable-post-name-full"


@dataclass(slots=True, frozen=True)
class CompletedRequest:
    """A host page request that has just finished."""

    url: str
    data: str | None
    response_text: str


def is_permalink_request(request: CompletedRequest) -> bool:
    if not request.url.endswith(AJAX_ENDPOINT):
        return False
    return isinstance(request.data, str) and PERMALINK_ACTION in request.data


def request_post_id(request: CompletedRequest) -> str | None:
    if not request.data:
        return None
    values = parse_qs(request.data).get("post_id")
    return values[0] if values else None


def url_path_from_response(response_text: str, fallback_title: str) -> str:
    """Return the generated slug, or the title when none can be read."""
    if not response_text.strip():
        return fallback_title
    soup = BeautifulSoup(f"<div>{response_text}</div>", "html.parser")
    element = soup.find(id=SLUG_ELEMENT_ID)
    if element is None:
        logger.debug("Permalink response has no #%s element", SLUG_ELEMENT_ID)
        return fallback_title
    slug = element.get_text().strip()
    return slug or fallback_title


class PermalinkWatcher:
    """Filters completed requests down to permalink responses for this post.

    `title` supplies the current title at response time. When both the
    request and the session carry a post id and they differ, the response is
    dropped.
    """

    def __init__(
        self,
        *,
        title: Callable[[], str],
        on_slug: Callable[[str], object],
        post_id: str | None = None,
    ) -> None:
        self._title = title
        self._on_slug = on_slug
        self._post_id = post_id

    def on_request_completed(self, request: CompletedRequest) -> str | None:
        if not is_permalink_request(request):
            return None
        request_post = request_post_id(request)
        if self._post_id and request_post and request_post != self._post_id:
            logger.debug(
                "Dropping permalink response for post %s while editing post %s",
                request_post,
                self._post_id,
            )
            return None
        slug = url_path_from_response(request.response_text, self._title())
        self._on_slug(slug)
        return slug
