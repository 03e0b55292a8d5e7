from seo_sync.preview.permalink import (
    CompletedRequest,
    PermalinkWatcher,
    is_permalink_request,
    url_path_from_response,
)

RESPONSE = "<div id='editable-post-name-full'>hello-world</div>"
PERMALINK_DATA = "action=sample-permalink&post_id=42&new_title=Hello"


def test_slug_is_read_from_response() -> None:
    assert url_path_from_response(RESPONSE, "Hello") == "hello-world"
    nested = "Permalink: <a><span id=\"editable-post-name-full\">nested-slug</span></a>"
    assert url_path_from_response(nested, "Hello") == "nested-slug"


def test_empty_or_malformed_response_falls_back_to_title() -> None:
    assert url_path_from_response("", "Hello") == "Hello"
    assert url_path_from_response("<div>no slug here", "Hello") == "Hello"
    assert url_path_from_response("-1", "Hello") == "Hello"
    assert url_path_from_response("<span id='editable-post-name-full'> </span>", "Hello") == "Hello"


def test_only_permalink_requests_match() -> None:
    assert is_permalink_request(
        CompletedRequest("https://example.org/wp-admin/admin-ajax.php", PERMALINK_DATA, RESPONSE)
    )
    assert not is_permalink_request(
        CompletedRequest("https://example.org/wp-admin/admin-ajax.php", "action=heartbeat", "")
    )
    assert not is_permalink_request(
        CompletedRequest("https://example.org/wp-json/wp/v2/posts", PERMALINK_DATA, RESPONSE)
    )
    assert not is_permalink_request(
        CompletedRequest("https://example.org/wp-admin/admin-ajax.php", None, RESPONSE)
    )


def test_watcher_forwards_slug_for_current_post() -> None:
    received: list[str] = []
    watcher = PermalinkWatcher(title=lambda: "Hello", on_slug=received.append, post_id="42")

    slug = watcher.on_request_completed(
        CompletedRequest("/wp-admin/admin-ajax.php", PERMALINK_DATA, RESPONSE)
    )

    assert slug == "hello-world"
    assert received == ["hello-world"]


def test_watcher_drops_response_for_another_post() -> None:
    received: list[str] = []
    watcher = PermalinkWatcher(title=lambda: "Hello", on_slug=received.append, post_id="7")

    slug = watcher.on_request_completed(
        CompletedRequest("/wp-admin/admin-ajax.php", PERMALINK_DATA, RESPONSE)
    )

    assert slug is None
    assert received == []
