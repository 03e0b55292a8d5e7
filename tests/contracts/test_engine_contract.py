import pytest

from seo_sync.errors import MissingTargetError


@pytest.mark.parametrize(
    ("keyword", "content", "has_scores", "has_content_score", "targets"),
    [
        (True, True, True, True, {"output", "contentOutput"}),
        (True, False, True, False, {"output"}),
        (False, True, False, True, {"contentOutput"}),
        (False, False, False, False, set()),
    ],
)
def test_callbacks_registered_only_for_enabled_dimensions(
    build, keyword, content, has_scores, has_content_score, targets
) -> None:
    orchestrator, _, engines = build(
        keyword_analysis_active=keyword, content_analysis_active=content
    )
    orchestrator.start()
    args = engines[0].args

    assert callable(args.callbacks.get_data)
    assert (args.callbacks.save_scores is not None) is has_scores
    assert (args.callbacks.save_content_score is not None) is has_content_score
    assert set(args.targets) == targets
    assert args.keyword_analysis_active is keyword
    assert args.content_analysis_active is content
    assert args.snippet_preview is orchestrator.preview


def test_get_data_returns_a_fresh_snapshot_synchronously(build, form) -> None:
    orchestrator, _, engines = build()
    orchestrator.start()
    get_data = engines[0].args.callbacks.get_data

    first = get_data()
    form.set("title", "Changed")
    second = get_data()

    assert first.title == "Hello"
    assert second.title == "Changed"
    assert orchestrator.latest_snapshot_id == second.snapshot_id


def test_engine_args_carry_locale_targets_and_translations(build) -> None:
    orchestrator, _, engines = build(
        locale="de_DE", translations={"domain": "wordpress-seo", "locale_data": {}}
    )
    orchestrator.start()
    args = engines[0].args

    assert args.locale == "de_DE"
    assert args.translations == {"domain": "wordpress-seo", "locale_data": {}}
    assert args.element_targets == orchestrator.trigger_targets
    assert args.marker is not None


def test_marker_withheld_when_markers_disabled(build) -> None:
    orchestrator, _, engines = build(show_markers="0")
    orchestrator.start()
    assert engines[0].args.marker is None


def test_missing_target_fails_loudly_only_in_strict_mode(build) -> None:
    orchestrator, _, engines = build(targets={"contentOutput": "content-box"})
    orchestrator.start()
    assert engines[0].args.targets == {"contentOutput": "content-box"}

    strict, _, _ = build(targets={"contentOutput": "content-box"}, strict=True)
    with pytest.raises(MissingTargetError):
        strict.start()
