import json

import pytest

from brand_audit.webhook.client import WebhookClient, WebhookError
from brand_audit.webhook.response_parser import (
    ResponseParseError,
    parse_body,
    parse_output,
    parse_percent,
)

from conftest import FakeResponse


# -----------------------------
# Parser
# -----------------------------
@pytest.mark.parametrize(
    "raw,expected",
    [("82%", 82), ("82", 82), (" 7%", 7), ("82.6%", 82), (91, 91), (64.9, 64)],
)
def test_parse_percent(raw, expected):
    assert parse_percent(raw, "brandScore") == expected


@pytest.mark.parametrize("raw", ["", "%", "high", None, True, [82], float("nan")])
def test_parse_percent_rejects_garbage(raw):
    with pytest.raises(ResponseParseError):
        parse_percent(raw, "brandScore")


def test_parse_output_maps_scores_and_kit(webhook_output):
    scores, kit = parse_output(webhook_output)

    assert (scores.overall, scores.awareness, scores.consistency, scores.engagement) == (82, 74, 88, 61)
    assert kit.tagline == "Acme - Backups You Forget About"
    assert kit.typography == "Inter"
    assert kit.color_palette == ["#1d4ed8", "#9333ea", "#22c55e", "#f8fafc", "#0f172a"]
    assert kit.insights == ["Publish case studies", "Unify social visuals"]
    assert kit.insight_summary == "Acme is consistent across channels."
    assert kit.summary_of_findings == "Engagement lags behind awareness."


def test_explanations_are_optional(webhook_output):
    for key in ("taglineExplanation", "typographyExplanation", "colorPaletteExplanation",
                "insightSummaryAudit", "summaryOfFindingsAudit"):
        del webhook_output["output"][key]

    _, kit = parse_output(webhook_output)
    assert kit.tagline_explanation is None
    assert kit.insight_summary is None


@pytest.mark.parametrize(
    "mutate",
    [
        lambda o: o.pop("brandEngagement"),
        lambda o: o.pop("brandMission"),
        lambda o: o.__setitem__("brandTagline", "just a string"),
        lambda o: o["typography"].pop("fontName"),
        lambda o: o["colorPalette"].pop("accent"),
        lambda o: o.__setitem__("actionableInsights", "one insight"),
    ],
)
def test_malformed_output_fails_whole_parse(webhook_output, mutate):
    mutate(webhook_output["output"])
    with pytest.raises(ResponseParseError):
        parse_output(webhook_output)


def test_non_string_explanations_are_dropped(webhook_output):
    webhook_output["output"]["taglineExplanation"] = {"text": "Short and calm."}
    webhook_output["output"]["insightSummaryAudit"] = ["a", "b"]
    webhook_output["output"]["colorPaletteExplanation"] = 3

    _, kit = parse_output(webhook_output)
    assert kit.tagline_explanation is None
    assert kit.insight_summary is None
    assert kit.color_palette_explanation is None
    assert kit.typography_explanation == "Inter reads well on screens."


def test_missing_output_object():
    with pytest.raises(ResponseParseError):
        parse_output({"result": {}})


def test_parse_body_unwraps_single_item_array(webhook_output):
    assert parse_body(json.dumps([webhook_output])) == webhook_output


@pytest.mark.parametrize("text", ["", "   ", "not json", "[1, 2]", "42"])
def test_parse_body_rejects_non_objects(text):
    with pytest.raises(ResponseParseError):
        parse_body(text)


# -----------------------------
# Client
# -----------------------------
def test_client_reads_url_from_env():
    assert WebhookClient().url == "https://hooks.example.test/audit"


def test_client_posts_json(fake_post, filled_form):
    scores, kit = WebhookClient(timeout_sec=5).audit(filled_form)

    call = fake_post.calls[0]
    assert call["url"] == "https://hooks.example.test/audit"
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["timeout"] == 5
    assert call["json"][0]["website"] == "https://acme.example"
    assert scores.overall == 82
    assert kit.mission == "To make cloud backups boring again."


def test_client_raises_on_http_error(fake_post, filled_form):
    fake_post.response = FakeResponse(502, text="bad gateway", reason="Bad Gateway")
    with pytest.raises(WebhookError, match="502"):
        WebhookClient().audit(filled_form)


@pytest.mark.parametrize("status", [301, 302, 304])
def test_client_treats_redirect_as_failure(fake_post, filled_form, status):
    fake_post.response = FakeResponse(status, text="", reason="Moved")
    with pytest.raises(WebhookError, match=str(status)):
        WebhookClient().audit(filled_form)


def test_client_requires_url(fake_post, filled_form):
    with pytest.raises(WebhookError):
        WebhookClient(url="  ").audit(filled_form)
    assert fake_post.calls == []
