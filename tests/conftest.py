"""
Pytest configuration and fixtures
"""
import copy
import json

import pytest

from brand_audit.core.types import IntakeForm


WEBHOOK_OUTPUT = {
    "output": {
        "brandScore": "82%",
        "brandAwareness": "74%",
        "brandConsistency": "88%",
        "brandEngagement": "61%",
        "brandMission": "To make cloud backups boring again.",
        "brandVision": "A world where nobody loses a file.",
        "brandTagline": {"tagline": "Acme - Backups You Forget About"},
        "typography": {"fontName": "Inter"},
        "colorPalette": {
            "primary": "#1d4ed8",
            "secondary": "#9333ea",
            "accent": "#22c55e",
            "background": "#f8fafc",
            "text": "#0f172a",
        },
        "actionableInsights": ["Publish case studies", "Unify social visuals"],
        "insightSummaryAudit": "Acme is consistent across channels.",
        "summaryOfFindingsAudit": "Engagement lags behind awareness.",
        "taglineExplanation": "Short and calm.",
        "typographyExplanation": "Inter reads well on screens.",
        "colorPaletteExplanation": "Blue for trust.",
    }
}


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        if text is None:
            text = json.dumps(body) if body is not None else ""
        self.text = text


@pytest.fixture(autouse=True)
def _no_kit_delay(monkeypatch):
    monkeypatch.setenv("BRAND_AUDIT_KIT_DELAY_SEC", "0")
    monkeypatch.setenv("BRAND_AUDIT_WEBHOOK_URL", "https://hooks.example.test/audit")


@pytest.fixture
def webhook_output():
    return copy.deepcopy(WEBHOOK_OUTPUT)


@pytest.fixture
def filled_form():
    return IntakeForm(
        brand_name="Acme",
        brand_description="We help small teams back up their files.",
        industry="Tech Services",
        target_audience="Small Business Owners",
        website_link="https://acme.example",
    )


@pytest.fixture
def fake_post(monkeypatch):
    """
    Replace requests.post in the webhook client.
    Set `.response` (FakeResponse) or `.exc` (exception) before the call.
    """

    class _Recorder:
        response = FakeResponse(200, WEBHOOK_OUTPUT)
        exc = None
        calls = []

        def __call__(self, url, **kwargs):
            self.calls.append({"url": url, **kwargs})
            if self.exc is not None:
                raise self.exc
            return self.response

    rec = _Recorder()
    rec.calls = []
    monkeypatch.setattr("brand_audit.webhook.client.requests.post", rec)
    return rec
