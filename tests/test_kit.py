from dataclasses import replace

import pytest

from brand_audit.core.service import resolve_kit
from brand_audit.core.types import IntakeForm, RemoteKit, SynthesizedKit
from brand_audit.kit.generator import (
    DEFAULT_INSIGHTS,
    DEFAULT_PALETTE,
    DEFAULT_TYPOGRAPHY,
    color_palette_explanation,
    synthesize_kit,
    tagline_explanation,
)


@pytest.mark.parametrize(
    "industry,suffix",
    [
        ("Tech Services", "Innovation Simplified"),
        ("FinTech", "Innovation Simplified"),
        ("Healthcare", "Wellness Redefined"),
        ("technology", "Excellence Delivered"),  # keyword match is case-sensitive
        ("Consulting", "Excellence Delivered"),
    ],
)
def test_tagline_suffix(industry, suffix):
    kit = synthesize_kit(IntakeForm(brand_name="Acme", industry=industry))
    assert kit.tagline == f"Acme - {suffix}"


def test_mission_and_vision_templates(filled_form):
    kit = synthesize_kit(filled_form)
    assert kit.mission == (
        "To empower and support in the tech services industry while delivering exceptional "
        "value to small business owners."
    )
    assert kit.vision == (
        "To become the most trusted and recognized tech services brand that transforms how "
        "small business owners experience our services."
    )


def test_mission_without_help_keyword():
    form = IntakeForm(brand_name="B", brand_description="We build bikes", industry="Retail",
                      target_audience="Cyclists")
    assert synthesize_kit(form).mission.startswith("To innovate and lead in the retail industry")


def test_synthesized_kit_is_deterministic(filled_form):
    a, b = synthesize_kit(filled_form), synthesize_kit(filled_form)
    assert a == b
    assert a.typography == DEFAULT_TYPOGRAPHY
    assert a.color_palette == DEFAULT_PALETTE
    assert len(a.color_palette) == 5
    assert a.insights == DEFAULT_INSIGHTS
    assert a.insights is not DEFAULT_INSIGHTS


def test_default_explanations_mention_brand(filled_form):
    kit = synthesize_kit(filled_form)
    assert "Acme's core value proposition in the tech services space" in tagline_explanation(kit, filled_form)
    assert "small business owners" in color_palette_explanation(kit, filled_form)


def test_kit_explanations_win_over_defaults(filled_form):
    kit = replace(synthesize_kit(filled_form), tagline_explanation="Because.")
    assert tagline_explanation(kit, filled_form) == "Because."


# -----------------------------
# resolve_kit
# -----------------------------
def test_resolve_kit_reuses_existing_without_sleeping(filled_form):
    existing = RemoteKit(synthesize_kit(filled_form))
    slept = []
    assert resolve_kit(filled_form, existing, delay_sec=5, sleep=slept.append) is existing
    assert slept == []


def test_resolve_kit_synthesizes_after_delay(filled_form):
    slept = []
    out = resolve_kit(filled_form, None, delay_sec=2.0, sleep=slept.append)
    assert isinstance(out, SynthesizedKit)
    assert slept == [2.0]


def test_resolve_kit_delay_from_env(monkeypatch, filled_form):
    monkeypatch.setenv("BRAND_AUDIT_KIT_DELAY_SEC", "0.5")
    slept = []
    resolve_kit(filled_form, None, sleep=slept.append)
    assert slept == [0.5]
