from __future__ import annotations

from typing import List

from ..core.types import BrandKit, IntakeForm

DEFAULT_TYPOGRAPHY = (
    "Modern Sans-Serif with clean, readable letterforms that convey professionalism and approachability"
)

DEFAULT_PALETTE: List[str] = ["#3b82f6", "#8b5cf6", "#10b981", "#f59e0b", "#ef4444"]

DEFAULT_INSIGHTS: List[str] = [
    "Strengthen your online presence with consistent visual branding",
    "Develop a content strategy that resonates with your target audience",
    "Implement customer feedback systems to improve engagement",
    "Create brand guidelines to ensure consistency across all touchpoints",
]


def _tagline_suffix(industry: str) -> str:
    # case-sensitive on purpose: "Tech" / "Health" as typed by the user
    if "Tech" in industry:
        return "Innovation Simplified"
    if "Health" in industry:
        return "Wellness Redefined"
    return "Excellence Delivered"


def synthesize_kit(form: IntakeForm) -> BrandKit:
    """
    Deterministic brand kit from the intake form.
    Used when the webhook gave us nothing; same form => same kit.
    """
    industry = form.industry.lower()
    audience = form.target_audience.lower()
    verb = "empower and support" if "help" in form.brand_description.lower() else "innovate and lead"

    return BrandKit(
        mission=(
            f"To {verb} in the {industry} industry while delivering exceptional value to {audience}."
        ),
        vision=(
            f"To become the most trusted and recognized {industry} brand that transforms how "
            f"{audience} experience our services."
        ),
        tagline=f"{form.brand_name} - {_tagline_suffix(form.industry)}",
        typography=DEFAULT_TYPOGRAPHY,
        color_palette=list(DEFAULT_PALETTE),
        insights=list(DEFAULT_INSIGHTS),
    )


# -----------------------------
# Explanations (kit may omit them)
# -----------------------------
def tagline_explanation(kit: BrandKit, form: IntakeForm) -> str:
    if kit.tagline_explanation:
        return kit.tagline_explanation
    return (
        f"This tagline captures {form.brand_name}'s core value proposition in the "
        f"{form.industry.lower()} space. It's memorable, concise, and speaks directly to "
        f"{form.target_audience.lower()}, positioning your brand as both innovative and reliable "
        "in your market."
    )


def typography_explanation(kit: BrandKit, form: IntakeForm) -> str:
    if kit.typography_explanation:
        return kit.typography_explanation
    return (
        f"{kit.typography} is perfect for {form.brand_name} because it combines modern "
        "professionalism with excellent readability. Its clean, geometric design conveys trust "
        f"and reliability while remaining approachable for {form.target_audience.lower()}. "
        "The font's versatility ensures consistent brand communication across all digital and "
        "print materials."
    )


def color_palette_explanation(kit: BrandKit, form: IntakeForm) -> str:
    if kit.color_palette_explanation:
        return kit.color_palette_explanation
    return (
        f"This color palette perfectly reflects {form.brand_name}'s position in the "
        f"{form.industry.lower()} industry. The primary color establishes trust and "
        "professionalism, while the secondary and accent colors add energy and approachability. "
        f"This combination resonates with {form.target_audience.lower()} and differentiates your "
        "brand in the marketplace while maintaining versatility across all brand applications."
    )
