from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Union


FieldName = str


@dataclass(frozen=True)
class IntakeForm:
    brand_name: str = ""
    brand_description: str = ""
    industry: str = ""
    target_audience: str = ""
    website_link: str = ""        # optional

    def get(self, field_name: FieldName) -> str:
        return getattr(self, field_name)

    def with_value(self, field_name: FieldName, value: str) -> "IntakeForm":
        return replace(self, **{field_name: value})

    def to_payload(self) -> List[Dict[str, str]]:
        """Webhook body: a single-element array, website renamed."""
        return [
            {
                "brandName": self.brand_name,
                "industry": self.industry,
                "website": self.website_link,
                "brandDescription": self.brand_description,
                "targetAudience": self.target_audience,
            }
        ]


@dataclass(frozen=True)
class ScoreSet:
    overall: int
    awareness: int
    consistency: int
    engagement: int

    def dimensions(self) -> Dict[str, int]:
        return {
            "Brand Awareness": self.awareness,
            "Brand Consistency": self.consistency,
            "Brand Engagement": self.engagement,
        }


@dataclass(frozen=True)
class BrandKit:
    mission: str
    vision: str
    tagline: str
    typography: str
    color_palette: List[str]      # primary, secondary, accent, background, text
    insights: List[str] = field(default_factory=list)

    insight_summary: Optional[str] = None
    summary_of_findings: Optional[str] = None
    tagline_explanation: Optional[str] = None
    typography_explanation: Optional[str] = None
    color_palette_explanation: Optional[str] = None


# -------------------------------------------------
# Where the kit came from
# -------------------------------------------------
@dataclass(frozen=True)
class RemoteKit:
    kit: BrandKit


@dataclass(frozen=True)
class SynthesizedKit:
    kit: BrandKit


KitSource = Union[RemoteKit, SynthesizedKit]


@dataclass(frozen=True)
class SubmissionOutcome:
    scores: ScoreSet
    kit: Optional[KitSource] = None   # None => fallback path
    error: Optional[str] = None

    @property
    def used_fallback(self) -> bool:
        return self.kit is None
