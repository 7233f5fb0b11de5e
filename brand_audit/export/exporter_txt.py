from __future__ import annotations

import os
from typing import Optional

from ..core.constants import FORM_QUESTIONS, PALETTE_ROLES
from ..core.types import BrandKit, IntakeForm, ScoreSet
from ..kit.generator import color_palette_explanation, tagline_explanation, typography_explanation
from ..scoring.classification import opportunities_text, score_label, strengths_text


def render_txt(form: IntakeForm, scores: ScoreSet, kit: Optional[BrandKit] = None) -> str:
    lines = []
    lines.append("BRAND AUDIT REPORT")
    lines.append("=" * 18)
    lines.append("")

    # Intake (order matters)
    for q in FORM_QUESTIONS:
        v = form.get(q.field).strip()
        lines.append(f"{q.question}")
        lines.append(v if v else "(empty)")
        lines.append("")

    lines.append("SCORES")
    lines.append("-" * 6)
    lines.append(f"Overall Brand Score: {scores.overall} ({score_label(scores.overall)})")
    for name, val in scores.dimensions().items():
        lines.append(f"{name}: {val} ({score_label(val)})")
    lines.append("")

    lines.append("Strengths:")
    lines.append((kit and kit.insight_summary) or strengths_text(form.brand_name, scores))
    lines.append("Opportunities:")
    lines.append((kit and kit.summary_of_findings) or opportunities_text(scores))
    lines.append("")

    if kit:
        lines.append("BRAND KIT")
        lines.append("-" * 9)
        lines.append(f"Mission: {kit.mission}")
        lines.append(f"Vision: {kit.vision}")
        lines.append(f"Tagline: \"{kit.tagline}\"")
        lines.append(f" {tagline_explanation(kit, form)}")
        lines.append(f"Typography: {kit.typography}")
        lines.append(f" {typography_explanation(kit, form)}")
        lines.append("Color Palette:")
        for (role, usage), color in zip(PALETTE_ROLES, kit.color_palette):
            lines.append(f" - {role}: {color} ({usage})")
        lines.append(f" {color_palette_explanation(kit, form)}")
        lines.append("Actionable Insights:")
        for item in kit.insights:
            lines.append(f" - {item}")
        lines.append("")

    return "\n".join(lines)


def export_txt_file(
    out_dir: str,
    form: IntakeForm,
    scores: ScoreSet,
    kit: Optional[BrandKit] = None,
    filename: Optional[str] = None,
) -> str:
    os.makedirs(out_dir, exist_ok=True)
    if not filename:
        filename = f"brand_audit_{file_slug(form.brand_name)}.txt"
    path = os.path.join(out_dir, filename)

    content = render_txt(form, scores, kit=kit)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)

    return path


def file_slug(name: str) -> str:
    s = "".join(c if c.isalnum() else "_" for c in (name or "").strip().lower())
    return s.strip("_") or "brand"
