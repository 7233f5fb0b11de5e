from __future__ import annotations

import io
import os
from typing import Optional

from docx import Document
from docx.shared import Pt, RGBColor

from ..core.constants import FORM_QUESTIONS, PALETTE_ROLES
from ..core.types import BrandKit, IntakeForm, ScoreSet
from ..kit.generator import color_palette_explanation, tagline_explanation, typography_explanation
from ..scoring.classification import opportunities_text, score_label, strengths_text
from .exporter_txt import file_slug


def _add_kv_section(doc: Document, title: str, value: str) -> None:
    doc.add_heading(title, level=2)
    text = str(value or "").strip()
    doc.add_paragraph(text if text else "(empty)")


def _hex_to_rgb(color: str) -> Optional[RGBColor]:
    c = (color or "").strip().lstrip("#")
    if len(c) != 6:
        return None
    try:
        return RGBColor.from_string(c.upper())
    except ValueError:
        return None


def build_document(
    form: IntakeForm,
    scores: ScoreSet,
    kit: Optional[BrandKit] = None,
    title: str = "Brand Audit Report",
) -> Document:
    doc = Document()
    doc.add_heading(title, level=1)
    doc.add_paragraph(f"Brand: {form.brand_name}")

    doc.add_paragraph("")  # spacer

    for q in FORM_QUESTIONS:
        _add_kv_section(doc, q.question, form.get(q.field))

    # Scores section
    doc.add_page_break()
    doc.add_heading("Audit Results", level=1)
    doc.add_paragraph(f"Overall Brand Score: {scores.overall} ({score_label(scores.overall)})")
    for name, val in scores.dimensions().items():
        doc.add_paragraph(f"{name}: {val} ({score_label(val)})", style="List Bullet")

    doc.add_heading("Strengths", level=2)
    doc.add_paragraph((kit and kit.insight_summary) or strengths_text(form.brand_name, scores))
    doc.add_heading("Opportunities", level=2)
    doc.add_paragraph((kit and kit.summary_of_findings) or opportunities_text(scores))

    if kit:
        doc.add_page_break()
        doc.add_heading("Brand Kit", level=1)
        _add_kv_section(doc, "Mission", kit.mission)
        _add_kv_section(doc, "Vision", kit.vision)
        _add_kv_section(doc, "Tagline", f"\"{kit.tagline}\"")
        doc.add_paragraph(tagline_explanation(kit, form))
        _add_kv_section(doc, "Typography", kit.typography)
        doc.add_paragraph(typography_explanation(kit, form))

        doc.add_heading("Color Palette", level=2)
        for (role, usage), color in zip(PALETTE_ROLES, kit.color_palette):
            p = doc.add_paragraph(style="List Bullet")
            swatch = p.add_run("■ ")
            rgb = _hex_to_rgb(color)
            if rgb is not None:
                swatch.font.color.rgb = rgb
            p.add_run(f"{role} {color}: {usage}")
        doc.add_paragraph(color_palette_explanation(kit, form))

        doc.add_heading("Actionable Insights", level=2)
        for item in kit.insights:
            doc.add_paragraph(str(item), style="List Bullet")

    # Light typography tweak (optional)
    style = doc.styles["Normal"]
    style.font.name = "Calibri"
    style.font.size = Pt(11)

    return doc


def render_docx_bytes(form: IntakeForm, scores: ScoreSet, kit: Optional[BrandKit] = None) -> bytes:
    buf = io.BytesIO()
    build_document(form, scores, kit=kit).save(buf)
    return buf.getvalue()


def export_docx_file(
    out_dir: str,
    form: IntakeForm,
    scores: ScoreSet,
    kit: Optional[BrandKit] = None,
    filename: Optional[str] = None,
) -> str:
    os.makedirs(out_dir, exist_ok=True)
    if not filename:
        filename = f"brand_audit_{file_slug(form.brand_name)}.docx"
    path = os.path.join(out_dir, filename)

    build_document(form, scores, kit=kit).save(path)
    return path
