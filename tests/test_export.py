import io
import os

from docx import Document

from brand_audit.core import service
from brand_audit.core.types import RemoteKit, ScoreSet
from brand_audit.export.exporter_docx import render_docx_bytes
from brand_audit.export.exporter_txt import render_txt
from brand_audit.kit.generator import synthesize_kit

SCORES = ScoreSet(overall=82, awareness=74, consistency=40, engagement=20)


def test_render_txt_without_kit(filled_form):
    text = render_txt(filled_form, SCORES)
    assert "What's your brand's name?\nAcme" in text
    assert "Overall Brand Score: 82 (Excellent)" in text
    assert "Brand Consistency: 40 (Needs Improvement)" in text
    assert "strengths in brand awareness" in text
    assert "BRAND KIT" not in text


def test_render_txt_with_kit(filled_form):
    kit = synthesize_kit(filled_form)
    text = render_txt(filled_form, SCORES, kit=kit)
    assert f'Tagline: "{kit.tagline}"' in text
    assert " - Primary: #3b82f6 (Main brand color for logos and key elements)" in text
    for item in kit.insights:
        assert f" - {item}" in text


def test_render_docx_bytes(filled_form):
    kit = synthesize_kit(filled_form)
    data = render_docx_bytes(filled_form, SCORES, kit=kit)

    doc = Document(io.BytesIO(data))
    texts = [p.text for p in doc.paragraphs]
    assert "Brand Audit Report" in texts
    assert kit.mission in texts
    assert any(t.startswith("Overall Brand Score: 82") for t in texts)


def test_service_export_writes_files(tmp_path, filled_form):
    kit = RemoteKit(synthesize_kit(filled_form))

    res = service.export(filled_form, SCORES, kit, fmt="txt", out_dir=str(tmp_path))
    assert res["format"] == "txt"
    assert os.path.basename(res["path"]) == "brand_audit_acme.txt"
    assert os.path.exists(res["path"])

    res = service.export(filled_form, SCORES, None, fmt="docx", out_dir=str(tmp_path))
    assert res["path"].endswith(".docx")
    assert os.path.getsize(res["path"]) > 0
