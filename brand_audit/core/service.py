from __future__ import annotations

import os
import time
from typing import Any, Callable, Dict, Optional
from urllib.parse import quote

import requests

from . import config
from .constants import CONTACT_SUBJECT
from .types import IntakeForm, KitSource, RemoteKit, ScoreSet, SubmissionOutcome, SynthesizedKit
from ..export.exporter_docx import export_docx_file
from ..export.exporter_txt import export_txt_file
from ..kit.generator import synthesize_kit
from ..scoring.fallback import fallback_scores
from ..webhook.client import WebhookClient, WebhookError
from ..webhook.response_parser import ResponseParseError

# NOTE:
# This module holds the side effects the wizard needs (network, sleeping).
# flow.py stays a plain state machine and calls in here.


# -----------------------------
# Submission
# -----------------------------
def submit_intake(form: IntakeForm, client: Optional[WebhookClient] = None) -> SubmissionOutcome:
    """
    Post the form to the webhook.

    - 2xx + well-formed output => parsed scores + RemoteKit
    - anything else            => fallback scores, no kit

    Never raises for network / HTTP / payload problems.
    """
    client = client or WebhookClient()
    try:
        scores, kit = client.audit(form)
    except (requests.RequestException, WebhookError, ResponseParseError) as e:
        print(f"[Service] Webhook failed, using fallback scores: {e}", flush=True)
        return SubmissionOutcome(scores=fallback_scores(), kit=None, error=str(e))

    return SubmissionOutcome(scores=scores, kit=RemoteKit(kit))


# -----------------------------
# Kit
# -----------------------------
def resolve_kit(
    form: IntakeForm,
    existing: Optional[KitSource],
    delay_sec: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> KitSource:
    """
    Reuse whatever kit we already have; otherwise synthesize one from the form.
    The synthesized path waits a bit so it feels like the webhook.
    """
    if existing is not None:
        return existing

    delay = config.kit_delay_sec() if delay_sec is None else delay_sec
    if delay > 0:
        sleep(delay)
    print("[Service] Synthesized brand kit from intake form", flush=True)
    return SynthesizedKit(synthesize_kit(form))


# -----------------------------
# Contact
# -----------------------------
def contact_mailto(email: Optional[str] = None, subject: str = CONTACT_SUBJECT) -> str:
    return f"mailto:{email or config.contact_email()}?subject={quote(subject)}"


# -----------------------------
# Export
# -----------------------------
def export(
    form: IntakeForm,
    scores: ScoreSet,
    kit: Optional[KitSource] = None,
    fmt: str = "docx",
    out_dir: str = config.EXPORTS_DIR,
) -> Dict[str, Any]:
    os.makedirs(out_dir, exist_ok=True)
    brand_kit = kit.kit if kit is not None else None

    if fmt.lower() == "txt":
        path = export_txt_file(out_dir, form, scores, kit=brand_kit)
        return {"brand_name": form.brand_name, "format": "txt", "path": path}

    path = export_docx_file(out_dir, form, scores, kit=brand_kit)
    return {"brand_name": form.brand_name, "format": "docx", "path": path}
