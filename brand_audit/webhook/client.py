from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import requests

from ..core import config
from ..core.types import BrandKit, IntakeForm, ScoreSet
from .response_parser import parse_body, parse_output


class WebhookError(RuntimeError):
    pass


# -------------------------
# Client
# -------------------------
class WebhookClient:
    """
    Single entry point for the brand-audit webhook.

    The webhook (n8n automation) does the actual scoring and brand-kit
    writing; this client only ships the intake form and decodes the reply.

    Config (env, read at construction):
      - BRAND_AUDIT_WEBHOOK_URL
      - BRAND_AUDIT_TIMEOUT_SEC
      - BRAND_AUDIT_VERIFY_SSL

    Raises WebhookError, ResponseParseError or requests.RequestException.
    The caller decides what to do with them.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout_sec: Optional[float] = None,
        verify_ssl: Optional[bool] = None,
    ):
        self.url = (url if url is not None else config.webhook_url()).strip()
        self.timeout_sec = timeout_sec if timeout_sec is not None else config.webhook_timeout_sec()
        self.verify_ssl = verify_ssl if verify_ssl is not None else config.verify_ssl()

    # -------------------------
    # Public API
    # -------------------------
    def audit(self, form: IntakeForm) -> Tuple[ScoreSet, BrandKit]:
        data = self.post_json(form.to_payload())
        return parse_output(data)

    def post_json(self, payload: Any) -> Dict[str, Any]:
        if not self.url:
            raise WebhookError("BRAND_AUDIT_WEBHOOK_URL is empty")

        print("[Webhook] Payload being sent:", payload, flush=True)

        r = requests.post(
            self.url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout_sec,
            verify=self.verify_ssl,
        )
        if not 200 <= r.status_code < 300:
            raise WebhookError(f"Webhook HTTP {r.status_code}: {r.reason or ''} {r.text[:500]}".strip())

        print("[Webhook] Data sent successfully", flush=True)
        data = parse_body(r.text)
        print("[Webhook] Response:", data, flush=True)
        return data
