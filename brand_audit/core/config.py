from __future__ import annotations

import os


def env_bool(key: str, default: str = "0") -> bool:
    """
    Env bool parser.
    Accepts: 1/0, true/false, yes/no (case-insensitive)
    """
    v = os.getenv(key, default)
    if v is None:
        v = default
    return str(v).strip().lower() in ("1", "true", "yes", "y")


def env_str(key: str, default: str = "") -> str:
    v = os.getenv(key, default)
    if v is None:
        v = default
    return str(v).strip()


def env_float(key: str, default: str = "0") -> float:
    try:
        return float(env_str(key, default) or default)
    except ValueError:
        return float(default)


DEFAULT_WEBHOOK_URL = (
    "https://pro-aiteam-dev.app.n8n.cloud/webhook-test/0dba3d89-5fa9-4ec1-8e71-81ffdeec2f80"
)
DEFAULT_CONTACT_EMAIL = "contact@proweaver.com"


# -------------------------------------------------
# Runtime getters (read on every call, tests flip env vars)
# -------------------------------------------------
def webhook_url() -> str:
    return env_str("BRAND_AUDIT_WEBHOOK_URL", DEFAULT_WEBHOOK_URL)


def webhook_timeout_sec() -> float:
    return env_float("BRAND_AUDIT_TIMEOUT_SEC", "60")


def verify_ssl() -> bool:
    return env_bool("BRAND_AUDIT_VERIFY_SSL", "1")


def kit_delay_sec() -> float:
    """Artificial pause for the locally synthesized kit (mimics webhook latency)."""
    return max(0.0, env_float("BRAND_AUDIT_KIT_DELAY_SEC", "2"))


def contact_email() -> str:
    return env_str("BRAND_AUDIT_CONTACT_EMAIL", DEFAULT_CONTACT_EMAIL)


def show_debug() -> bool:
    return env_bool("SHOW_DEBUG", "0")


DATA_DIR = env_str("DATA_DIR", "data")
EXPORTS_DIR = os.path.join(DATA_DIR, "exports")
