from __future__ import annotations

import json
import math
import re
from typing import Any, Dict, List, Optional, Tuple

from ..core.types import BrandKit, ScoreSet


class ResponseParseError(ValueError):
    pass


_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

PALETTE_KEYS = ["primary", "secondary", "accent", "background", "text"]


def parse_body(text: str) -> Dict[str, Any]:
    """
    Decode the webhook body.
    Accepts a JSON object, or a one-element array wrapping it (n8n "respond with all items").
    """
    if not text or not text.strip():
        raise ResponseParseError("Empty webhook response")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Webhook response is not JSON: {e.msg}\n--- Raw ---\n{text[:800]}") from e

    if isinstance(data, list) and len(data) == 1:
        data = data[0]
    if not isinstance(data, dict):
        raise ResponseParseError("Webhook response root must be an object")
    return data


def parse_percent(value: Any, key: str) -> int:
    """
    "82%" -> 82. Leading integer only, like a lenient parseInt: "82.5%" -> 82.
    Plain numbers are accepted too.
    """
    if isinstance(value, bool):
        raise ResponseParseError(f"'{key}' must be a percentage string")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ResponseParseError(f"'{key}' is not finite")
        return int(value)
    if not isinstance(value, str):
        raise ResponseParseError(f"'{key}' must be a percentage string")

    m = _LEADING_INT.match(value.replace("%", ""))
    if not m:
        raise ResponseParseError(f"'{key}' is not numeric: {value!r}")
    return int(m.group(1))


def _require(obj: Dict[str, Any], key: str) -> Any:
    if key not in obj or obj[key] is None:
        raise ResponseParseError(f"Missing '{key}' in webhook output")
    return obj[key]


def _require_str(obj: Dict[str, Any], key: str) -> str:
    val = _require(obj, key)
    if not isinstance(val, str):
        raise ResponseParseError(f"'{key}' must be a string")
    return val


def _nested_str(obj: Dict[str, Any], key: str, inner: str) -> str:
    node = _require(obj, key)
    if not isinstance(node, dict):
        raise ResponseParseError(f"'{key}' must be an object")
    return _require_str(node, inner)


def _optional_str(obj: Dict[str, Any], key: str) -> Optional[str]:
    val = obj.get(key)
    if not isinstance(val, str):
        return None
    return val


def parse_scores(output: Dict[str, Any]) -> ScoreSet:
    return ScoreSet(
        overall=parse_percent(_require(output, "brandScore"), "brandScore"),
        awareness=parse_percent(_require(output, "brandAwareness"), "brandAwareness"),
        consistency=parse_percent(_require(output, "brandConsistency"), "brandConsistency"),
        engagement=parse_percent(_require(output, "brandEngagement"), "brandEngagement"),
    )


def parse_kit(output: Dict[str, Any]) -> BrandKit:
    palette_node = _require(output, "colorPalette")
    if not isinstance(palette_node, dict):
        raise ResponseParseError("'colorPalette' must be an object")
    palette = [_require_str(palette_node, k) for k in PALETTE_KEYS]

    insights_node = _require(output, "actionableInsights")
    if not isinstance(insights_node, list):
        raise ResponseParseError("'actionableInsights' must be a list")
    insights: List[str] = [str(x) for x in insights_node]

    return BrandKit(
        mission=_require_str(output, "brandMission"),
        vision=_require_str(output, "brandVision"),
        tagline=_nested_str(output, "brandTagline", "tagline"),
        typography=_nested_str(output, "typography", "fontName"),
        color_palette=palette,
        insights=insights,
        insight_summary=_optional_str(output, "insightSummaryAudit"),
        summary_of_findings=_optional_str(output, "summaryOfFindingsAudit"),
        tagline_explanation=_optional_str(output, "taglineExplanation"),
        typography_explanation=_optional_str(output, "typographyExplanation"),
        color_palette_explanation=_optional_str(output, "colorPaletteExplanation"),
    )


def parse_output(data: Dict[str, Any]) -> Tuple[ScoreSet, BrandKit]:
    """
    Strict: scores and kit are parsed together, any missing/mistyped field
    fails the whole response.
    """
    output = data.get("output")
    if not isinstance(output, dict):
        raise ResponseParseError("Webhook response has no 'output' object")
    return parse_scores(output), parse_kit(output)
