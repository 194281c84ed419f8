"""
Best-effort recovery of the suggestions array from free-form model output.

The model is told to answer with JSON only, but it does not always comply. Recovery
runs an ordered chain of strategies (direct parse, then bracket slice) and falls
back to a single synthetic "raw" suggestion carrying the untouched text.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from go_outing.api.models.schemas import Suggestion

logger = logging.getLogger(__name__)

RAW_DESCRIPTION_LIMIT = 1000
RAW_COST_CAP = 500
WRAPPER_KEYS = ("data", "result", "output")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


def _loads(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def is_present(value: Any) -> bool:
    """Objects and arrays count as present even when empty; null, false, 0 and "" do not."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)) and value == 0:
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


@dataclass(frozen=True)
class Recovered:
    strategy: str
    candidate: Any


class DirectParse:
    name = "direct"

    def attempt(self, text: str) -> Optional[Recovered]:
        try:
            parsed = _loads(text)
        except (ValueError, RecursionError):
            return None
        if not is_present(parsed):
            return None
        return Recovered(self.name, parsed)


class SliceParse:
    """Parse the span between the first opening and the last closing bracket."""

    name = "slice"

    def attempt(self, text: str) -> Optional[Recovered]:
        start = text.find("{")
        if start == -1:
            start = text.find("[")
        if start == -1:
            return None
        end = max(text.rfind("}"), text.rfind("]"))
        if end < start:
            return None
        try:
            parsed = _loads(text[start : end + 1])
        except (ValueError, RecursionError):
            return None
        return Recovered(self.name, parsed)


RecoveryStrategy = Union[DirectParse, SliceParse]

RECOVERY_CHAIN: Sequence[RecoveryStrategy] = (DirectParse(), SliceParse())


def extract_json(text: str, chain: Sequence[RecoveryStrategy] = RECOVERY_CHAIN) -> Optional[Recovered]:
    for strategy in chain:
        recovered = strategy.attempt(text)
        if recovered is not None:
            return recovered
    return None


def raw_fallback(text: str, budget: Union[int, float], location: str) -> List[Dict[str, Any]]:
    suggestion = Suggestion(
        id="ai_raw",
        title="AI result (raw)",
        description=text[:RAW_DESCRIPTION_LIMIT],
        estimatedCost=min(budget, RAW_COST_CAP),
        image="",
        locationDetails=location,
        itinerary=[],
        costBreakdown=[],
        tips=[],
        bestTime="",
    )
    return [suggestion.model_dump()]


def resolve_suggestions(candidate: Any) -> List[Any]:
    """Pick the suggestions list out of a parsed candidate; precedence is fixed."""
    if isinstance(candidate, dict) and isinstance(candidate.get("suggestions"), list):
        return candidate["suggestions"]
    if isinstance(candidate, list):
        return candidate
    if isinstance(candidate, dict):
        for key in WRAPPER_KEYS:
            if isinstance(candidate.get(key), list):
                return candidate[key]
    return [candidate]


def normalize_suggestions(text: str, budget: Union[int, float], location: str) -> Dict[str, List[Any]]:
    if not isinstance(text, str):
        raise TypeError(f"expected completion text, got {type(text).__name__}")

    recovered = extract_json(text)
    if recovered is None:
        logger.info("No JSON recovered from completion (%d chars); returning raw fallback", len(text))
        return {"suggestions": raw_fallback(text, budget, location)}

    suggestions = resolve_suggestions(recovered.candidate)
    logger.debug("Recovered %d suggestion(s) via %s parse", len(suggestions), recovered.strategy)
    return {"suggestions": suggestions}
