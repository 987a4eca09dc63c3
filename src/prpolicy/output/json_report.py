"""JSON reporter for CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from prpolicy.evaluation.models import EvaluationReport


def to_dict(report: EvaluationReport) -> Dict[str, Any]:
    """Convert an EvaluationReport to a JSON-serialisable dict."""
    predicates: List[Dict[str, Any]] = []
    for o in report.outcomes:
        predicates.append({
            "name": o.name,
            "status": o.status,
            "satisfied": o.satisfied,
            "description": o.description,
            "triggers": o.trigger.labels,
            **({"error": o.error} if o.error is not None else {}),
        })

    return {
        "version": "1.0",
        "event": report.event.labels if report.event is not None else None,
        "satisfied": report.satisfied,
        "failed": report.failed,
        "predicates": predicates,
        "duration_ms": report.duration_ms,
    }


def render(report: EvaluationReport) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(report), indent=2)
