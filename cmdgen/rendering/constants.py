"""Shared constants for output rendering."""

from __future__ import annotations

OUTPUTS: tuple[str, ...] = (
    "runs",
    "inits",
    "definitions",
)

OUTPUT_TEMPLATES: dict[str, str] = {
    "runs": "runs.py.j2",
    "inits": "inits.py.j2",
    "definitions": "definitions.py.j2",
}

# API identifiers whose boto3 service name differs.
DEFAULT_CLIENT_NAMES: dict[str, str] = {
    "applicationautoscaling": "application-autoscaling",
    "cloudwatchlogs": "logs",
}


__all__ = ["DEFAULT_CLIENT_NAMES", "OUTPUTS", "OUTPUT_TEMPLATES"]
