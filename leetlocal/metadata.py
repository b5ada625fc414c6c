"""Marker-line and class-name extraction from solution source."""

from __future__ import annotations

import re

from leetlocal.models import ProblemMetadata

_MARKER_RE = re.compile(r"@lc app=(.*) id=(.*) lang=(.*)")
_JAVA_CLASS_RE = re.compile(r"public\s+class\s+(\w+)")


def extract_metadata(content: str) -> ProblemMetadata | None:
    """Find ``@lc app=<app> id=<id> lang=<lang>`` anywhere in *content*.

    Values are taken as-is up to the end of the line; only trailing
    whitespace (including a Windows ``\\r``) is dropped.
    """
    match = _MARKER_RE.search(content)
    if match is None:
        return None
    app, problem_id, lang = (group.rstrip() for group in match.groups())
    return ProblemMetadata(app=app, id=problem_id, lang=lang)


def extract_java_class_name(content: str) -> str | None:
    match = _JAVA_CLASS_RE.search(content)
    return match.group(1) if match else None
