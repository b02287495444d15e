"""Request-body shaping for employee create/update.

The backend accepts JSON, or multipart form data when documents carry
uploaded files. Nested lists use PHP-style bracket keys.
"""
from __future__ import annotations

from typing import Any, Optional


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def has_file(doc: dict[str, Any]) -> bool:
    f = doc.get("file")
    return f is not None and hasattr(f, "read") and bool(getattr(f, "filename", True))


def normalize_documents(docs: Any, *, is_update: bool = False) -> list[dict[str, Any]]:
    """Keep documents with a type, and (on create) an uploaded file."""
    out = []
    for doc in _as_list(docs):
        if not isinstance(doc, dict) or not doc.get("type"):
            continue
        if is_update or has_file(doc):
            out.append(doc)
    return out


def normalize_employee_payload(data: dict[str, Any], *, is_update: bool = False) -> dict[str, Any]:
    normalized = dict(data)
    normalized["dependents"] = _as_list(data.get("dependents"))
    education = data.get("education_background", data.get("education_backgrounds"))
    normalized.pop("education_backgrounds", None)
    normalized["education_background"] = _as_list(education)
    normalized["documents"] = normalize_documents(data.get("documents"), is_update=is_update)
    return normalized


def needs_multipart(normalized: dict[str, Any], *, is_update: bool = False) -> bool:
    docs = normalized.get("documents") or []
    if is_update:
        return any(has_file(d) for d in docs)
    return len(docs) > 0


def to_multipart(
    normalized: dict[str, Any], *, is_update: bool = False
) -> tuple[list[tuple[str, str]], list[tuple[str, tuple[Optional[str], Any, Optional[str]]]]]:
    """Flatten a normalized payload into (form fields, files) for requests."""
    fields: list[tuple[str, str]] = []
    files: list[tuple[str, tuple[Optional[str], Any, Optional[str]]]] = []

    for key, value in normalized.items():
        if key == "dependents":
            for i, dep in enumerate(value):
                if is_update and dep.get("id"):
                    fields.append((f"dependents[{i}][id]", str(dep["id"])))
                fields.append((f"dependents[{i}][name]", dep.get("name") or ""))
                fields.append((f"dependents[{i}][relationship]", dep.get("relationship") or ""))
        elif key == "education_background":
            for i, edu in enumerate(value):
                if is_update and edu.get("id"):
                    fields.append((f"education_background[{i}][id]", str(edu["id"])))
                fields.append((f"education_background[{i}][attainment]", edu.get("attainment") or ""))
                fields.append((f"education_background[{i}][course]", edu.get("course") or ""))
        elif key == "documents":
            for i, doc in enumerate(value):
                if is_update and doc.get("id"):
                    fields.append((f"documents[{i}][id]", str(doc["id"])))
                fields.append((f"documents[{i}][type]", doc.get("type") or ""))
                if has_file(doc):
                    f = doc["file"]
                    files.append(
                        (f"documents[{i}][file]", (getattr(f, "filename", None), f, getattr(f, "mimetype", None)))
                    )
        else:
            fields.append((key, "" if value is None else str(value)))

    return fields, files
