from __future__ import annotations

import io

from werkzeug.datastructures import FileStorage

from payroll_portal.employees.payload import needs_multipart, normalize_employee_payload, to_multipart


def _upload():
    return FileStorage(stream=io.BytesIO(b"%PDF"), filename="nbi.pdf", content_type="application/pdf")


def test_create_drops_documents_without_file():
    normalized = normalize_employee_payload(
        {"user_id": 1, "education_backgrounds": {"attainment": "College", "course": "BSIT"}, "documents": [{"type": "NBI"}]}
    )

    assert normalized["documents"] == []
    assert normalized["education_background"] == [{"attainment": "College", "course": "BSIT"}]
    assert "education_backgrounds" not in normalized
    assert needs_multipart(normalized) is False


def test_create_with_upload_goes_multipart():
    normalized = normalize_employee_payload({"user_id": 1, "documents": [{"type": "NBI", "file": _upload()}]})

    assert needs_multipart(normalized) is True
    fields, files = to_multipart(normalized)
    assert ("documents[0][type]", "NBI") in fields
    assert files[0][0] == "documents[0][file]"
    assert files[0][1][0] == "nbi.pdf"


def test_update_keeps_ids_and_documents_without_file():
    normalized = normalize_employee_payload(
        {
            "status": "Active",
            "dependents": [{"id": 4, "name": "Ben", "relationship": "Son"}],
            "documents": [{"id": 9, "type": "TIN"}],
        },
        is_update=True,
    )

    assert needs_multipart(normalized, is_update=True) is False
    fields, _ = to_multipart(normalized, is_update=True)
    assert ("dependents[0][id]", "4") in fields
    assert ("documents[0][id]", "9") in fields
