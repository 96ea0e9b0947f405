from pathlib import Path

from mx_ids_api.app import create_app
from mx_ids_api.errors import (
    ERROR_BATCH_TOO_LARGE,
    ERROR_INVALID_IDENTIFIERS,
    ERROR_INVALID_PAYLOAD,
    ERROR_NO_JSON_BODY,
)
from mx_ids_lib.data_models.identifiers import CURP_INVALID_MSG, RFC_INVALID_MSG


def test_ping(api_client):
    resp = api_client.get("/api/ping")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_version(api_client):
    resp = api_client.get("/api/version")
    assert resp.status_code == 200
    version_file = Path(__file__).resolve().parent.parent / ".version"
    assert resp.get_json()["version"] == version_file.read_text().strip()


def test_validate_curp(api_client):
    resp = api_client.post("/api/validate/curp", json={"value": "gode561231hdfrrn00"})
    assert resp.status_code == 200
    assert resp.get_json() == {
        "identifier": "GODE561231HDFRRN00",
        "kind": "curp",
        "valid": True,
        "reason": "ok",
        "date": "1956-12-31",
    }


def test_invalid_identifier_is_not_an_http_error(api_client):
    resp = api_client.post("/api/validate/rfc", json={"value": "ABC680524P71"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["valid"] is False
    assert body["reason"] == "checksum_mismatch"
    assert body["kind"] == "rfc_moral"


def test_missing_body(api_client):
    resp = api_client.post("/api/validate/rfc")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": ERROR_NO_JSON_BODY}


def test_body_without_value(api_client):
    resp = api_client.post("/api/validate/curp", json={"curp": "GODE561231HDFRRN00"})
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == ERROR_INVALID_PAYLOAD
    assert "value" in body["message"]


def test_validate_batch(api_client):
    resp = api_client.post(
        "/api/validate/batch",
        json={
            "curp": ["GODE561231HDFRRN00", "GODE561231HDFRRN01"],
            "rfc": ["GODE561231GR8"],
        },
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert [r["valid"] for r in body["curp"]] == [True, False]
    assert [r["valid"] for r in body["rfc"]] == [True]


def test_validate_batch_limit():
    client = create_app(max_batch_size=1).test_client()
    resp = client.post(
        "/api/validate/batch", json={"curp": ["GODE561231HDFRRN00"], "rfc": ["X"]}
    )
    assert resp.status_code == 400
    assert resp.get_json()["error"] == ERROR_BATCH_TOO_LARGE


def test_validate_employee(api_client):
    resp = api_client.post(
        "/api/validate/employee", json={"rfc": "gode561231gr8", "curp": ""}
    )
    assert resp.status_code == 200
    assert resp.get_json() == {"valid": True, "rfc": "GODE561231GR8", "curp": None}


def test_validate_employee_reports_every_invalid_field(api_client):
    resp = api_client.post(
        "/api/validate/employee",
        json={"rfc": "GODE561231GR9", "curp": "GODE561231HDFRRN01"},
    )
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == ERROR_INVALID_IDENTIFIERS
    assert body["messages"] == [RFC_INVALID_MSG, CURP_INVALID_MSG]


def test_anonymize_text(api_client):
    resp = api_client.post(
        "/api/anonymize_text", json={"text": "RFC: GODE561231GR8, CURP: n/a"}
    )
    assert resp.status_code == 200
    assert resp.get_json() == {"anonymized_text": "RFC: {{RFC}}, CURP: n/a"}


def test_unknown_route_returns_json(api_client):
    resp = api_client.get("/api/does-not-exist")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Resource not found"}


def test_wrong_method_returns_json(api_client):
    resp = api_client.get("/api/validate/curp")
    assert resp.status_code == 405
    assert resp.get_json() == {"error": "Method not allowed"}


def test_custom_prefix():
    client = create_app(api_prefix="/v1/").test_client()
    assert client.get("/v1/ping").status_code == 200
    assert client.get("/api/ping").status_code == 404
