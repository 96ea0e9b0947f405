"""
JSON endpoints of the mx-ids REST service.

A rejected identifier is a normal answer (HTTP 200, ``valid: false``); HTTP
400 is reserved for request bodies that cannot be read or do not match the
expected model.
"""

import logging
from typing import Any, Dict, List, Tuple, Type

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

import mx_ids_lib
from mx_ids_api.errors import (
    ERROR_BATCH_TOO_LARGE,
    ERROR_INVALID_IDENTIFIERS,
    ERROR_INVALID_PAYLOAD,
    ERROR_NO_JSON_BODY,
    error_as_dict,
)
from mx_ids_lib.anonymizer import Anonymizer
from mx_ids_lib.validators import check_curp, check_rfc
from mx_ids_lib.data_models.identifiers import (
    AnonymizeTextModel,
    BatchIdentifiersModel,
    EmployeeIdentifiersModel,
    IdentifierModel,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("mx_ids_api", __name__)

_anonymizer = Anonymizer()


class _BadRequest(Exception):
    def __init__(self, payload: Dict[str, Any]):
        super().__init__(payload.get("error"))
        self.payload = payload


def _error_messages(exc: ValidationError) -> List[str]:
    """
    Human-readable messages from a pydantic error, one per failing field.

    Messages raised by our own field validators are returned verbatim.
    """
    messages = []
    for err in exc.errors():
        ctx_error = (err.get("ctx") or {}).get("error")
        if err.get("type") == "value_error" and ctx_error is not None:
            messages.append(str(ctx_error))
        else:
            loc = ".".join(str(p) for p in err.get("loc", ()))
            messages.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg"))
    return messages


def _parse_body(model_cls: Type[BaseModel]) -> BaseModel:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        logger.warning("[%s] request without a JSON object body", request.path)
        raise _BadRequest(error_as_dict(ERROR_NO_JSON_BODY))
    try:
        return model_cls(**body)
    except ValidationError as exc:
        messages = _error_messages(exc)
        logger.warning("[%s] invalid payload: %s", request.path, messages)
        raise _BadRequest(error_as_dict(ERROR_INVALID_PAYLOAD, "; ".join(messages)))


@api_bp.errorhandler(_BadRequest)
def _handle_bad_request(exc: _BadRequest) -> Tuple[Any, int]:
    return jsonify(exc.payload), 400


@api_bp.route("/ping", methods=["GET"])
def ping():
    return jsonify({"status": "ok"})


@api_bp.route("/version", methods=["GET"])
def version():
    return jsonify({"version": mx_ids_lib.__version__})


@api_bp.route("/validate/curp", methods=["POST"])
def validate_curp():
    payload = _parse_body(IdentifierModel)
    result = check_curp(payload.value)
    logger.debug("[curp] %s -> %s", result.identifier, result.reason.value)
    return jsonify(result.model_dump(mode="json"))


@api_bp.route("/validate/rfc", methods=["POST"])
def validate_rfc():
    payload = _parse_body(IdentifierModel)
    result = check_rfc(payload.value)
    logger.debug("[rfc] %s -> %s", result.identifier, result.reason.value)
    return jsonify(result.model_dump(mode="json"))


@api_bp.route("/validate/batch", methods=["POST"])
def validate_batch():
    payload = _parse_body(BatchIdentifiersModel)
    max_size = current_app.config["MAX_BATCH_SIZE"]
    total = len(payload.curp) + len(payload.rfc)
    if total > max_size:
        return (
            jsonify(
                error_as_dict(
                    ERROR_BATCH_TOO_LARGE,
                    f"{total} identifiers sent, at most {max_size} allowed",
                )
            ),
            400,
        )

    logger.debug("[batch] %d CURP, %d RFC", len(payload.curp), len(payload.rfc))
    return jsonify(
        {
            "curp": [check_curp(v).model_dump(mode="json") for v in payload.curp],
            "rfc": [check_rfc(v).model_dump(mode="json") for v in payload.rfc],
        }
    )


@api_bp.route("/validate/employee", methods=["POST"])
def validate_employee():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify(error_as_dict(ERROR_NO_JSON_BODY)), 400
    try:
        record = EmployeeIdentifiersModel(**body)
    except ValidationError as exc:
        messages = _error_messages(exc)
        logger.debug("[employee] rejected: %s", messages)
        response = error_as_dict(ERROR_INVALID_IDENTIFIERS, " ".join(messages))
        response["messages"] = messages
        return jsonify(response), 400

    return jsonify({"valid": True, **record.model_dump()})


@api_bp.route("/anonymize_text", methods=["POST"])
def anonymize_text():
    payload = _parse_body(AnonymizeTextModel)
    return jsonify({"anonymized_text": _anonymizer.anonymize(payload.text)})
