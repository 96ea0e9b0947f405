"""
Utility helpers for representing API errors as JSON‑serializable dictionaries.
"""

from typing import Dict, Any, Optional

# Error code used when the request body is not a JSON object.
ERROR_NO_JSON_BODY = "No JSON body!"

# Error code used when the body does not match the expected model.
ERROR_INVALID_PAYLOAD = "Invalid payload!"

# Error code used when the batch endpoint receives too many identifiers.
ERROR_BATCH_TOO_LARGE = "Batch too large!"

# Error code used when an employee record carries invalid identifiers.
ERROR_INVALID_IDENTIFIERS = "Invalid identifiers!"


def error_as_dict(error: str, error_msg: Optional[str] = None) -> Dict[str, Any]:
    """
    Convert an error identifier and optional message into a serialisable dictionary.

    Examples
    --------
    >>> error_as_dict("No JSON body!")
    {'error': 'No JSON body!'}

    >>> error_as_dict("Invalid payload!", "value: Field required")
    {'error': 'Invalid payload!', 'message': 'value: Field required'}
    """
    if error_msg is None:
        return {"error": error}

    return {"error": error, "message": error_msg}
