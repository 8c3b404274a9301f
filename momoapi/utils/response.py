"""
Response decoding and status interpretation for MoMo API calls.
"""

import json
import logging
from typing import Any

from ..constants import MUTATION_SUCCESS_STATUS, READ_SUCCESS_STATUS
from ..exceptions import APIError
from ..result import Err, Ok, Result

logger = logging.getLogger(__name__)


def decode_body(body: Any) -> Any:
    """
    Decode a raw response body.

    Empty bodies decode to an empty dict and undecodable text is returned
    as-is. Never raises.
    """
    if body is None or body == "" or body == b"":
        return {}
    if isinstance(body, bytes):
        try:
            body = body.decode('utf-8')
        except UnicodeDecodeError:
            return body
    if not isinstance(body, str):
        return body
    try:
        return json.loads(body)
    except ValueError:
        return body


def interpret_mutation(status_code: int, body: Any, reference_id: str) -> Result:
    """202 yields the reference id; any other status is an APIError."""
    if status_code == MUTATION_SUCCESS_STATUS:
        return Ok(reference_id)

    decoded = decode_body(body)
    logger.warning(f"MoMo request {reference_id} rejected with status {status_code}: {decoded}")
    return Err(APIError(status_code, decoded))


def interpret_read(status_code: int, body: Any) -> Result:
    """200 yields the decoded body; any other status is an APIError."""
    decoded = decode_body(body)
    if status_code == READ_SUCCESS_STATUS:
        return Ok(decoded)

    logger.warning(f"MoMo lookup failed with status {status_code}: {decoded}")
    return Err(APIError(status_code, decoded))
