"""
Utility modules for MTN MoMo operations.
"""

from .http_client import HTTPClient, RawResponse, Transport
from .validators import (
    FieldError,
    validate_collections,
    validate_disbursements,
    validate_request
)
from .response import decode_body
from .formatters import format_currency, mask_party_id

__all__ = [
    'HTTPClient',
    'RawResponse',
    'Transport',
    'FieldError',
    'validate_collections',
    'validate_disbursements',
    'validate_request',
    'decode_body',
    'format_currency',
    'mask_party_id',
]
