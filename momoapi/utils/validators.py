"""
Validation utilities for MoMo payment and transfer requests.

Every rule is applied and all violations are reported together. Nothing in
this module raises or performs I/O.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, List, Optional

from ..constants import MAX_MESSAGE_BYTES, MESSAGE_FIELDS, PartyIdType
from ..exceptions import ValidationError
from ..result import Err, Ok, Result

AMOUNT_PATTERN = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
CURRENCY_PATTERN = re.compile(r'[A-Z]{3}')
MSISDN_PATTERN = re.compile(r'\+?[0-9]{10,15}')
EMAIL_PATTERN = re.compile(r'[^\s@]+@[^\s@]+\.[^\s@]+')

PARTY_ID_TYPES = tuple(t.value for t in PartyIdType)


@dataclass(frozen=True)
class FieldError:
    """A single rule violation on one request field."""
    field: str
    message: str
    value: Any = None


def _missing(body: Mapping, key: str) -> bool:
    return body.get(key) is None


def _blank(value: Any) -> bool:
    return value == ""


def _present(body: Mapping, key: str) -> bool:
    """Field exists and passed the required check."""
    return not _missing(body, key) and not _blank(body[key])


def parse_amount(value: str) -> Optional[Decimal]:
    """
    Parse an amount string as a decimal number, exponent notation included.

    Returns None when the string is not a finite number.
    """
    if not AMOUNT_PATTERN.fullmatch(value):
        return None
    try:
        amount = Decimal(value)
    except InvalidOperation:
        return None
    return amount if amount.is_finite() else None


def check_required(body: Mapping, party_field: str) -> List[FieldError]:
    errors = []
    for key in ('amount', 'currency', 'externalId', party_field):
        if _missing(body, key):
            errors.append(FieldError(key, f"{key} is required", None))
        elif _blank(body[key]):
            errors.append(FieldError(key, f"{key} cannot be empty", body[key]))
    return errors


def check_amount(body: Mapping, party_field: str) -> List[FieldError]:
    if not _present(body, 'amount'):
        return []

    value = body['amount']
    if not isinstance(value, str):
        return [FieldError('amount', "amount must be a string", value)]

    amount = parse_amount(value)
    if amount is None:
        return [FieldError('amount', "amount must be a valid number", value)]
    if amount <= 0:
        return [FieldError('amount', "amount must be positive", value)]
    return []


def check_currency(body: Mapping, party_field: str) -> List[FieldError]:
    if not _present(body, 'currency'):
        return []

    value = body['currency']
    if not isinstance(value, str) or not CURRENCY_PATTERN.fullmatch(value):
        return [FieldError('currency', "currency must be a 3-letter ISO code", value)]
    return []


def check_external_id(body: Mapping, party_field: str) -> List[FieldError]:
    if not _present(body, 'externalId'):
        return []

    value = body['externalId']
    if not isinstance(value, str):
        return [FieldError('externalId', "externalId must be a string", value)]
    return []


def check_party(body: Mapping, party_field: str) -> List[FieldError]:
    if not _present(body, party_field):
        return []

    party = body[party_field]
    if not isinstance(party, Mapping):
        return [FieldError(party_field, f"{party_field} must be an object", party)]

    errors = []
    type_field = f"{party_field}.partyIdType"
    id_field = f"{party_field}.partyId"
    id_type = party.get('partyIdType')
    party_id = party.get('partyId')

    if id_type is None:
        errors.append(FieldError(type_field, f"{type_field} is required", None))
    elif _blank(id_type):
        errors.append(FieldError(type_field, f"{type_field} cannot be empty", id_type))
    elif id_type not in PARTY_ID_TYPES:
        errors.append(FieldError(
            type_field,
            f"{type_field} must be one of: {', '.join(PARTY_ID_TYPES)}",
            id_type
        ))

    if party_id is None:
        errors.append(FieldError(id_field, f"{id_field} is required", None))
    elif _blank(party_id):
        errors.append(FieldError(id_field, f"{id_field} cannot be empty", party_id))
    elif not isinstance(party_id, str):
        errors.append(FieldError(id_field, f"{id_field} must be a string", party_id))
    elif id_type == PartyIdType.MSISDN.value and not MSISDN_PATTERN.fullmatch(party_id):
        errors.append(FieldError(
            id_field,
            f"{id_field} must be a phone number of 10 to 15 digits with an optional leading +",
            party_id
        ))
    elif id_type == PartyIdType.EMAIL.value and not EMAIL_PATTERN.fullmatch(party_id):
        errors.append(FieldError(id_field, f"{id_field} must be a valid email address", party_id))

    return errors


def check_messages(body: Mapping, party_field: str) -> List[FieldError]:
    errors = []
    for key in MESSAGE_FIELDS:
        if key not in body or body[key] is None:
            continue
        value = body[key]
        if not isinstance(value, str):
            errors.append(FieldError(key, f"{key} must be a string", value))
        elif len(value.encode('utf-8')) > MAX_MESSAGE_BYTES:
            errors.append(FieldError(
                key,
                f"{key} must not exceed {MAX_MESSAGE_BYTES} bytes",
                value
            ))
    return errors


RULES: List[Callable[[Mapping, str], List[FieldError]]] = [
    check_required,
    check_amount,
    check_currency,
    check_external_id,
    check_party,
    check_messages,
]


def validate_request(body: Any, party_field: str) -> Result:
    """
    Validate a payment or transfer request.

    Args:
        body: Request mapping as it will be sent on the wire
        party_field: ``payer`` for collections, ``payee`` for disbursements

    Returns:
        ``Ok(body)`` with the body untouched, or ``Err(ValidationError)``
        listing every violated rule
    """
    if body is None or (isinstance(body, Mapping) and not body):
        return Err(ValidationError([
            FieldError('body', "Request body cannot be empty", body)
        ]))
    if not isinstance(body, Mapping):
        return Err(ValidationError([
            FieldError('body', "Request body must be an object", body)
        ]))

    errors = [error for rule in RULES for error in rule(body, party_field)]
    if errors:
        return Err(ValidationError(errors))
    return Ok(body)


def validate_collections(body: Any) -> Result:
    """Validate a request-to-pay or request-to-withdraw body."""
    return validate_request(body, 'payer')


def validate_disbursements(body: Any) -> Result:
    """Validate a transfer or deposit body."""
    return validate_request(body, 'payee')
