"""
MTN Mobile Money API client for Django

Collections (payments from consumers) and Disbursements (transfers to payees)
with request validation and structured Ok/Err results.
"""

__version__ = "0.1.0"

from .api import (
    deposit,
    get_basic_user_info,
    get_collections_balance,
    get_disbursements_balance,
    get_payment_status,
    get_transfer_status,
    request_to_pay,
    request_to_withdraw,
    transfer,
    validate_account_holder_status,
)
from .config import MomoConfig
from .result import Err, Ok, Result

__all__ = [
    'Err',
    'MomoConfig',
    'Ok',
    'Result',
    'deposit',
    'get_basic_user_info',
    'get_collections_balance',
    'get_disbursements_balance',
    'get_payment_status',
    'get_transfer_status',
    'request_to_pay',
    'request_to_withdraw',
    'transfer',
    'validate_account_holder_status',
]
