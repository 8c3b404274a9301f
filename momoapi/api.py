"""
Function-style entry points for the most common MoMo operations.

Every function takes the configuration first and accepts an optional
``client`` transport. Results are ``Ok``/``Err`` values:

    from momoapi import MomoConfig, Ok, Err, request_to_pay

    config = MomoConfig.from_env()
    match request_to_pay(config, payment):
        case Ok(reference_id):
            ...
        case Err(error):
            log.warning(error.code)
"""

from typing import Any, Dict, Optional

from .constants import DEFAULT_ID_TYPE
from .result import Result
from .services import CollectionService, DisbursementService
from .utils.http_client import Transport


def request_to_pay(config: Any, body: Dict[str, Any], client: Optional[Transport] = None) -> Result:
    """Request a payment from a consumer. See ``CollectionService.request_to_pay``."""
    return CollectionService(client).request_to_pay(config, body)


def request_to_withdraw(config: Any, body: Dict[str, Any], client: Optional[Transport] = None) -> Result:
    """Request a withdrawal from a consumer account."""
    return CollectionService(client).request_to_withdraw(config, body)


def transfer(config: Any, body: Dict[str, Any], client: Optional[Transport] = None) -> Result:
    """Transfer money to a payee. See ``DisbursementService.transfer``."""
    return DisbursementService(client).transfer(config, body)


def deposit(config: Any, body: Dict[str, Any], client: Optional[Transport] = None) -> Result:
    """Deposit money into a payee account."""
    return DisbursementService(client).deposit(config, body)


def get_collections_balance(config: Any, client: Optional[Transport] = None) -> Result:
    return CollectionService(client).get_balance(config)


def get_disbursements_balance(config: Any, client: Optional[Transport] = None) -> Result:
    return DisbursementService(client).get_balance(config)


def get_payment_status(config: Any, reference_id: str, client: Optional[Transport] = None) -> Result:
    """Status of a request to pay, by the reference id it returned."""
    return CollectionService(client).get_transaction_status(config, reference_id)


def get_transfer_status(config: Any, reference_id: str, client: Optional[Transport] = None) -> Result:
    """Status of a transfer, by the reference id it returned."""
    return DisbursementService(client).get_transaction_status(config, reference_id)


def get_basic_user_info(config: Any, account_holder_id: str,
                        account_holder_id_type: str = DEFAULT_ID_TYPE,
                        client: Optional[Transport] = None) -> Result:
    """Basic user information for an account holder, via the Collections product."""
    return CollectionService(client).get_basic_user_info(
        config, account_holder_id, account_holder_id_type
    )


def validate_account_holder_status(config: Any, account_holder_id: str,
                                   account_holder_id_type: str = DEFAULT_ID_TYPE,
                                   client: Optional[Transport] = None) -> Result:
    """Whether an account holder is active, via the Collections product."""
    return CollectionService(client).validate_account_holder_status(
        config, account_holder_id, account_holder_id_type
    )
