"""
Collection service for MTN MoMo.
Requests payments and withdrawals from consumers.
"""

import logging
from typing import Any, Dict

from ..constants import APIEndpoints, Product
from ..result import Result
from .base import BaseProductService, external_id_of

logger = logging.getLogger(__name__)


class CollectionService(BaseProductService):
    """
    Service for Collections operations: request to pay, request to
    withdraw, status lookups, balance and account holder checks.
    """

    product = Product.COLLECTIONS
    party_field = 'payer'

    balance_endpoint = APIEndpoints.COLLECTION_BALANCE
    user_info_endpoint = APIEndpoints.COLLECTION_USER_INFO
    account_active_endpoint = APIEndpoints.COLLECTION_ACCOUNT_ACTIVE

    def request_to_pay(self, config: Any, body: Dict[str, Any]) -> Result:
        """
        Request a payment from a consumer (payer).

        The payer is prompted to approve the payment on their phone. Poll
        ``get_transaction_status`` with the returned reference id to follow it.

        Args:
            config: MomoConfig or mapping with the collection credentials
            body: Payment request:
                - amount: Amount as a string, e.g. "100"
                - currency: ISO 4217 code, e.g. "UGX"
                - externalId: Your own transaction identifier
                - payer: {"partyIdType": "MSISDN", "partyId": "256784123456"}
                - payerMessage: Message shown to the payer (optional)
                - payeeNote: Note for the payee (optional)

        Returns:
            ``Ok(reference_id)`` or ``Err(ValidationError | ConfigurationError |
            AuthenticationError | APIError | TransportError)``
        """
        logger.info(f"Requesting payment for externalId: {external_id_of(body)}")
        return self._submit(config, APIEndpoints.REQUEST_TO_PAY, body)

    def request_to_withdraw(self, config: Any, body: Dict[str, Any]) -> Result:
        """
        Request a withdrawal from a consumer's account.

        Takes the same body as ``request_to_pay``.
        """
        logger.info(f"Requesting withdrawal for externalId: {external_id_of(body)}")
        return self._submit(config, APIEndpoints.REQUEST_TO_WITHDRAW, body)

    def get_transaction_status(self, config: Any, reference_id: str) -> Result:
        """
        Get the status of a request to pay.

        Returns:
            ``Ok(transaction)`` where ``transaction["status"]`` is PENDING,
            SUCCESSFUL or FAILED, or ``Err``
        """
        return self._status(config, APIEndpoints.REQUEST_TO_PAY_STATUS, reference_id)

    def get_withdrawal_status(self, config: Any, reference_id: str) -> Result:
        """Get the status of a request to withdraw."""
        return self._status(config, APIEndpoints.REQUEST_TO_WITHDRAW_STATUS, reference_id)
