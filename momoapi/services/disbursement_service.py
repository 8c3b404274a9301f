"""
Disbursement service for MTN MoMo.
Pushes transfers and deposits to payees.
"""

import logging
from typing import Any, Dict

from ..constants import APIEndpoints, Product
from ..result import Result
from .base import BaseProductService, external_id_of

logger = logging.getLogger(__name__)


class DisbursementService(BaseProductService):
    """
    Service for Disbursements operations.
    """

    product = Product.DISBURSEMENTS
    party_field = 'payee'

    balance_endpoint = APIEndpoints.DISBURSEMENT_BALANCE
    user_info_endpoint = APIEndpoints.DISBURSEMENT_USER_INFO
    account_active_endpoint = APIEndpoints.DISBURSEMENT_ACCOUNT_ACTIVE

    def transfer(self, config: Any, body: Dict[str, Any]) -> Result:
        """
        Transfer money from the disbursement account to a payee.

        Args:
            config: MomoConfig or mapping with the disbursement credentials
            body: Transfer request with amount, currency, externalId,
                payee {"partyIdType", "partyId"} and optional
                payerMessage / payeeNote

        Returns:
            ``Ok(reference_id)`` or ``Err``
        """
        logger.info(f"Creating transfer for externalId: {external_id_of(body)}")
        return self._submit(config, APIEndpoints.TRANSFER, body)

    def deposit(self, config: Any, body: Dict[str, Any]) -> Result:
        """Deposit money into a payee's account. Same body as ``transfer``."""
        logger.info(f"Creating deposit for externalId: {external_id_of(body)}")
        return self._submit(config, APIEndpoints.DEPOSIT, body)

    def get_transaction_status(self, config: Any, reference_id: str) -> Result:
        """Get the status of a transfer."""
        return self._status(config, APIEndpoints.TRANSFER_STATUS, reference_id)

    def get_deposit_status(self, config: Any, reference_id: str) -> Result:
        """Get the status of a deposit."""
        return self._status(config, APIEndpoints.DEPOSIT_STATUS, reference_id)
