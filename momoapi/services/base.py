"""
Request pipeline shared by the Collections and Disbursements services.

validate -> check config -> authenticate -> reference id -> headers ->
transport -> interpret. The first failing stage ends the call.
"""

import logging
import uuid
from urllib.parse import quote
from typing import Any, Dict, Optional

from ..config import MomoConfig, resolve_config
from ..constants import (
    DEFAULT_ID_TYPE, HEADER_AUTHORIZATION,
    HEADER_REFERENCE_ID, HEADER_SUBSCRIPTION_KEY, HEADER_TARGET_ENVIRONMENT,
    Product
)
from ..exceptions import TransportError
from ..result import Err, Result
from ..utils.formatters import mask_party_id
from ..utils.http_client import Transport, open_transport
from ..utils.response import interpret_mutation, interpret_read
from ..utils.validators import validate_request
from .auth_service import AuthService

logger = logging.getLogger(__name__)


def generate_reference_id() -> str:
    """Fresh v4 UUID string."""
    return str(uuid.uuid4())


def build_headers(token: str, config: MomoConfig, reference_id: Optional[str] = None) -> Dict[str, str]:
    headers = {
        HEADER_AUTHORIZATION: f"Bearer {token}",
        HEADER_SUBSCRIPTION_KEY: config.subscription_key,
        HEADER_TARGET_ENVIRONMENT: config.target_environment,
    }
    if reference_id is not None:
        headers[HEADER_REFERENCE_ID] = reference_id
    return headers


def external_id_of(body: Any) -> Any:
    return body.get('externalId') if isinstance(body, dict) else None


def account_holder_path(template: str, account_holder_id: str, id_type: str = DEFAULT_ID_TYPE) -> str:
    """Fill an account holder endpoint; the provider expects a lowercase type."""
    return template.format(
        idType=quote(str(id_type).lower(), safe=''),
        id=quote(str(account_holder_id), safe='')
    )


class BaseProductService:
    """
    Common operations for one MoMo product.

    Subclasses set ``product`` and ``party_field``. A transport passed to the
    constructor is used for every call; otherwise each call opens its own
    HTTPClient against the config's base URL.
    """

    product: Product
    party_field: str

    def __init__(self, client: Optional[Transport] = None):
        self.client = client

    def _submit(self, config: Any, endpoint: str, body: Any) -> Result:
        """Validate and POST a mutating request, returning its reference id."""
        validated = validate_request(body, self.party_field)
        if not validated.ok:
            logger.warning(
                f"MoMo {self.product.value} request rejected: {validated.error.fields}"
            )
            return validated

        resolved = resolve_config(config)
        if not resolved.ok:
            logger.warning(f"MoMo {self.product.value} request aborted: {resolved.error.message}")
            return resolved
        config = resolved.value

        with open_transport(config.api_base_url, self.client) as client:
            token = AuthService(client).get_token(self.product, config)
            if not token.ok:
                return token

            reference_id = generate_reference_id()
            headers = build_headers(token.value, config, reference_id)
            logger.info(f"Submitting MoMo {self.product.value} request {reference_id} to {endpoint}")

            try:
                status_code, raw_body = client.post(endpoint, validated.value, headers)
            except TransportError as e:
                logger.error(f"MoMo {self.product.value} request {reference_id} failed: {e.reason}")
                return Err(e)

        result = interpret_mutation(status_code, raw_body, reference_id)
        if result.ok:
            logger.info(f"MoMo {self.product.value} request {reference_id} accepted")
        return result

    def _fetch(self, config: Any, endpoint: str, reference_id: Optional[str] = None) -> Result:
        """GET a read endpoint, returning the decoded body."""
        resolved = resolve_config(config)
        if not resolved.ok:
            logger.warning(f"MoMo {self.product.value} lookup aborted: {resolved.error.message}")
            return resolved
        config = resolved.value

        with open_transport(config.api_base_url, self.client) as client:
            token = AuthService(client).get_token(self.product, config)
            if not token.ok:
                return token

            headers = build_headers(token.value, config, reference_id)
            try:
                status_code, raw_body = client.get(endpoint, headers)
            except TransportError as e:
                logger.error(f"MoMo {self.product.value} lookup {endpoint} failed: {e.reason}")
                return Err(e)

        return interpret_read(status_code, raw_body)

    def get_balance(self, config: Any) -> Result:
        """
        Get the available balance of this product's account.

        Returns:
            ``Ok({"availableBalance": ..., "currency": ...})`` or ``Err``
        """
        return self._fetch(config, self.balance_endpoint)

    def get_basic_user_info(self, config: Any, account_holder_id: str,
                            account_holder_id_type: str = DEFAULT_ID_TYPE) -> Result:
        """
        Get basic user information (names) for an account holder.

        Args:
            config: Credentials
            account_holder_id: Phone number, email or party code
            account_holder_id_type: MSISDN (default), EMAIL or PARTY_CODE
        """
        logger.info(f"Looking up MoMo account holder {mask_party_id(account_holder_id)}")
        endpoint = account_holder_path(
            self.user_info_endpoint, account_holder_id, account_holder_id_type
        )
        return self._fetch(config, endpoint)

    def validate_account_holder_status(self, config: Any, account_holder_id: str,
                                       account_holder_id_type: str = DEFAULT_ID_TYPE) -> Result:
        """
        Check whether an account holder is active.

        Returns:
            ``Ok({"result": True | False})`` or ``Err``
        """
        logger.info(f"Checking MoMo account holder {mask_party_id(account_holder_id)} is active")
        endpoint = account_holder_path(
            self.account_active_endpoint, account_holder_id, account_holder_id_type
        )
        return self._fetch(config, endpoint)

    def _status(self, config: Any, template: str, reference_id: str) -> Result:
        endpoint = template.format(referenceId=quote(str(reference_id), safe=''))
        return self._fetch(config, endpoint, reference_id)
