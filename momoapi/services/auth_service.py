"""
Authentication service for MTN MoMo API.
Exchanges API user credentials for a bearer token per product.
"""

import base64
import logging
from typing import Optional

from ..config import MomoConfig, resolve_config
from ..constants import (
    TOKEN_ENDPOINTS, TOKEN_SUCCESS_STATUS, HEADER_AUTHORIZATION,
    HEADER_SUBSCRIPTION_KEY, Product
)
from ..exceptions import AuthenticationError, TokenDecodeError, TransportError
from ..result import Err, Ok, Result
from ..utils.http_client import Transport, open_transport
from ..utils.response import decode_body

logger = logging.getLogger(__name__)


def create_basic_auth_token(config: MomoConfig) -> str:
    """Base64 of ``user_id:api_key``."""
    credentials = f"{config.user_id}:{config.api_key}"
    return base64.b64encode(credentials.encode('utf-8')).decode('ascii')


class AuthService:
    """
    Service for obtaining MoMo access tokens.
    Tokens are not cached; each call performs a fresh exchange.
    """

    def __init__(self, client: Optional[Transport] = None):
        self.client = client

    def get_token(self, product, config: MomoConfig) -> Result:
        """
        Obtain an access token for a product.

        Args:
            product: ``Product.COLLECTIONS`` or ``Product.DISBURSEMENTS``
                (or their string values)
            config: Credentials to exchange

        Returns:
            ``Ok(access_token)``, ``Err(AuthenticationError)`` for a non-200
            answer, ``Err(TokenDecodeError)`` for an unreadable 200 body,
            ``Err(ConfigurationError)`` for missing credentials, or
            ``Err(TransportError)``
        """
        product = Product(product)
        resolved = resolve_config(config)
        if not resolved.ok:
            logger.warning(f"MoMo {product.value} token request skipped: {resolved.error.message}")
            return resolved
        config = resolved.value

        endpoint = TOKEN_ENDPOINTS[product]
        headers = {
            HEADER_AUTHORIZATION: f"Basic {create_basic_auth_token(config)}",
            HEADER_SUBSCRIPTION_KEY: config.subscription_key,
        }

        logger.info(f"Requesting MoMo {product.value} access token")

        with open_transport(config.api_base_url, self.client) as client:
            try:
                status_code, raw_body = client.post(endpoint, None, headers)
            except TransportError as e:
                logger.error(f"MoMo {product.value} token request failed: {e.reason}")
                return Err(e)

        body = decode_body(raw_body)

        if status_code != TOKEN_SUCCESS_STATUS:
            logger.warning(f"MoMo {product.value} authentication failed with status {status_code}")
            return Err(AuthenticationError(
                f"Authentication failed with status {status_code}",
                status_code=status_code,
                body=body
            ))

        token = body.get('access_token') if isinstance(body, dict) else None
        if not token or not isinstance(token, str):
            logger.error(f"MoMo {product.value} token response had no access_token")
            return Err(TokenDecodeError(
                "Token response did not contain an access_token",
                status_code=status_code,
                body=body
            ))

        logger.debug(f"Obtained MoMo {product.value} access token")
        return Ok(token)


def get_token(product, config: MomoConfig, client: Optional[Transport] = None) -> Result:
    """Shortcut for ``AuthService(client).get_token(product, config)``."""
    return AuthService(client).get_token(product, config)
