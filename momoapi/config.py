"""
Configuration for MTN MoMo API credentials.

Credentials are explicit values passed into every operation. Nothing here
is cached at module level.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, List, Optional

from django.conf import settings

from .constants import (
    DEFAULT_TARGET_ENVIRONMENT, PRODUCTION_BASE_URL, SANDBOX_BASE_URL,
    SANDBOX_ENVIRONMENT
)
from .exceptions import ConfigurationError
from .result import Err, Ok, Result

REQUIRED_FIELDS = ('subscription_key', 'user_id', 'api_key')

ENV_VARS = {
    'subscription_key': 'MOMO_SUBSCRIPTION_KEY',
    'user_id': 'MOMO_USER_ID',
    'api_key': 'MOMO_API_KEY',
    'target_environment': 'MOMO_TARGET_ENVIRONMENT',
    'base_url': 'MOMO_BASE_URL',
}


def _setting(name: str, default: Any = None) -> Any:
    if not settings.configured:
        return default
    return getattr(settings, name, default)


@dataclass(frozen=True)
class MomoConfig:
    """
    Credential bundle for one MoMo API product.

    ``target_environment`` is sent as the ``X-Target-Environment`` header and
    selects the sandbox host when it is ``"sandbox"``. ``base_url`` overrides
    host selection entirely.
    """
    subscription_key: Optional[str]
    user_id: Optional[str]
    api_key: Optional[str]
    target_environment: Optional[str] = DEFAULT_TARGET_ENVIRONMENT
    base_url: Optional[str] = None

    def __post_init__(self):
        if not self.target_environment:
            object.__setattr__(self, 'target_environment', DEFAULT_TARGET_ENVIRONMENT)

    @property
    def api_base_url(self) -> str:
        """Get MoMo API base URL for this environment."""
        if self.base_url:
            return self.base_url
        if self.target_environment == SANDBOX_ENVIRONMENT:
            return SANDBOX_BASE_URL
        return PRODUCTION_BASE_URL

    def missing_fields(self) -> List[str]:
        """Names of required credential fields that are unset or empty."""
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    def validate(self) -> 'MomoConfig':
        """
        Return self when all credentials are present.

        Raises:
            ConfigurationError: listing the missing fields
        """
        missing = self.missing_fields()
        if missing:
            raise ConfigurationError(
                f"Missing MoMo credentials: {', '.join(missing)}",
                missing=missing
            )
        return self

    @classmethod
    def new(cls, subscription_key, user_id, api_key,
            target_environment=DEFAULT_TARGET_ENVIRONMENT, base_url=None):
        """Create configuration manually. Credentials are checked on use."""
        return cls(subscription_key, user_id, api_key, target_environment, base_url)

    @classmethod
    def from_env(cls, environ: Optional[Mapping] = None) -> 'MomoConfig':
        """
        Build configuration from environment variables.

        Reads MOMO_SUBSCRIPTION_KEY, MOMO_USER_ID, MOMO_API_KEY,
        MOMO_TARGET_ENVIRONMENT and MOMO_BASE_URL. The target environment
        falls back to the Django setting of the same name, then "sandbox".

        Raises:
            ConfigurationError: If any credential variable is missing
        """
        environ = os.environ if environ is None else environ
        values = {name: environ.get(var) or None for name, var in ENV_VARS.items()}
        values['target_environment'] = (
            values['target_environment']
            or _setting('MOMO_TARGET_ENVIRONMENT', DEFAULT_TARGET_ENVIRONMENT)
        )

        config = cls(**values)
        missing = config.missing_fields()
        if missing:
            raise ConfigurationError(
                "Missing environment variables: "
                + ", ".join(ENV_VARS[name] for name in missing),
                missing=missing
            )
        return config

    @classmethod
    def from_app_config(cls) -> 'MomoConfig':
        """
        Build configuration from Django settings.

        Uses the same names as the environment variables, e.g.
        ``MOMO_SUBSCRIPTION_KEY`` in settings.py.

        Raises:
            ConfigurationError: If any credential setting is missing
        """
        values = {name: _setting(var) or None for name, var in ENV_VARS.items()}
        config = cls(**values)
        missing = config.missing_fields()
        if missing:
            raise ConfigurationError(
                "MoMo credentials are not configured in Django settings: "
                + ", ".join(ENV_VARS[name] for name in missing),
                missing=missing
            )
        return config


def resolve_config(config: Any) -> Result:
    """
    Accept a MomoConfig or a plain mapping and check its credentials.

    Returns:
        ``Ok(MomoConfig)`` or ``Err(ConfigurationError)``
    """
    if isinstance(config, Mapping):
        known = {f.name for f in fields(MomoConfig)}
        values = {key: value for key, value in config.items() if key in known}
        for name in REQUIRED_FIELDS:
            values.setdefault(name, None)
        config = MomoConfig(**values)
    elif not isinstance(config, MomoConfig):
        return Err(ConfigurationError(
            f"Expected MomoConfig or mapping, got {type(config).__name__}",
            missing=list(REQUIRED_FIELDS)
        ))

    try:
        return Ok(config.validate())
    except ConfigurationError as e:
        return Err(e)
