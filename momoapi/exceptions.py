"""
Error types for MTN MoMo API operations.

Operations in this package do not raise these; they return them wrapped in
``Err``. Calling ``unwrap()`` on a failed result raises the carried error.
"""


class MomoError(Exception):
    """Base error for all MoMo-related failures."""

    code = "momo_error"

    def __init__(self, message, error_code=None, response_data=None):
        self.message = message
        self.error_code = error_code
        self.response_data = response_data
        super().__init__(self.message)


class ConfigurationError(MomoError):
    """Raised when required credentials are missing."""

    code = "missing_config"

    def __init__(self, message, missing=None):
        self.missing = list(missing or [])
        super().__init__(message, response_data=self.missing)


class ValidationError(MomoError):
    """A request body failed one or more field rules."""

    code = "validation_failed"

    def __init__(self, errors):
        self.errors = list(errors)
        fields = ", ".join(error.field for error in self.errors)
        super().__init__(f"Request validation failed: {fields}", response_data=self.errors)

    @property
    def fields(self):
        return [error.field for error in self.errors]


class AuthenticationError(MomoError):
    """The token endpoint refused the credentials."""

    code = "auth_failed"

    def __init__(self, message, status_code=None, body=None):
        super().__init__(message, error_code=status_code, response_data=body)

    @property
    def status_code(self):
        return self.error_code

    @property
    def body(self):
        return self.response_data


class TokenDecodeError(AuthenticationError):
    """The token endpoint answered 200 but no access token could be read."""

    code = "token_decode_error"


class APIError(MomoError):
    """The primary API call returned an unexpected HTTP status."""

    code = "request_failed"

    def __init__(self, status_code, body):
        super().__init__(
            f"API request failed with status {status_code}",
            error_code=status_code,
            response_data=body,
        )

    @property
    def status_code(self):
        return self.error_code

    @property
    def body(self):
        return self.response_data


class TransportError(MomoError):
    """Connectivity failure below the HTTP layer."""

    code = "http_error"

    def __init__(self, reason):
        self.reason = reason
        super().__init__(f"HTTP transport failed: {reason}")
