# ABOUTME: Exception hierarchy for credential synchronization runs
# ABOUTME: Maps Cognito and SSM failures onto the terminal states of a run

"""Custom exceptions for credential synchronization."""


class CredentialSyncError(Exception):
    """Base exception for all credential synchronization failures."""

    def __init__(self, message: str, parameter_name: str = None):
        self.message = message
        self.parameter_name = parameter_name
        super().__init__(self.message)


class ConfigurationError(CredentialSyncError):
    """Raised when required configuration is missing or malformed."""

    def __init__(self, message: str, missing_fields: list[str] = None, parameter_name: str = None):
        super().__init__(message, parameter_name)
        self.missing_fields = missing_fields or []


class AppClientNotFoundError(CredentialSyncError):
    """Raised when no app client matches the configured name."""

    def __init__(self, message: str, app_client_name: str = None, user_pool_id: str = None):
        super().__init__(message)
        self.app_client_name = app_client_name
        self.user_pool_id = user_pool_id


class ProviderCallError(CredentialSyncError):
    """Raised when a Cognito API call fails."""

    def __init__(self, message: str, operation: str = None, error_code: str = None):
        super().__init__(message)
        self.operation = operation
        self.error_code = error_code


class StoreReadError(CredentialSyncError):
    """Raised when the parameter cannot be read or parsed."""

    pass


class StoreWriteError(CredentialSyncError):
    """Raised when the parameter cannot be written."""

    def __init__(self, message: str, parameter_name: str = None, error_code: str = None):
        super().__init__(message, parameter_name)
        self.error_code = error_code
