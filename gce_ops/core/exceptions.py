"""
GCE Ops - Custom Exception Classes

This module defines all custom exceptions used in GCE Ops.
Each exception provides a clear error message, and where it helps,
the command that fixes the problem.
"""


def first_error_message(error: dict = None) -> str:
    """First message of an operation error payload, or 'Unknown error'."""
    errors = (error or {}).get('errors') or []
    if errors and errors[0].get('message'):
        return errors[0]['message']
    return "Unknown error"


class ComputeOpsError(Exception):
    """
    Base exception for all GCE Ops errors.

    All custom exceptions inherit from this, making it easy to catch
    any GCE Ops-specific error with a single except clause.
    """
    pass


class AuthenticationError(ComputeOpsError):
    """
    Raised when authentication fails.

    Common causes:
    - No credentials configured
    - Credentials expired
    - Invalid credentials
    """

    def __init__(self, message: str, fix: str = None):
        """
        Args:
            message: Error description
            fix: Suggested fix command (e.g., "gcloud auth login")
        """
        self.fix = fix
        full_message = f"{message}"
        if fix:
            full_message += f"\n\nFix: {fix}"
        super().__init__(full_message)


class ConfigurationError(ComputeOpsError):
    """
    Raised when a required setting (project, zone, region) cannot be resolved
    from flags, gcloud config or credentials.
    """

    def __init__(self, setting: str, fix: str = None):
        """
        Args:
            setting: Name of the missing setting (e.g., 'zone')
            fix: Suggested fix
        """
        self.setting = setting
        self.fix = fix

        full_message = f"No {setting} specified"
        if fix:
            full_message += f"\n\nFix: {fix}"

        super().__init__(full_message)


class OperationFailedError(ComputeOpsError):
    """
    Raised when a Compute Engine operation finishes with an error payload.

    Carries the scope the operation ran in, its id and the structured
    provider error so callers can inspect every individual error.
    """

    def __init__(self, scope, operation_id: str, error: dict = None, http_status: int = None):
        """
        Args:
            scope: ZoneScope, RegionScope or GlobalScope of the operation
            operation_id: Provider-assigned operation name
            error: The operation's 'error' payload ({'errors': [...]})
            http_status: The operation's httpErrorStatusCode, if reported
        """
        self.scope = scope
        self.operation_id = operation_id
        self.error = error or {}
        self.http_status = http_status

        message = f"Operation '{operation_id}' failed ({scope}): {self.reason}"
        if http_status:
            message += f" (HTTP {http_status})"
        super().__init__(message)

    @property
    def errors(self) -> list:
        """Individual provider errors ({'code', 'message', ...} dicts)."""
        return list(self.error.get('errors') or [])

    @property
    def reason(self) -> str:
        """First provider error message, or 'Unknown error' if there is none."""
        return first_error_message(self.error)

    @property
    def code(self):
        """First provider error code (e.g., 'QUOTA_EXCEEDED'), if any."""
        errors = self.errors
        return errors[0].get('code') if errors else None


class AggregateOperationError(ComputeOpsError):
    """
    Raised when more than one operation of a command failed.

    The original errors are kept, in the order they failed, in `errors`.
    """

    def __init__(self, errors: list):
        """
        Args:
            errors: The individual errors (usually OperationFailedError)
        """
        self.errors = list(errors)

        message = f"{len(self.errors)} operations failed:"
        for error in self.errors:
            message += f"\n  - {error}"

        super().__init__(message)


class HandleStateError(ComputeOpsError):
    """
    Raised when an operation handle is moved out of a terminal state,
    or waited on after it already finished.
    """

    def __init__(self, operation_id: str, current_state, requested_state):
        self.operation_id = operation_id
        self.current_state = current_state
        self.requested_state = requested_state

        message = (f"Operation '{operation_id}' is already {current_state.value}; "
                   f"cannot move to {requested_state.value}")
        super().__init__(message)


class RegistryDrainedError(ComputeOpsError):
    """
    Raised when operations are registered after the registry was drained,
    or when the registry is drained twice.
    """

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Cannot {action}: operation registry was already drained")
