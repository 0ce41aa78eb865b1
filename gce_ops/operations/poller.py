"""
GCE Ops - Operation Status Poller

Drives a single operation handle from PENDING to DONE.

Polling is a fixed-interval loop: check for cancellation, sleep,
check again, ask the API for the operation's status, repeat.
There is no backoff and no timeout; operations usually take seconds.
"""

import time
from enum import Enum

from gce_ops.core.config import POLL_INTERVAL_SECONDS
from gce_ops.core.exceptions import HandleStateError, OperationFailedError
from gce_ops.operations.handle import HandleState, OperationHandle
from gce_ops.utils.logger import get_logger


class PollOutcome(Enum):
    SUCCEEDED = 'succeeded'
    CANCELLED = 'cancelled'


class OperationPoller:
    """
    Waits for operations to finish.

    Example:
        poller = OperationPoller(ComputeResourceClient(compute))
        outcome = poller.wait(handle, token)

        if outcome is PollOutcome.SUCCEEDED:
            print("done")
        # OperationFailedError is raised if the operation reported an error
    """

    def __init__(self, client, emit_warning=None, sleep=None,
                 interval: float = POLL_INTERVAL_SECONDS, logger=None):
        """
        Initialize poller.

        Args:
            client: Anything with query_status(scope, operation_id) -> OperationSnapshot
            emit_warning: Called with each warning message as soon as it is seen.
                          Defaults to logger.warning.
            sleep: Called with the interval in seconds between polls.
                   Defaults to waiting on the cancellation token.
            interval: Seconds between status queries
            logger: Optional logger for debug output
        """
        self.client = client
        self.logger = logger or get_logger()
        self.emit_warning = emit_warning or self.logger.warning
        self.sleep = sleep
        self.interval = interval

    def _emit_warnings(self, snapshot):
        for message in snapshot.warnings:
            self.emit_warning(message)

    def _sleep(self, token):
        if self.sleep is not None:
            self.sleep(self.interval)
        elif token is not None:
            token.wait(self.interval)
        else:
            # No token means nobody can cancel; just block for the interval
            time.sleep(self.interval)

    def wait(self, handle: OperationHandle, token=None) -> PollOutcome:
        """
        Block until the operation is DONE or cancellation is requested.

        Args:
            handle: Handle to wait on (must be PENDING)
            token: Optional CancellationToken

        Returns:
            PollOutcome.SUCCEEDED, or PollOutcome.CANCELLED if the wait was
            stopped early (the handle then stays PENDING)

        Raises:
            OperationFailedError: if the operation finished with an error
            HandleStateError: if the handle was already waited on
        """
        if not handle.is_pending:
            raise HandleStateError(handle.operation_id, handle.state, HandleState.PENDING)

        def cancelled():
            return token is not None and token.is_cancellation_requested()

        snapshot = handle.snapshot
        # The mutating call's own response may already carry warnings
        self._emit_warnings(snapshot)

        polls = 0
        while not snapshot.is_done:
            if cancelled():
                self.logger.debug(f"Stopped waiting for {handle.operation_id} "
                                  f"after {polls} polls (cancelled)")
                return PollOutcome.CANCELLED

            self._sleep(token)

            if cancelled():
                self.logger.debug(f"Stopped waiting for {handle.operation_id} "
                                  f"after {polls} polls (cancelled)")
                return PollOutcome.CANCELLED

            snapshot = self.client.query_status(handle.scope, handle.operation_id)
            handle.snapshot = snapshot
            polls += 1
            self.logger.debug(f"Operation {handle.operation_id}: {snapshot.status}")
            self._emit_warnings(snapshot)

        if snapshot.error:
            handle.mark(HandleState.FAILED)
            self.logger.debug(f"Operation {snapshot.describe()} failed: {snapshot.error_message}")
            raise OperationFailedError(handle.scope, handle.operation_id, snapshot.error,
                                       http_status=snapshot.http_error_status_code)

        handle.mark(HandleState.SUCCEEDED)
        self.logger.debug(f"Operation {snapshot.describe()} done after {polls} polls")
        return PollOutcome.SUCCEEDED
