"""
GCE Ops - Cooperative Cancellation

A CancellationToken is created per command invocation and passed to
everything that may block. Waiting code checks it; nothing is
interrupted forcibly.
"""

import signal
import threading


class CancellationToken:
    """
    Cooperative stop flag for one command invocation.

    Example:
        token = CancellationToken()
        restore = install_interrupt_handler(token)
        try:
            coordinator.complete(registry)
        finally:
            restore()
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        """Request that the invocation stops as soon as possible."""
        self._event.set()

    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def wait(self, seconds: float) -> bool:
        """
        Sleep for up to `seconds`, waking early if cancellation is requested.

        Returns:
            True if cancellation was requested
        """
        return self._event.wait(seconds)


def install_interrupt_handler(token: CancellationToken, logger=None):
    """
    Turn the first Ctrl-C into a cancellation request.

    The default handler is put back after the first SIGINT, so a second
    Ctrl-C raises KeyboardInterrupt as usual.

    Signal handlers can only be set from the main thread. Elsewhere
    nothing is installed and the token is only cancelled through cancel().

    Args:
        token: Token to cancel
        logger: Optional logger

    Returns:
        Callable that restores the previous SIGINT handler
    """
    if threading.current_thread() is not threading.main_thread():
        if logger:
            logger.debug("Not on the main thread; Ctrl-C handler not installed")
        return lambda: None

    previous = signal.getsignal(signal.SIGINT)

    def _handler(signum, frame):
        if logger:
            logger.warning("Cancelling... (press Ctrl-C again to abort immediately)")
        token.cancel()
        signal.signal(signal.SIGINT, signal.default_int_handler)

    signal.signal(signal.SIGINT, _handler)

    def restore():
        signal.signal(signal.SIGINT, previous)

    return restore
