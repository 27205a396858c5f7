"""Signal handling for the dir2clip CLI.

Ctrl+C is recorded rather than acted on immediately: the directory walk polls
``signal_handler.interrupted`` before each directory and file and stops at the next
entry, so nothing half-built ever reaches the clipboard. A second Ctrl+C falls
through to Python's default handler and raises KeyboardInterrupt.

SIGPIPE only matters with -p/--print, when the reading end of a pipe closes early
(``dir2clip -p . | head``). It does not exist on Windows.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Optional

SIGPIPE: Optional[signal.Signals] = getattr(signal, "SIGPIPE", None)

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


class SignalHandler:
    """Records SIGINT and SIGPIPE so the CLI can stop cleanly and pick an exit code.

    Each handler fires once and then reinstates the handler that was active before
    setup_signal_handling() ran.

    Attributes:
        sigpipe_received: Set once SIGPIPE has been received.
        sigint_received: Set once SIGINT has been received.
        original_sigpipe_handler: Handler to restore for SIGPIPE, None where SIGPIPE is unsupported.
        original_sigint_handler: Handler to restore for SIGINT.

    Example:
        >>> handler = SignalHandler()
        >>> handler.interrupted(), handler.exit_code()
        (False, None)
        >>> handler.sigint_received.set()
        >>> handler.interrupted(), handler.exit_code()
        (True, 130)
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler: Any = signal.getsignal(SIGPIPE) if SIGPIPE is not None else None
        self.original_sigint_handler: Any = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        if SIGPIPE is not None:
            signal.signal(SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def interrupted(self) -> bool:
        """Whether the running walk or write should stop."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit code implied by the received signals, or None if there were none.

        SIGPIPE wins over SIGINT: a closed pipe means the output was already consumed.
        """
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None


signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the handlers of the module-level signal_handler."""
    if SIGPIPE is not None:
        signal.signal(SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Point stdout at the null device after an interruption.

    Registered with atexit so that flushing a broken stdout at shutdown does not print
    a second error.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
