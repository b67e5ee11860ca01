"""Interruption tracking for the appletree CLI.

SIGPIPE (the reader of a pipe went away, e.g. `appletree | head`) and SIGINT
(Ctrl+C) do not kill the process. They are recorded so that the writer stops at
the next line and main() exits with the conventional status for the signal.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Dict, Optional

# Not available on Windows
SIGPIPE = getattr(signal, "SIGPIPE", None)

EXIT_STATUS_SIGPIPE = 141
EXIT_STATUS_SIGINT = 130


class SignalHandler:
    """Records SIGPIPE and SIGINT as events.

    Each signal is handled once: the first delivery sets its event and puts
    the previous handler back in place, so a second Ctrl+C behaves as usual.

    Attributes:
        sigpipe_received: Set when SIGPIPE was delivered.
        sigint_received: Set when SIGINT was delivered.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self._events: Dict[int, Event] = {signal.SIGINT: self.sigint_received}
        if SIGPIPE is not None:
            self._events[SIGPIPE] = self.sigpipe_received
        self._previous: Dict[int, Any] = {signum: signal.getsignal(signum) for signum in self._events}

    def install(self) -> None:
        for signum in self._events:
            signal.signal(signum, self.handle)

    def handle(self, signum: int, frame: Optional[FrameType]) -> None:
        self._events[signum].set()
        signal.signal(signum, self._previous[signum])

    def interrupted(self) -> bool:
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_status(self) -> Optional[int]:
        """Exit status implied by the received signals, or None if there were none."""
        if self.sigpipe_received.is_set():
            return EXIT_STATUS_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_STATUS_SIGINT
        return None


signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    signal_handler.install()


def silence_stdout_after_interrupt() -> None:
    """Point stdout at the null device once output was cut short.

    Registered with atexit, so the interpreter's final flush cannot report
    another broken pipe.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(silence_stdout_after_interrupt)
