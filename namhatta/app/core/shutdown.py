"""
Shutdown manager for handling application shutdown signals.

The signal handler raises KeyboardInterrupt so tool code unwinds (finally
blocks, context managers) before App.main() turns the interrupt into an
exit code. The process launcher replaces these handlers while a child is
running and puts them back when it exits.
"""

import signal
from typing import Any


class ShutdownManager:
    """
    Manages shutdown signal handling.

    Usage:
        manager = ShutdownManager()
        manager.register_signal_handlers()
        try:
            ...
        except KeyboardInterrupt:
            code = manager.get_signal_return_code()
        finally:
            manager.restore_signal_handlers()
    """

    def __init__(self) -> None:
        self._shutting_down = False
        self._signal_return_code: int = 130  # Default to SIGINT
        self._original_handlers: dict[signal.Signals, Any] = {}

    def register_signal_handlers(self) -> None:
        """Register signal handlers for SIGTERM and SIGINT."""
        self._original_handlers[signal.SIGTERM] = signal.signal(
            signal.SIGTERM, self._handle_signal
        )
        self._original_handlers[signal.SIGINT] = signal.signal(
            signal.SIGINT, self._handle_signal
        )

    def restore_signal_handlers(self) -> None:
        """Put back the handlers that were active before registration."""
        for sig, handler in self._original_handlers.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
        self._original_handlers.clear()

    def _handle_signal(self, signum: int, frame: Any) -> None:
        """
        Handle shutdown signal by raising KeyboardInterrupt.

        Args:
            signum: Signal number (SIGINT=2, SIGTERM=15)
            frame: Current stack frame (unused)
        """
        if self._shutting_down:
            return  # Ignore duplicate signals

        self._shutting_down = True
        self._signal_return_code = 128 + signum
        raise KeyboardInterrupt()

    def is_shutting_down(self) -> bool:
        return self._shutting_down

    def get_signal_return_code(self) -> int:
        """
        Get the return code for the signal that triggered shutdown.

        Returns:
            130 for SIGINT (Ctrl+C), 143 for SIGTERM, or 130 as default.
        """
        return self._signal_return_code
