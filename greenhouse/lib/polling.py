"""Generic async polling service abstraction.

Provides a reusable base class for sensor polling services that follow
the poll → persist → evaluate pattern with a fixed interval.
"""
import asyncio
import signal
from abc import ABC, abstractmethod
from types import FrameType

from greenhouse.lib.config import get_settings
from greenhouse.logging import get_logger

logger = get_logger("lib.polling")


class PollingService[T](ABC):
    """Abstract base class for async sensor polling services.

    Implements the common polling loop pattern with:
    - Configurable polling frequency
    - Cooperative stop, checked before every cycle and every sleep
    - Error recovery
    """

    def __init__(
        self,
        name: str,
        frequency_sec: float | None = None,
    ) -> None:
        """Initialize the polling service.

        Args:
            name: Service name for logging.
            frequency_sec: Polling frequency in seconds.
        """
        self.name = name
        if frequency_sec is None:
            frequency_sec = get_settings().polling.frequency_sec
        self.frequency_sec = frequency_sec
        self._shutdown_requested = False
        self._logger = get_logger(f"polling.{name}")

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize any resources needed before polling starts.

        Called once at the start of the loop.
        """

    @abstractmethod
    async def cleanup(self) -> None:
        """Clean up resources before exit.

        Called once when the polling loop exits.
        """

    @abstractmethod
    async def poll(self) -> T | None:
        """Poll the sensor for a new reading.

        Returns:
            A reading object, or None if the reading failed and should be skipped.
        """

    @abstractmethod
    async def persist(self, reading: T) -> None:
        """Record the reading. Must not abort the cycle on storage errors."""

    @abstractmethod
    async def evaluate(self, reading: T) -> None:
        """Act on the reading: controls, alarms, display."""

    def on_poll_error(self, error: Exception) -> None:
        """Handle an error that occurred during polling.

        Override to customize error handling. Default logs the error.
        """
        self._logger.error("%s poll error: %s", self.name, error)

    @property
    def stop_requested(self) -> bool:
        return self._shutdown_requested

    def stop(self) -> None:
        """Ask the loop to exit before its next cycle."""
        self._shutdown_requested = True

    def _handle_shutdown(self, signum: int, frame: FrameType | None) -> None:
        """Handle shutdown signals gracefully."""
        signal_name = signal.Signals(signum).name
        self._logger.info("Received %s, initiating graceful shutdown...", signal_name)
        self.stop()

    def _setup_signal_handlers(self) -> None:
        """Register signal handlers for graceful shutdown."""
        signal.signal(signal.SIGTERM, self._handle_shutdown)
        signal.signal(signal.SIGINT, self._handle_shutdown)

    async def run_cycle(self) -> T | None:
        """Execute a single poll → persist → evaluate cycle.

        Returns:
            The reading handled by this cycle, or None if polling yielded none.
        """
        reading = await self.poll()
        if reading is not None:
            await self.persist(reading)
            await self.evaluate(reading)
        return reading

    async def run_loop(self) -> None:
        """Run the async polling loop with a fixed delay between cycles."""
        await self.initialize()
        self._logger.info("%s polling service started", self.name)

        try:
            while not self._shutdown_requested:
                try:
                    await self.run_cycle()
                except Exception as e:
                    self.on_poll_error(e)

                if self._shutdown_requested:
                    break
                # Full interval after every cycle, however long the cycle took
                if self.frequency_sec > 0:
                    await asyncio.sleep(self.frequency_sec)
        finally:
            self._logger.info("Cleaning up resources...")
            await self.cleanup()
            self._logger.info("%s shutdown complete", self.name)

    def run(self) -> None:
        """Run the polling loop.

        This is the main entry point. It:
        1. Sets up signal handlers for graceful shutdown
        2. Calls initialize()
        3. Enters the polling loop (poll → persist → evaluate)
        4. Calls cleanup() on exit
        """
        self._setup_signal_handlers()
        asyncio.run(self.run_loop())
