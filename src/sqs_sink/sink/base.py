"""
Module: base.py
Description: Lifecycle contract between a host engine and a sink.

The host calls init() once, connect() before publishing, publish() for
every event, disconnect() after publishing or after a
ConnectionUnavailableError, and destroy() when the sink is removed.
Calls on one instance are never concurrent.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Tuple

from ..config.options import OptionHolder
from ..config.settings import ConfigReader


class Sink(ABC):
    """Output adapter delivering processed events to an external system."""

    #: Payload types publish() accepts
    supported_input_types: Tuple[type, ...] = ()
    #: Option names whose value may change from event to event
    supported_dynamic_options: Tuple[str, ...] = ()

    @abstractmethod
    def init(
        self,
        option_holder: OptionHolder,
        config_reader: Optional[ConfigReader] = None
    ) -> None:
        """Validate configuration. Must not open connections."""

    @abstractmethod
    def connect(self) -> None:
        """Establish the connection used by publish()."""

    def publish(self, payload: Any, dynamic_options: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Publish one event.

        Args:
            payload: Event payload, one of supported_input_types
            dynamic_options: Per-event option values keyed by option name

        Raises:
            TypeError: If the payload type is not supported
        """
        if self.supported_input_types and not isinstance(payload, self.supported_input_types):
            supported = ', '.join(t.__name__ for t in self.supported_input_types)
            raise TypeError(
                f"{type(self).__name__} accepts {supported} payloads, "
                f"got {type(payload).__name__}"
            )
        return self._publish(payload, dynamic_options or {})

    @abstractmethod
    def _publish(self, payload: Any, dynamic_options: Mapping[str, Any]) -> Any:
        ...

    @abstractmethod
    def disconnect(self) -> None:
        """Release the connection. Must succeed from any state."""

    @abstractmethod
    def destroy(self) -> None:
        """Release all resources. Must succeed from any state."""

    def current_state(self) -> Dict[str, Any]:
        """State to persist for recovery; stateless sinks return nothing."""
        return {}

    def restore_state(self, state: Mapping[str, Any]) -> None:
        """Restore state from current_state(); stateless sinks ignore it."""
