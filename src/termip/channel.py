"""Single-use, single-producer/single-consumer hand-off between threads."""

import threading
from typing import Any, Tuple

from termip.exceptions import ChannelClosed

_EMPTY = object()


class _Slot:
    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.ready = threading.Event()
        self.value: Any = _EMPTY
        self.sent = False
        self.closed = False
        self.taken = False


class Sender:
    """Producing end. Use as a context manager so the channel always closes."""

    def __init__(self, slot: _Slot):
        self._slot = slot

    def send(self, value: Any) -> None:
        slot = self._slot
        with slot.lock:
            if slot.sent or slot.closed:
                raise ChannelClosed("one-shot channel already used")
            slot.value = value
            slot.sent = True
        slot.ready.set()

    def close(self) -> None:
        """Close without a value. Does nothing once a value was sent."""
        slot = self._slot
        with slot.lock:
            if slot.sent or slot.closed:
                return
            slot.closed = True
        slot.ready.set()

    def __enter__(self) -> "Sender":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class Receiver:
    """Consuming end."""

    def __init__(self, slot: _Slot):
        self._slot = slot

    def recv(self) -> Any:
        """
        Block until the sender delivers or closes.

        Returns the delivered value. Raises ChannelClosed if the sender closed
        without sending, or if the value was already received.
        """
        slot = self._slot
        slot.ready.wait()
        with slot.lock:
            if slot.taken or not slot.sent:
                raise ChannelClosed("one-shot channel closed without a value")
            slot.taken = True
            value, slot.value = slot.value, _EMPTY
        return value


def oneshot() -> Tuple[Sender, Receiver]:
    """Create a connected (sender, receiver) pair."""
    slot = _Slot()
    return Sender(slot), Receiver(slot)
