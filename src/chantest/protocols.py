"""Protocol definitions for the channels chantest can assert on."""

from typing import Any, Optional, Protocol


class Channel(Protocol):
    """A blocking channel with the ``queue.Queue`` API.

    ``queue.Queue``, ``multiprocessing.Queue`` and any type with the same timed
    ``put``/``get`` contract qualify.
    """

    def put(self, item: Any, block: bool = True, timeout: Optional[float] = None) -> None:
        """Deliver item, raising ``queue.Full`` if timeout elapses first."""
        ...

    def get(self, block: bool = True, timeout: Optional[float] = None) -> Any:
        """Take an item, raising ``queue.Empty`` if timeout elapses first."""
        ...


class AsyncChannel(Protocol):
    """An awaitable channel such as ``asyncio.Queue``.

    Cancelling a pending ``put`` or ``get`` must neither lose nor duplicate an
    item.
    """

    async def put(self, item: Any) -> None:
        ...

    async def get(self) -> Any:
        ...
