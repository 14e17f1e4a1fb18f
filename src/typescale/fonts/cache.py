"""Host Data Caching
=================

Single-flight async caches for the font and variable lists the host
provides:
- one fetch shared by every concurrent ``load()``
- explicit ``revalidate()`` that keeps stale data when it fails
- a tagged status instead of loose loading/error flags
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from src.typescale.core.models import Font, Variable

from .providers import HostBridge
from .resolver import typography_variables

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Uninitialized:
    """Nothing has been fetched yet."""


@dataclass(frozen=True)
class Loading(Generic[T]):
    """A fetch is running; ``stale_data`` is what was held before it started."""

    stale_data: tuple[T, ...] = ()


@dataclass(frozen=True)
class Loaded(Generic[T]):
    data: tuple[T, ...]


@dataclass(frozen=True)
class Failed(Generic[T]):
    """The last fetch failed; ``stale_data`` survives from before it."""

    error: str
    stale_data: tuple[T, ...] = ()


CacheStatus = Uninitialized | Loading | Loaded | Failed


class HostDataCache(Generic[T]):
    """Async cache around a host fetch.

    Fetches run one at a time under a lock, so the cache always reflects the
    most recently completed fetch. Fetch failures are logged and recorded in
    the status; they never propagate to callers.
    """

    def __init__(self, fetch: Callable[[], Awaitable[Sequence[T]]], name: str = "data"):
        self.name = name
        self._fetch = fetch
        self._status: CacheStatus = Uninitialized()
        self._lock = asyncio.Lock()
        self._in_flight: asyncio.Task | None = None

    @property
    def status(self) -> CacheStatus:
        return self._status

    @property
    def data(self) -> tuple[T, ...]:
        status = self._status
        if isinstance(status, Loaded):
            return status.data
        if isinstance(status, Loading | Failed):
            return status.stale_data
        return ()

    @property
    def error(self) -> str | None:
        return self._status.error if isinstance(self._status, Failed) else None

    @property
    def is_loading(self) -> bool:
        return isinstance(self._status, Loading)

    async def load(self) -> tuple[T, ...]:
        """
        Fetch unless data is already held.

        A call made while a fetch is in flight waits for that fetch instead of
        starting another one.

        Returns:
            The cached items (possibly empty after a failure)
        """
        if self.data:
            return self.data
        if self._in_flight is not None and not self._in_flight.done():
            await self._in_flight
            return self.data
        return await self._start_fetch()

    async def revalidate(self) -> tuple[T, ...]:
        """Fetch unconditionally, replacing held data on success."""
        return await self._start_fetch()

    def _prepare(self, items: Sequence[T]) -> tuple[T, ...]:
        return tuple(items)

    async def _start_fetch(self) -> tuple[T, ...]:
        task = asyncio.ensure_future(self._run_fetch())
        self._in_flight = task
        await task
        return self.data

    async def _run_fetch(self) -> None:
        async with self._lock:
            previous = self.data
            self._status = Loading(previous)
            logger.info(f"Loading {self.name} from host")

            try:
                items = await self._fetch()
            except Exception as e:
                logger.warning(f"Failed to load {self.name}: {e}")
                self._status = Failed(str(e) or f"Failed to load {self.name}", previous)
                return

            self._status = Loaded(self._prepare(items))
            logger.info(f"Loaded {len(self.data)} {self.name}")


class FontsCache(HostDataCache[Font]):
    """Fonts available in the host document."""

    def __init__(self, bridge: HostBridge):
        super().__init__(bridge.get_available_fonts, name="fonts")


class VariablesCache(HostDataCache[Variable]):
    """Host variables usable by a typography style (STRING and FLOAT only)."""

    def __init__(self, bridge: HostBridge):
        super().__init__(bridge.get_available_variables, name="variables")

    def _prepare(self, items: Sequence[Variable]) -> tuple[Variable, ...]:
        return tuple(typography_variables(items))
