"""
Ticker Group Repository

Loads and saves the group set as one serialized JSON array under a
well-known storage key. Loading also repairs the stored state so the default
group always exists and holds every canonical ticker.
"""

# Standard library imports
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

# Third-party imports
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

# App imports
from app.db.session import AsyncSessionLocal
from ..config import CANONICAL_TICKERS, GROUPS_STORAGE_KEY
from ..models.storage import StorageEntry
from ..models.ticker_group import GroupSet, TickerGroup, canonical_default_group

logger = logging.getLogger(__name__)


def repair_default_tickers(tickers: List[str]) -> List[str]:
    """Canonical tickers first, then whatever else the group held, without duplicates."""
    extras = [ticker for ticker in tickers if ticker not in CANONICAL_TICKERS]
    return list(CANONICAL_TICKERS) + extras


def restore_groups(raw: Any) -> List[TickerGroup]:
    """
    Turn a deserialized group array into a valid group list.

    - anything but a list is discarded in favour of the canonical default
    - entries that are not valid groups are dropped
    - with no default-flagged group, the canonical default is appended
    - a default group missing a canonical ticker gets the canonical list back,
      keeping any other tickers it held
    """
    if not isinstance(raw, list):
        logger.warning("Stored ticker groups are not an array, using default")
        return [canonical_default_group()]

    groups = []
    for entry in raw:
        try:
            groups.append(TickerGroup.model_validate(entry))
        except ValidationError:
            logger.warning(f"Dropping invalid stored ticker group: {entry!r}")

    default_index = next((i for i, group in enumerate(groups) if group.is_default), None)
    if default_index is None:
        groups.append(canonical_default_group())
        return groups

    # Only the first flagged group stays the default
    for i in range(default_index + 1, len(groups)):
        if groups[i].is_default:
            groups[i] = groups[i].model_copy(update={"is_default": False})

    default_group = groups[default_index]
    if not all(ticker in default_group.tickers for ticker in CANONICAL_TICKERS):
        logger.info("Default group is missing canonical tickers, restoring them")
        repaired = canonical_default_group()
        groups[default_index] = repaired.model_copy(
            update={"tickers": repair_default_tickers(default_group.tickers)}
        )
    return groups


class GroupRepository(ABC):
    """Persistence seam for the group set."""

    @abstractmethod
    async def load(self) -> GroupSet:
        ...

    @abstractmethod
    async def save(self, group_set: GroupSet) -> None:
        ...


class SqlGroupRepository(GroupRepository):
    """Group set stored as JSON in the storage_entries table."""

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession] = AsyncSessionLocal,
        storage_key: str = GROUPS_STORAGE_KEY
    ):
        self.session_factory = session_factory
        self.storage_key = storage_key

    async def _read_raw(self) -> Optional[str]:
        async with self.session_factory() as session:
            entry = await session.get(StorageEntry, self.storage_key)
            return entry.value if entry is not None else None

    async def load(self) -> GroupSet:
        stored = await self._read_raw()
        if stored is None:
            logger.info("No saved ticker groups found, using default")
            return GroupSet(groups=[canonical_default_group()])

        try:
            raw = json.loads(stored)
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing saved ticker groups: {e}")
            return GroupSet(groups=[canonical_default_group()])

        return GroupSet(groups=restore_groups(raw))

    async def save(self, group_set: GroupSet) -> None:
        value = json.dumps([group.model_dump(by_alias=True) for group in group_set.groups])
        async with self.session_factory() as session:
            try:
                entry = await session.get(StorageEntry, self.storage_key)
                if entry is None:
                    session.add(StorageEntry(key=self.storage_key, value=value))
                else:
                    entry.value = value
                await session.commit()
            except Exception as e:
                logger.error(f"Error saving ticker groups: {e}")
                await session.rollback()
                raise
        logger.debug(f"Saved {len(group_set.groups)} ticker groups")
