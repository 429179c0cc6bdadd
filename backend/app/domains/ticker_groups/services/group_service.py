"""
Ticker Group Service

Owns the in-memory group set behind the dashboard. The set is loaded once from
the repository and written back after every mutation.
"""
import logging
from typing import List, Optional

from app.shared.exceptions import (
    DefaultGroupProtectedException,
    GroupNotFoundException,
    InvalidGroupNameException,
    LastGroupException,
)
from app.shared.singleton import get_singleton
from ..models.ticker_group import GroupSet, TickerGroup
from ..repositories.group_repository import GroupRepository, SqlGroupRepository

logger = logging.getLogger(__name__)


class TickerGroupService:
    def __init__(self, repository: Optional[GroupRepository] = None):
        self.repository = repository or SqlGroupRepository()
        self._state: Optional[GroupSet] = None

    async def get_state(self) -> GroupSet:
        if self._state is None:
            loaded = await self.repository.load()
            # Another request may have finished loading while this one awaited
            if self._state is None:
                self._state = loaded
                # Persist whatever repair the load applied
                await self.repository.save(loaded)
                logger.info(f"Loaded {len(loaded.groups)} ticker groups")
        return self._state

    async def _save(self) -> None:
        await self.repository.save(await self.get_state())

    async def _checked_state(self, index: int) -> GroupSet:
        state = await self.get_state()
        if index < 0 or index >= len(state.groups):
            raise GroupNotFoundException(index)
        return state

    async def list_groups(self) -> List[TickerGroup]:
        return list((await self.get_state()).groups)

    async def get_group(self, index: int) -> TickerGroup:
        state = await self._checked_state(index)
        return state.groups[index]

    async def get_active_index(self) -> int:
        return (await self.get_state()).active_index

    async def get_active_group(self) -> TickerGroup:
        state = await self.get_state()
        return state.groups[state.active_index]

    async def select_group(self, index: int) -> TickerGroup:
        state = await self._checked_state(index)
        state.active_index = index
        return state.groups[index]

    async def add_ticker(self, index: int, symbol: str) -> bool:
        """
        Add a symbol to a group, trimmed and upper-cased.

        Returns False without changing anything when the symbol is empty or
        already in the group.
        """
        state = await self._checked_state(index)
        group = state.groups[index]
        ticker = (symbol or "").strip().upper()
        if not ticker or ticker in group.tickers:
            return False

        state.groups[index] = group.model_copy(update={"tickers": group.tickers + [ticker]})
        await self._save()
        logger.info(f"Added {ticker} to group '{group.name}'")
        return True

    async def remove_ticker(self, index: int, symbol: str) -> bool:
        state = await self._checked_state(index)
        group = state.groups[index]
        ticker = (symbol or "").strip().upper()
        if ticker not in group.tickers:
            return False

        remaining = [t for t in group.tickers if t != ticker]
        state.groups[index] = group.model_copy(update={"tickers": remaining})
        await self._save()
        logger.info(f"Removed {ticker} from group '{group.name}'")
        return True

    async def clear_tickers(self, index: int) -> TickerGroup:
        state = await self._checked_state(index)
        group = state.groups[index]
        cleared = group.model_copy(update={"tickers": []})
        state.groups[index] = cleared
        await self._save()
        logger.info(f"Cleared all tickers from group '{group.name}'")
        return cleared

    async def create_group(self, name: str) -> TickerGroup:
        """Append an empty, non-default group and make it active."""
        trimmed = (name or "").strip()
        if not trimmed:
            raise InvalidGroupNameException(name)

        state = await self.get_state()
        group = TickerGroup(name=trimmed, tickers=[], is_default=False)
        state.groups.append(group)
        state.active_index = len(state.groups) - 1
        await self._save()
        logger.info(f"Created ticker group '{trimmed}'")
        return group

    async def delete_group(self, index: int) -> TickerGroup:
        state = await self._checked_state(index)
        group = state.groups[index]
        if group.is_default:
            raise DefaultGroupProtectedException(group.name)
        if len(state.groups) <= 1:
            raise LastGroupException(group.name)

        del state.groups[index]
        if state.active_index >= len(state.groups):
            state.active_index = len(state.groups) - 1
        await self._save()
        logger.info(f"Deleted ticker group '{group.name}'")
        return group


def get_group_service() -> TickerGroupService:
    """Provides the process-wide TickerGroupService."""
    return get_singleton(TickerGroupService)
