"""Tests for loading, repairing and saving the ticker group set."""

from __future__ import annotations

import asyncio
import json

import pytest
from sqlalchemy.orm import Session

from app.domains.ticker_groups.config import CANONICAL_TICKERS, DEFAULT_GROUP_NAME, GROUPS_STORAGE_KEY
from app.domains.ticker_groups.models import GroupSet, StorageEntry, TickerGroup
from app.domains.ticker_groups.repositories import restore_groups


def _store(engine, value: str) -> None:
    with Session(engine) as session:
        session.add(StorageEntry(key=GROUPS_STORAGE_KEY, value=value))
        session.commit()


def _stored_value(engine):
    with Session(engine) as session:
        return json.loads(session.get(StorageEntry, GROUPS_STORAGE_KEY).value)


class TestRestoreGroups:
    """Repair rules applied to whatever was persisted."""

    def test_not_a_list(self):
        groups = restore_groups({"name": "x"})
        assert len(groups) == 1
        assert groups[0].is_default
        assert groups[0].tickers == list(CANONICAL_TICKERS)

    def test_empty_list(self):
        groups = restore_groups([])
        assert [g.name for g in groups] == [DEFAULT_GROUP_NAME]

    def test_default_appended_when_missing(self):
        groups = restore_groups([{"name": "Mine", "tickers": ["AAPL"]}])
        assert [g.name for g in groups] == ["Mine", DEFAULT_GROUP_NAME]
        assert groups[1].is_default

    def test_invalid_entries_dropped(self):
        raw = [{"tickers": ["AAPL"]}, "junk", {"name": "Mine", "tickers": ["MSFT"]}]
        groups = restore_groups(raw)
        assert [g.name for g in groups] == ["Mine", DEFAULT_GROUP_NAME]

    def test_default_repaired_as_union(self):
        raw = [{"name": "Old Industrials", "tickers": ["CAT", "XYZ", "GE"], "isDefault": True}]
        groups = restore_groups(raw)
        assert groups[0].name == DEFAULT_GROUP_NAME
        assert groups[0].tickers == list(CANONICAL_TICKERS) + ["XYZ"]

    def test_repair_is_idempotent(self):
        raw = [{"name": "Old", "tickers": ["XYZ"], "isDefault": True}, {"name": "Mine", "tickers": ["A"]}]
        once = restore_groups(raw)
        twice = restore_groups([g.model_dump(by_alias=True) for g in once])
        assert once == twice

    def test_complete_default_is_untouched(self):
        tickers = list(CANONICAL_TICKERS) + ["AAPL"]
        raw = [{"name": "Renamed", "tickers": tickers, "isDefault": True}]
        groups = restore_groups(raw)
        assert groups[0].name == "Renamed"
        assert groups[0].tickers == tickers

    def test_only_first_default_flag_kept(self):
        raw = [
            {"name": DEFAULT_GROUP_NAME, "tickers": list(CANONICAL_TICKERS), "isDefault": True},
            {"name": "Other", "tickers": [], "isDefault": True},
        ]
        groups = restore_groups(raw)
        assert [g.is_default for g in groups] == [True, False]

    def test_duplicate_tickers_collapsed(self):
        group = TickerGroup(name="Dupes", tickers=["CAT", "CAT", "GE"])
        assert group.tickers == ["CAT", "GE"]


class TestSqlGroupRepository:
    async def test_nothing_stored(self, group_repository):
        group_set = await group_repository.load()
        assert len(group_set.groups) == 1
        assert group_set.default_group.tickers == list(CANONICAL_TICKERS)
        assert group_set.active_index == 0

    async def test_invalid_json_falls_back_to_default(self, group_repository, sync_engine):
        _store(sync_engine, "{not json")
        group_set = await group_repository.load()
        assert [g.name for g in group_set.groups] == [DEFAULT_GROUP_NAME]

    async def test_save_then_load(self, group_repository, sync_engine):
        group_set = GroupSet(groups=[
            TickerGroup(name=DEFAULT_GROUP_NAME, tickers=list(CANONICAL_TICKERS), is_default=True),
            TickerGroup(name="Railroads", tickers=["UNP", "CSX"]),
        ])
        await group_repository.save(group_set)

        assert (await group_repository.load()).groups == group_set.groups
        stored = _stored_value(sync_engine)
        assert stored[1] == {"name": "Railroads", "tickers": ["UNP", "CSX"], "isDefault": False}

    async def test_save_overwrites(self, group_repository):
        await group_repository.save(GroupSet(groups=[TickerGroup(name="First", tickers=["A"])]))
        await group_repository.save(GroupSet(groups=[TickerGroup(name="Second", tickers=["B"])]))
        names = [g.name for g in (await group_repository.load()).groups]
        assert names == ["Second", DEFAULT_GROUP_NAME]

    @pytest.mark.parametrize("value", ["42", '"text"', "null"])
    async def test_non_array_values(self, group_repository, sync_engine, value):
        _store(sync_engine, value)
        assert [g.name for g in (await group_repository.load()).groups] == [DEFAULT_GROUP_NAME]

    async def test_load_yields_to_other_tasks(self, group_repository):
        progressed = []

        async def other_work():
            await asyncio.sleep(0)
            progressed.append(True)

        other = asyncio.create_task(other_work())
        await group_repository.load()
        # The other task ran while the load waited on the database
        assert progressed == [True]
        await other
