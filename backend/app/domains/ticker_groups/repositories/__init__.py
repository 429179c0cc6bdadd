from .group_repository import GroupRepository, SqlGroupRepository, restore_groups, repair_default_tickers

__all__ = ["GroupRepository", "SqlGroupRepository", "restore_groups", "repair_default_tickers"]
