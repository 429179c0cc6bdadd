from .group_service import TickerGroupService, get_group_service

__all__ = ["TickerGroupService", "get_group_service"]
