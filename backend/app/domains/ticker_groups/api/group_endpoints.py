"""
Ticker Group API Endpoints

Create, select, edit and delete the named ticker groups shown on the dashboard.
Domain errors propagate to the application-level handler.
"""
from typing import List

from fastapi import APIRouter, Depends, Path

from app.shared.response_models import TickerGroupResponse, create_success_response
from ..models.ticker_group import GroupCreate, TickerAdd, TickerGroup
from ..services.group_service import TickerGroupService, get_group_service

router = APIRouter()


def _dump(groups: List[TickerGroup]) -> List[dict]:
    return [group.model_dump(by_alias=True) for group in groups]


@router.get("", response_model=TickerGroupResponse)
async def list_groups(service: TickerGroupService = Depends(get_group_service)):
    """All ticker groups and the index of the active one."""
    return create_success_response(
        data=_dump(await service.list_groups()),
        message="Ticker groups retrieved",
        response_class=TickerGroupResponse,
        active_index=await service.get_active_index(),
    )


@router.post("", response_model=TickerGroupResponse, status_code=201)
async def create_group(
    payload: GroupCreate,
    service: TickerGroupService = Depends(get_group_service)
):
    """Create an empty group and make it active."""
    group = await service.create_group(payload.name)
    return create_success_response(
        data=group.model_dump(by_alias=True),
        message=f"Group '{group.name}' created",
        response_class=TickerGroupResponse,
        active_index=await service.get_active_index(),
    )


@router.delete("/{index}", response_model=TickerGroupResponse)
async def delete_group(
    index: int = Path(..., description="Position of the group in the list"),
    service: TickerGroupService = Depends(get_group_service)
):
    group = await service.delete_group(index)
    return create_success_response(
        data=_dump(await service.list_groups()),
        message=f"Group '{group.name}' deleted",
        response_class=TickerGroupResponse,
        active_index=await service.get_active_index(),
    )


@router.post("/{index}/select", response_model=TickerGroupResponse)
async def select_group(
    index: int = Path(..., description="Position of the group in the list"),
    service: TickerGroupService = Depends(get_group_service)
):
    group = await service.select_group(index)
    return create_success_response(
        data=group.model_dump(by_alias=True),
        message=f"Group '{group.name}' selected",
        response_class=TickerGroupResponse,
        active_index=await service.get_active_index(),
    )


@router.post("/{index}/tickers", response_model=TickerGroupResponse)
async def add_ticker(
    payload: TickerAdd,
    index: int = Path(..., description="Position of the group in the list"),
    service: TickerGroupService = Depends(get_group_service)
):
    """Add a ticker. Empty or duplicate symbols leave the group unchanged."""
    added = await service.add_ticker(index, payload.ticker)
    group = await service.get_group(index)
    message = "Ticker added" if added else "Ticker already present or empty, nothing changed"
    return create_success_response(
        data=group.model_dump(by_alias=True),
        message=message,
        response_class=TickerGroupResponse,
        active_index=await service.get_active_index(),
    )


@router.delete("/{index}/tickers/{ticker}", response_model=TickerGroupResponse)
async def remove_ticker(
    index: int = Path(..., description="Position of the group in the list"),
    ticker: str = Path(..., min_length=1, max_length=10),
    service: TickerGroupService = Depends(get_group_service)
):
    removed = await service.remove_ticker(index, ticker)
    group = await service.get_group(index)
    return create_success_response(
        data=group.model_dump(by_alias=True),
        message="Ticker removed" if removed else "Ticker not in group, nothing changed",
        response_class=TickerGroupResponse,
        active_index=await service.get_active_index(),
    )


@router.delete("/{index}/tickers", response_model=TickerGroupResponse)
async def clear_tickers(
    index: int = Path(..., description="Position of the group in the list"),
    service: TickerGroupService = Depends(get_group_service)
):
    group = await service.clear_tickers(index)
    return create_success_response(
        data=group.model_dump(by_alias=True),
        message=f"All tickers removed from '{group.name}'",
        response_class=TickerGroupResponse,
        active_index=await service.get_active_index(),
    )
