from __future__ import annotations

from fastapi import APIRouter, Depends

from api.deps import get_registry
from api.errors import StarLedgerAPIError
from api.schemas.blocks import BlockResponse
from api.schemas.common import ErrorResponse
from starledger.registry import StarRegistry

router = APIRouter(prefix="/block", responses={404: {"model": ErrorResponse}})


@router.get("/height/{height}", response_model=BlockResponse)
def block_by_height(height: int, registry: StarRegistry = Depends(get_registry)) -> BlockResponse:
    block = registry.get_block_by_height(height)
    if block is None:
        raise StarLedgerAPIError(code="block.not_found", message="Block Not Found!", status=404, height=height)
    return BlockResponse.from_block(block)


@router.get("/hash/{block_hash}", response_model=BlockResponse)
def block_by_hash(block_hash: str, registry: StarRegistry = Depends(get_registry)) -> BlockResponse:
    block = registry.get_block_by_hash(block_hash)
    if block is None:
        raise StarLedgerAPIError(code="block.not_found", message="Block Not Found!", status=404, hash=block_hash)
    return BlockResponse.from_block(block)
