from __future__ import annotations

from pydantic import BaseModel, Field

from starledger.core.block import Block


class BlockResponse(BaseModel):
    hash: str
    height: int
    body: str = Field(..., description="Hex-encoded canonical JSON")
    time: int
    previous_block_hash: str

    @classmethod
    def from_block(cls, block: Block) -> BlockResponse:
        return cls(**block.to_dict())
