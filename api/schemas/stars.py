from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class StarPayload(BaseModel):
    """Passenger data. Only the shape of a mapping is enforced."""

    dec: str | None = Field(None, description="Declination")
    ra: str | None = Field(None, description="Right ascension")
    story: str | None = None

    model_config = {"extra": "allow"}


class ValidationRequest(BaseModel):
    address: str = Field(..., min_length=1, description="Wallet address")


class ValidationMessageResponse(BaseModel):
    message: str


class SubmitStarRequest(BaseModel):
    address: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1, description="Challenge message as issued")
    signature: str = Field(..., min_length=1, description="Wallet signature over message")
    star: StarPayload

    def star_dict(self) -> dict[str, Any]:
        return self.star.model_dump(exclude_unset=True)
