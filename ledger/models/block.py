from pydantic import BaseModel, ConfigDict, Field, field_validator


class LedgerBlock(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: str = "block"
    number: int | None = Field(default=None, description="Block number, must be >= 0")
    hash: str | None = None
    previous_hash: str | None = None
    era: str | None = None
    epoch: int | None = None
    epoch_slot: int | None = None
    slot: int | None = Field(default=None, description="Absolute slot across all eras")
    tx_count: int = 0
    body_size: int | None = None
    issuer_vkey: str | None = None

    @field_validator("number")
    @classmethod
    def validate_block_number(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError(f"Block number must be greater than or equal to 0, got {v}")
        return v
