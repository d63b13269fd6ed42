from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PaginationCursor(BaseModel):
    """Position after which a page starts: a block hash and optionally a tx hash in it."""

    model_config = ConfigDict(frozen=True)

    block: str
    tx: str | None = None


class CursorBounds(BaseModel):
    """Absolute ordinals delimiting one page of transactions."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    until_tx: int
    until_block: int
    after_tx: int = 0
    after_block: int = 0
    after_tx_index: int = 0
