from pydantic import BaseModel, ConfigDict

from assets.enums.token_standard import TokenStandard


class TokenDetails(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    standard: TokenStandard
    symbol: str | None = None
    decimals: str | None = None
    # Only set when an owner address was queried
    balance: int | None = None
