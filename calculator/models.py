from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class LotSizeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    entry_price: Union[str, float] = Field(alias="entryPrice")
    stop_loss_price: Union[str, float] = Field(alias="stopLossPrice")
    account_balance: Union[str, float] = Field(alias="accountBalance")
    risk_percentage: Union[str, float] = Field(alias="riskPercentageUWantToRisk")
    gold_or_jpy_pair: Optional[Any] = Field(default=None, alias="goldOrJPYPair")


class LotSizeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recommended_lot_size: str = Field(alias="recommendedLotSize")
    pips_if_loose: str = Field(alias="pipsIfLoose")
