from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from .models_catalog import CategoryAggregate


class SalesPoint(BaseModel):
    model_config = ConfigDict(extra="allow")

    date: datetime
    sales: Decimal = Decimal("0")


class SalesStatistics(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    weekly_sales: list[SalesPoint] = Field(default_factory=list, alias="weeklySales")
    categories: list[CategoryAggregate] = Field(default_factory=list)
