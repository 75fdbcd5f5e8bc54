from pydantic import BaseModel
from typing import Any


class ChartData(BaseModel):
    labels: list[str]
    datasets: list[dict[str, Any]]
