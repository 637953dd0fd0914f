from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class NormalizedRecord(BaseModel):
    """Structured result of normalizing one chart analysis."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Cleaned analysis, one unique line per row")
    pair: Optional[str] = Field(None, description="Instrument code such as EUR/USD")
    timeframe: Optional[str] = Field(None, description="Timeframe code such as 15M, 4H, 1MO or 'Not Identified'")
    confidence: Optional[int] = Field(None, description="Confidence percentage as written by the model (not clamped)")

    @property
    def lines(self) -> List[str]:
        return self.text.split("\n") if self.text else []
