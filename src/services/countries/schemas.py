from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from src.core.types import CountryCode


class CountryName(BaseModel):
    """Name block of a REST Countries record."""
    common: str
    official: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class CapitalInfo(BaseModel):
    """Coordinates of the capital city, when REST Countries knows them."""
    latlng: Optional[List[float]] = Field(default=None, description="[lat, lon] of the capital")

    model_config = ConfigDict(extra="ignore")


class Flags(BaseModel):
    svg: str = Field(description="URL of the SVG flag image")
    png: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class Currency(BaseModel):
    name: str
    symbol: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class CountryRecord(BaseModel):
    """Subset of a REST Countries v3.1 record used for destination resolution."""
    name: CountryName
    cca2: CountryCode = Field(description="ISO 3166-1 alpha-2 code")
    capital: List[str] = Field(default_factory=list)
    capitalInfo: CapitalInfo = Field(default_factory=CapitalInfo)
    flags: Flags
    currencies: Dict[str, Currency] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")

    @property
    def currency_name(self) -> str:
        """Human-readable name of the first listed currency, or ``"N/A"``."""
        for currency in self.currencies.values():
            return currency.name
        return "N/A"

    @property
    def capital_name(self) -> Optional[str]:
        return self.capital[0] if self.capital else None
