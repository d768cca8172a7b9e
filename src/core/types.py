"""Shared type aliases used across the destination modules."""
from __future__ import annotations

from typing import Annotated, Tuple

from pydantic import Field, StringConstraints

Lat = Annotated[float, Field(ge=-90, le=90)]
Lon = Annotated[float, Field(ge=-180, le=180)]
LatLng = Tuple[Lat, Lon]
CountryCode = Annotated[str, Field(pattern=r"^[A-Z]{2}$")]
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
