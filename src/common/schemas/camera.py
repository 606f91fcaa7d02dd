from typing import List
from pydantic import BaseModel, Field

class CameraLocation(BaseModel):
    """
    Represents a camera location shown on the map.
    """
    name: str = Field(..., description="Unique location name")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude")

class CameraNetwork(BaseModel):
    """
    All configured cameras and the map center of the network.
    """
    locations: List[CameraLocation]
    center: CameraLocation = Field(..., description="Mean position of all cameras")
    timezone: str = Field(..., description="Civil timezone used to resolve hour/day")
