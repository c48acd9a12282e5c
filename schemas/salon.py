from pydantic import BaseModel, ConfigDict, Field
from typing import List


class Salon(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    address: str
    rating: float = Field(ge=0, le=5)  # Rating between 0 and 5
    specialties: List[str] = []
