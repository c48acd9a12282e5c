from pydantic import BaseModel, ConfigDict, Field


class Staff(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    specialization: str
    photo: str  # URL to the staff photo
    salon_id: str = Field(alias="salonId")
