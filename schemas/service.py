from pydantic import BaseModel, ConfigDict, Field


class Service(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    price: float = Field(ge=0)
    salon_id: str = Field(alias="salonId")
