from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Schedule(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    time: str  # Display string, e.g. "10:00 AM"
    is_available: bool = Field(alias="isAvailable")
    # Slots without a staff_id are shared by every staff member
    staff_id: Optional[str] = Field(None, alias="staffId")
