from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class OperationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    operation_name: str = Field(alias="operationName")
    variables: Optional[Dict[str, Any]] = None


class ErrorDetail(BaseModel):
    message: str
    extensions: Dict[str, Any] = {}


class OperationResponse(BaseModel):
    data: Optional[Dict[str, Any]] = None
    errors: Optional[List[ErrorDetail]] = None
