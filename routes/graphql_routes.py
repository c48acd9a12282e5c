from fastapi import APIRouter, Depends
from schemas.operation import OperationRequest, OperationResponse, ErrorDetail
from crud import operations
from crud.exceptions import ResolverError
from config.database import get_db, Database
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["graphql"])


@router.post("/graphql", response_model=OperationResponse, response_model_exclude_unset=True)
async def run_operation(request: OperationRequest, db: Database = Depends(get_db)):
    """Single endpoint for every operation: ``data`` on success, ``errors`` otherwise."""
    try:
        result = await operations.execute(request.operation_name, request.variables)
        return OperationResponse(data={request.operation_name: result})
    except ResolverError as e:
        logger.warning(f"Operation {request.operation_name} failed: {e.message}")
        return OperationResponse(data=None, errors=[ErrorDetail(message=e.message, extensions={"code": e.code})])
    except Exception as e:
        logger.error(f"Unexpected error in operation {request.operation_name}: {str(e)}", exc_info=True)
        return OperationResponse(data=None, errors=[
            ErrorDetail(message="Internal server error", extensions={"code": "INTERNAL_SERVER_ERROR"})
        ])
