"""Sort endpoint for the API."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from server.models import SortErrorResponse, SortRequest, SortSuccessResponse
from server.sort_processor import process_sort

router = APIRouter()

SORT_RESPONSES = {
    status.HTTP_200_OK: {"model": SortSuccessResponse, "description": "Sorted buffer"},
    status.HTTP_400_BAD_REQUEST: {"model": SortErrorResponse, "description": "Cursor outside the document"},
}


@router.post("/api/sort", responses=SORT_RESPONSES)
def api_sort(sort_request: SortRequest) -> JSONResponse:
    """Sort the markdown list under the cursor of a posted buffer.

    **Parameters**

    - **sort_request** (`SortRequest`): buffer text, cursor and direction

    **Returns**

    - **JSONResponse**: the rewritten text and the new cursor, or an error with status 400

    """
    response = process_sort(
        sort_request.text,
        line=sort_request.line,
        column=sort_request.column,
        direction=sort_request.direction,
    )
    if isinstance(response, SortErrorResponse):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response.model_dump())
    return JSONResponse(content=response.model_dump())


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
