from fastapi import APIRouter, Depends

from app.api.v1.deps import get_connectivity
from app.schemas.state import ConnectivityResponse
from app.services.connectivity import ConnectivityObserver


router = APIRouter()


@router.get("", response_model=ConnectivityResponse)
async def connectivity_state(connectivity: ConnectivityObserver = Depends(get_connectivity)):
    return ConnectivityResponse(state=connectivity.state)
