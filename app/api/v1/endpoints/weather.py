from fastapi import APIRouter, Depends, Query, Response, status

from app.api.v1.deps import get_connectivity, get_orchestrator
from app.schemas.state import UiState, WeatherHomeResponse
from app.schemas.weather import Coordinates
from app.services.connectivity import ConnectivityObserver
from app.services.weather.home import WeatherOrchestrator


router = APIRouter()


@router.get("/home", response_model=WeatherHomeResponse)
async def weather_home(
    orchestrator: WeatherOrchestrator = Depends(get_orchestrator),
    connectivity: ConnectivityObserver = Depends(get_connectivity),
):
    return WeatherHomeResponse(
        ui_state=orchestrator.ui_state,
        connectivity=connectivity.state,
        location=orchestrator.location,
    )


@router.get("/state", response_model=UiState)
async def weather_state(orchestrator: WeatherOrchestrator = Depends(get_orchestrator)):
    return orchestrator.ui_state


@router.put("/location", response_model=Coordinates)
async def set_location(
    location: Coordinates,
    orchestrator: WeatherOrchestrator = Depends(get_orchestrator),
):
    orchestrator.set_location(location.latitude, location.longitude)
    return orchestrator.location


@router.post("/refresh", response_model=UiState)
async def refresh_weather(
    response: Response,
    wait: bool = Query(True),
    orchestrator: WeatherOrchestrator = Depends(get_orchestrator),
):
    if not wait:
        orchestrator.launch_fetch()
        response.status_code = status.HTTP_202_ACCEPTED
        return orchestrator.ui_state
    return await orchestrator.fetch_weather()
