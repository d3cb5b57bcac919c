"""
Screen endpoints.

GET  /view            Render the current view state.
POST /view/navigate   Switch screens.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from payout_portal.models.enums import AppView
from payout_portal.session import get_controller
from payout_portal.views.controller import ViewController
from payout_portal.views.state import ViewState

router = APIRouter(prefix="/view", tags=["view"])


class NavigateRequest(BaseModel):
    view: AppView


@router.get("", response_model=ViewState)
async def get_view(controller: ViewController = Depends(get_controller)):
    return controller.render()


@router.post("/navigate", response_model=ViewState)
async def navigate(request: NavigateRequest, controller: ViewController = Depends(get_controller)):
    controller.navigate(request.view)
    return controller.render()
