"""
Account endpoints.

GET  /accounts                       Refresh the account list.
POST /accounts                       Create an account and select it.
POST /accounts/{account_id}/select   Select a fetched account.

Failures are reported in the rendered view state, not as HTTP errors.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from payout_portal.session import get_controller
from payout_portal.views.controller import ViewController
from payout_portal.views.state import ViewState

router = APIRouter(prefix="/accounts", tags=["accounts"])


class CreateAccountRequest(BaseModel):
    name: str


@router.get("", response_model=ViewState)
async def list_accounts(controller: ViewController = Depends(get_controller)):
    await controller.refresh_accounts()
    return controller.render()


@router.post("", response_model=ViewState)
async def create_account(request: CreateAccountRequest, controller: ViewController = Depends(get_controller)):
    await controller.submit_create_account(request.name)
    return controller.render()


@router.post("/{account_id}/select", response_model=ViewState)
async def select_account(account_id: str, controller: ViewController = Depends(get_controller)):
    controller.select_account(account_id)
    return controller.render()
