"""
Payout endpoints.

PUT  /payouts/form            Update amount, currency, memo or recipient type.
POST /payouts/form/defaults   Fill the example amount and memo.
POST /payouts                 Submit the current create-payout screen.
POST /payouts/execute         Execute the retained payout request.
POST /payouts/cancel          Cancel the retained payout request.
POST /payouts/refresh         Refetch the retained payout request.
POST /payouts/search          Search the organization's payout requests.

Failures are reported in the rendered view state, not as HTTP errors.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from payout_portal.models.enums import RecipientType
from payout_portal.models.forms import PayoutFormInput
from payout_portal.session import get_controller
from payout_portal.views.controller import ViewController
from payout_portal.views.state import ViewState

router = APIRouter(prefix="/payouts", tags=["payouts"])


class SelectionsUpdate(BaseModel):
    amount: Optional[str] = None
    currency: Optional[str] = None
    memo: Optional[str] = None
    recipient_type: Optional[RecipientType] = None


class SearchRequest(BaseModel):
    organization_id: str
    statuses: Optional[list[str]] = None


@router.put("/form", response_model=ViewState)
async def update_form(update: SelectionsUpdate, controller: ViewController = Depends(get_controller)):
    controller.update_selections(
        amount=update.amount,
        currency=update.currency,
        memo=update.memo,
        recipient_type=update.recipient_type,
    )
    return controller.render()


@router.post("/form/defaults", response_model=ViewState)
async def apply_defaults(controller: ViewController = Depends(get_controller)):
    controller.apply_default_values()
    return controller.render()


@router.post("", response_model=ViewState)
async def submit_payout(
    form: Optional[PayoutFormInput] = None,
    controller: ViewController = Depends(get_controller),
):
    """Submit the payout form; without a body the screen's seeded values are used."""
    await controller.submit_payout(form)
    return controller.render()


@router.post("/execute", response_model=ViewState)
async def execute_payout(controller: ViewController = Depends(get_controller)):
    await controller.execute_payout()
    return controller.render()


@router.post("/cancel", response_model=ViewState)
async def cancel_payout(controller: ViewController = Depends(get_controller)):
    await controller.cancel_payout()
    return controller.render()


@router.post("/refresh", response_model=ViewState)
async def refresh_payout(controller: ViewController = Depends(get_controller)):
    await controller.refresh_payout()
    return controller.render()


@router.post("/search", response_model=ViewState)
async def search_payouts(request: SearchRequest, controller: ViewController = Depends(get_controller)):
    await controller.search_payouts(request.organization_id, request.statuses)
    return controller.render()
