"""
Payments API routes.

Creates payments through the gateway and receives the gateway's signed
redirects/callbacks. Keep this thin: signing lives in the gateway client.
"""
from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, Request

from checkout_gateway.api.dependencies import get_gateway
from checkout_gateway.application.dtos.payments import CheckoutPaymentOptions
from checkout_gateway.application.ports.payment_gateway import PaymentGateway
from checkout_gateway.application.services.payment_service import PaymentService
from checkout_gateway.core.logging_config import get_logger
from checkout_gateway.core.response import success_response


router = APIRouter(prefix="/payments", tags=["Payments"])
logger = get_logger(__name__)


@router.post("", summary="Create payment")
async def create_payment(payload: CheckoutPaymentOptions, gateway: PaymentGateway = Depends(get_gateway)):
    service = PaymentService(gateway=gateway)
    payment = await service.create_payment(payload)
    return success_response(data=payment.model_dump(mode="json", by_alias=True), message="Payment created")


@router.get("/callbacks/{outcome}", summary="Payment redirect/callback")
async def payment_callback(
    outcome: Literal["success", "cancel"],
    request: Request,
    gateway: PaymentGateway = Depends(get_gateway),
):
    # Parameters arrive in the query string; the signed body is empty.
    params = dict(request.query_params)
    service = PaymentService(gateway=gateway)
    event = service.handle_callback(params)
    logger.info("payment_callback_outcome", outcome=outcome, status=event.status)
    return success_response(
        data=event.model_dump(mode="json", exclude={"raw_params"}),
        message="Callback received",
    )
