"""
API routes for the implementor bridge.
Provides REST endpoints for delivering tables, inspecting pending slots and
bringing the host page up.
"""

import logging
from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from config.settings import settings
from core.bridge import ImplementorBridge
from core.pending_buffer import PendingBuffer
from host import HostNamespace, HostPage, ImplementorCollector

logger = logging.getLogger(__name__)

router = APIRouter()


class BridgeState:
    """Host page and pending buffer owned by one application instance."""

    def __init__(self):
        self.namespace = HostNamespace()
        self.buffer = PendingBuffer()
        self.page = HostPage(self.namespace, self.buffer)
        self.collector: Optional[ImplementorCollector] = None


def _state(request: Request) -> BridgeState:
    return request.app.state.bridge


# Pydantic models for request/response
class DeliverRequest(BaseModel):
    table: Dict[str, List[Any]]
    slot: Optional[str] = None

class DeliverResponse(BaseModel):
    delivered_to: str
    slot: str

class HostReadyResponse(BaseModel):
    drained: int

class HealthResponse(BaseModel):
    status: str
    host_ready: bool
    pending: int

@router.post("/deliver", response_model=DeliverResponse)
def deliver_endpoint(body: DeliverRequest, request: Request):
    """
    Deliver one implementor table to the host, or park it in its slot.
    """
    state = _state(request)
    slot_name = body.slot or settings.PENDING_SLOT_NAME
    host_ready = state.page.is_ready

    bridge = ImplementorBridge(state.namespace, state.buffer.slot(slot_name))
    bridge.deliver(body.table)
    logger.info(f"Delivered table for slot {slot_name} ({'host' if host_ready else 'pending'})")

    return DeliverResponse(delivered_to="host" if host_ready else "pending", slot=slot_name)

@router.get("/pending")
def list_pending(request: Request):
    """
    List slots holding a table that the host has not drained yet.
    """
    return {"slots": _state(request).buffer.pending()}

@router.get("/pending/{slot:path}")
def get_pending(slot: str, request: Request):
    """
    Get the table buffered in a slot.
    """
    buffer = _state(request).buffer
    table = buffer.slot(slot).peek() if buffer.has_slot(slot) else None
    if table is None:
        raise HTTPException(status_code=404, detail=f"No pending table in slot: {slot}")
    return {"slot": slot, "table": table}

@router.post("/host/ready", response_model=HostReadyResponse)
def host_ready(request: Request):
    """
    Install the host's registration function and drain pending tables.
    """
    state = _state(request)
    if state.page.is_ready:
        raise HTTPException(status_code=409, detail="Host is already ready")

    state.collector = ImplementorCollector()
    drained = state.page.ready(state.collector)
    return HostReadyResponse(drained=drained)

@router.get("/host/implementors")
def host_implementors(request: Request):
    """
    Get every implementor group the host has received.
    """
    state = _state(request)
    if state.collector is None:
        raise HTTPException(status_code=409, detail="Host is not ready")
    return {"groups": state.collector.merged()}

@router.get("/health", response_model=HealthResponse)
def health_check(request: Request):
    """
    System health check endpoint.
    """
    state = _state(request)
    return HealthResponse(
        status="ok",
        host_ready=state.page.is_ready,
        pending=len(state.buffer.pending())
    )
