#!/usr/bin/env python3
"""
Session endpoint - issues anonymous user ids.
"""

import uuid
import logging
from fastapi import APIRouter

from ..models.responses import SessionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["session"])


@router.post("/session", response_model=SessionResponse)
def create_session():
    """
    Issue a new anonymous user id.

    Clients send it back in the X-User-Id header on every other call.
    """
    user_id = str(uuid.uuid4())
    logger.info(f"Issued anonymous user id {user_id}")
    return SessionResponse(success=True, user_id=user_id)
