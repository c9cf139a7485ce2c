"""Chat API endpoint.

POST /api/v1/chats runs one user message through the two-turn tool-calling
conversation. This is the conversation boundary: bridge errors raised
anywhere below are turned into a {"error": ...} response here.
"""

import logging

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from utcp_bridge.dependencies import get_chat_orchestrator
from utcp_bridge.models.chat import ChatErrorResponse, ChatResponse
from utcp_bridge.services import ChatOrchestrator
from utcp_bridge.utcp.errors import UtcpBridgeError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/chats", tags=["chat"])


@router.post(
    "",
    response_model=ChatResponse,
    responses={400: {"model": ChatErrorResponse}},
)
async def send_message(
    user_message: str = Body(..., examples=["What's the weather in Lisbon?"]),
    orchestrator: ChatOrchestrator = Depends(get_chat_orchestrator),
) -> ChatResponse | JSONResponse:
    """Send a message and receive the model's final answer.

    The request body is a JSON string holding the user message. Tools are
    (re)discovered from the configured manuals, the model may call one of
    them, and the tool result is fed back for the final answer.

    Args:
        user_message: The user's message
        orchestrator: Injected chat orchestrator

    Returns:
        ChatResponse with the final answer, or a 400 ChatErrorResponse
    """
    logger.info(f"Received chat message ({len(user_message)} characters)")

    try:
        response = await orchestrator.send_message(user_message)
    except UtcpBridgeError as e:
        logger.error(f"Chat failed: {e}")
        return JSONResponse(
            status_code=400,
            content=ChatErrorResponse(error=str(e)).model_dump(),
        )

    logger.info(f"Returning response: {len(response)} characters")
    return ChatResponse(response=response)
