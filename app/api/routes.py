"""FastAPI routes for conversation and wallet agent actions."""
from fastapi import APIRouter, Depends

from app.core.actions import RenameConversationRequest, rename_conversation, retrieve_agent_kit
from app.core.auth import AuthContext, get_auth_context
from app.core.titles import generate_title_from_user_message
from app.models.schemas import EnvelopeResponse, TitleRequest, TitleResponse

router = APIRouter(prefix="/api", tags=["actions"])


@router.post("/conversations/title", response_model=TitleResponse)
def generate_title(req: TitleRequest) -> TitleResponse:
    """Generate a title from the first user message. Model errors are not caught."""
    return TitleResponse(title=generate_title_from_user_message(req.message))


@router.post("/conversations/rename", response_model=EnvelopeResponse, response_model_exclude_none=True)
def rename(req: RenameConversationRequest) -> dict:
    """Rename a conversation. Invalid bodies are rejected with 422 before any write."""
    return rename_conversation(req).to_dict()


@router.post("/agent-kit", response_model=EnvelopeResponse, response_model_exclude_none=True)
def agent_kit(auth: AuthContext = Depends(get_auth_context)) -> dict:
    """Build the caller's wallet agent and return a summary of it (never key material)."""
    result = retrieve_agent_kit(auth)
    if result.success:
        return {"success": True, "data": result.data["agent"].describe()}
    return result.to_dict()


@router.get("/health")
def health() -> dict:
    """Health check."""
    return {"status": "ok"}
