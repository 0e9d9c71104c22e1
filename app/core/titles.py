"""
Conversation title generation from the first user message.

The length and punctuation rules live in the prompt only; the model's text is
returned unchanged apart from surrounding whitespace.
"""
import json

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_nvidia_ai_endpoints import ChatNVIDIA

from app.core.config import get_settings

TITLE_SYSTEM_PROMPT = """
- you will generate a short title based on the first message a user begins a conversation with
- ensure it is not more than 80 characters long
- the title should be a summary of the user's message
- do not use quotes or colons"""

_llm = None


def _get_title_llm():
    global _llm
    if _llm is None:
        s = get_settings()
        _llm = ChatNVIDIA(
            model=s.title_model,
            nvidia_api_key=s.nvidia_api_key,
            temperature=0.2,
            max_tokens=64,
        )
    return _llm


def generate_title_from_user_message(message: dict, llm=None) -> str:
    """Ask the model for a title summarising ``message``. Provider errors propagate."""
    model = llm if llm is not None else _get_title_llm()
    out = model.invoke([
        SystemMessage(content=TITLE_SYSTEM_PROMPT),
        HumanMessage(content=json.dumps(message)),
    ])
    return (out.content or "").strip()
