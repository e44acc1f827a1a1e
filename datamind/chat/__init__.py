"""Rule-based question answering over analysis reports."""

from .query_interpreter import QueryInterpreter, QueryIntent, answer_query
from .conversation import Conversation, ChatMessage, MessageRole

__all__ = [
    'QueryInterpreter',
    'QueryIntent',
    'answer_query',
    'Conversation',
    'ChatMessage',
    'MessageRole',
]
