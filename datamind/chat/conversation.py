"""
Conversation transcript for the chat collaborator.

Holds the running list of messages for one dataset and guarantees that each
answer is appended after the question it answers. An optional artificial
delay between question and answer never reorders messages: ask() calls
are serialised by one lock, while a second lock guards only the transcript,
so readers see a pending question straight away.
"""

import logging
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from datamind.chat.query_interpreter import QueryInterpreter
from datamind.core.constants import DEFAULT_RESPONSE_DELAY
from datamind.profiler.dataset import Dataset
from datamind.profiler.profile_result import AnalysisReport

logger = logging.getLogger(__name__)


class MessageRole(Enum):
    """Author of a chat message."""
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    """One transcript entry."""
    role: MessageRole
    text: str

    def to_dict(self):
        return {"role": self.role.value, "text": self.text}


class Conversation:
    """
    Question/answer transcript bound to one dataset and its report.

    Attributes:
        dataset: Active dataset
        report: Report produced for the dataset
        response_delay: Seconds to wait before appending each answer
    """

    def __init__(
        self,
        dataset: Dataset,
        report: AnalysisReport,
        interpreter: Optional[QueryInterpreter] = None,
        response_delay: float = DEFAULT_RESPONSE_DELAY
    ):
        self.dataset = dataset
        self.report = report
        self.interpreter = interpreter or QueryInterpreter()
        self.response_delay = response_delay
        self._messages: List[ChatMessage] = []
        self._lock = threading.Lock()
        self._ask_lock = threading.Lock()

    @property
    def messages(self) -> List[ChatMessage]:
        """Copy of the transcript in order."""
        with self._lock:
            return list(self._messages)

    def ask(self, text: str) -> Optional[str]:
        """
        Append a question and its answer to the transcript.

        Blank questions are ignored and never reach the interpreter.

        Args:
            text: User question

        Returns:
            The answer, or None for a blank question
        """
        if not text or not text.strip():
            return None

        with self._ask_lock:
            with self._lock:
                self._messages.append(ChatMessage(MessageRole.USER, text))

            if self.response_delay > 0:
                time.sleep(self.response_delay)
            answer = self.interpreter.answer(text, self.dataset, self.report)

            with self._lock:
                self._messages.append(ChatMessage(MessageRole.ASSISTANT, answer))
                message_count = len(self._messages)

        logger.debug(f"Conversation now has {message_count} messages")
        return answer

    def clear(self) -> None:
        """Drop the transcript."""
        with self._lock:
            self._messages.clear()
