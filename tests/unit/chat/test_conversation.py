"""
Unit tests for Conversation.

Tests transcript ordering, blank input handling and thread safety.
"""

import threading

import pytest

from datamind.chat.conversation import ChatMessage, Conversation, MessageRole
from datamind.chat.query_interpreter import QueryInterpreter


class CountingInterpreter(QueryInterpreter):
    """Interpreter that records every question it answers."""

    def __init__(self):
        super().__init__()
        self.questions = []

    def answer(self, text, dataset, report):
        self.questions.append(text)
        return f"answer to {text}"


class BlockingInterpreter(QueryInterpreter):
    """Interpreter that waits for a signal before answering."""

    def __init__(self):
        super().__init__()
        self.started = threading.Event()
        self.release = threading.Event()

    def answer(self, text, dataset, report):
        self.started.set()
        self.release.wait(timeout=5)
        return f"answer to {text}"


@pytest.fixture
def conversation(analyzer, sales_dataset):
    return Conversation(sales_dataset, analyzer.analyze(sales_dataset))


@pytest.mark.unit
class TestConversation:
    """Test the question/answer transcript."""

    def test_ask_appends_question_then_answer(self, conversation):
        answer = conversation.ask("mean amount")

        assert answer == "The average (mean) value of **amount** is **120.50**."
        assert conversation.messages == [
            ChatMessage(MessageRole.USER, "mean amount"),
            ChatMessage(MessageRole.ASSISTANT, answer),
        ]

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_blank_question_ignored(self, analyzer, sales_dataset, text):
        interpreter = CountingInterpreter()
        conversation = Conversation(sales_dataset, analyzer.analyze(sales_dataset), interpreter=interpreter)

        assert conversation.ask(text) is None
        assert conversation.messages == []
        assert interpreter.questions == []

    def test_messages_is_a_copy(self, conversation):
        conversation.ask("hello")
        conversation.messages.clear()

        assert len(conversation.messages) == 2

    def test_clear(self, conversation):
        conversation.ask("hello")
        conversation.clear()

        assert conversation.messages == []

    def test_message_to_dict(self):
        assert ChatMessage(MessageRole.USER, "hi").to_dict() == {"role": "user", "text": "hi"}

    def test_answers_follow_their_questions(self, analyzer, sales_dataset):
        conversation = Conversation(
            sales_dataset,
            analyzer.analyze(sales_dataset),
            interpreter=CountingInterpreter(),
            response_delay=0.01
        )
        questions = [f"question {i}" for i in range(5)]
        threads = [threading.Thread(target=conversation.ask, args=(q,)) for q in questions]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        messages = conversation.messages
        assert len(messages) == 10
        for question, answer in zip(messages[::2], messages[1::2]):
            assert question.role == MessageRole.USER
            assert answer.role == MessageRole.ASSISTANT
            assert answer.text == f"answer to {question.text}"
        assert sorted(m.text for m in messages[::2]) == questions

    def test_messages_readable_while_answer_pending(self, analyzer, sales_dataset):
        interpreter = BlockingInterpreter()
        conversation = Conversation(sales_dataset, analyzer.analyze(sales_dataset), interpreter=interpreter)
        thread = threading.Thread(target=conversation.ask, args=("q",))
        thread.start()
        try:
            assert interpreter.started.wait(timeout=5)
            assert conversation.messages == [ChatMessage(MessageRole.USER, "q")]
        finally:
            interpreter.release.set()
            thread.join(timeout=5)

        assert conversation.messages == [
            ChatMessage(MessageRole.USER, "q"),
            ChatMessage(MessageRole.ASSISTANT, "answer to q"),
        ]
