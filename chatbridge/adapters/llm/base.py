from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple

from chatbridge.domain.errors import EmptyConversation
from chatbridge.domain.models import Message, ModelParams, ProviderResponse, TokenUsage
from chatbridge.domain.ports.invoker import InvokerPort
from chatbridge.domain.ports.llm import LLMPort
from chatbridge.domain.types import ConversationInput, MessageLike


def _field(message: MessageLike, name: str) -> Any:
    if isinstance(message, Mapping):
        return message[name]
    return getattr(message, name)


def split_conversation(messages: ConversationInput) -> Tuple[str, List[Dict[str, str]]]:
    """
    Split a conversation into (new_turn_content, history).

    A lone message counts as a one-element conversation. History entries
    are fresh {'role', 'content'} dicts in original order; any other fields
    on the input messages are dropped.
    """
    if isinstance(messages, (Message, Mapping)):
        messages = [messages]
    items = list(messages)
    if not items:
        raise EmptyConversation('Conversation must contain at least one message')

    *earlier, last = items
    history = [
        {'role': _field(m, 'role'), 'content': _field(m, 'content')}
        for m in earlier
    ]
    return _field(last, 'content'), history


class ProviderAdapter(LLMPort):
    """
    Shared request flow for every provider: split the conversation, let the
    subclass shape the command params, invoke, and hand back the raw result.
    """

    command: str

    def __init__(self, invoker: InvokerPort):
        self.invoker = invoker

    @abc.abstractmethod
    def build_request(
        self,
        new_turn: str,
        history: List[Dict[str, str]],
        model_params: ModelParams,
    ) -> Dict[str, Any]:
        raise NotImplementedError

    async def generate_response(
        self, messages: ConversationInput, model_params: ModelParams
    ) -> ProviderResponse:
        new_turn, history = split_conversation(messages)
        request = self.build_request(new_turn, history, model_params)
        return await self.invoker.invoke(self.command, request)

    @staticmethod
    def _usage(
        response: ProviderResponse, input_key: str, output_key: str
    ) -> Optional[TokenUsage]:
        usage = (response or {}).get('usage')
        if usage is None:
            return None
        return TokenUsage(
            input_tokens=usage.get(input_key) or 0,
            output_tokens=usage.get(output_key) or 0,
        )
