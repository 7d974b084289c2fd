import abc
from typing import Optional

from chatbridge.domain.models import Message, ModelParams, ProviderResponse, TokenUsage
from chatbridge.domain.types import ConversationInput


class LLMPort(abc.ABC):
    @abc.abstractmethod
    async def generate_response(
        self, messages: ConversationInput, model_params: ModelParams
    ) -> ProviderResponse:
        """
        Given a single message or a history (oldest first),
        return the provider's raw response.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def create_message(self, response: ProviderResponse) -> Message:
        """
        Normalize a raw provider response into a Message.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def extract_token_usage(self, response: ProviderResponse) -> Optional[TokenUsage]:
        raise NotImplementedError
