from typing import Any, Dict, List, Optional

from chatbridge.adapters.llm.base import ProviderAdapter
from chatbridge.adapters.llm.constants import Command
from chatbridge.domain.errors import NoResponseChoices
from chatbridge.domain.models import (Message, OpenAIModelParams,
                                      ProviderResponse, TokenUsage)


class OpenAIAdapter(ProviderAdapter):
    """
    Adapter for the completion-style API.
    - `instructions` travel under the command's `system` key.
    - Results are always stored provider-side (`store=True`).
    """

    command = Command.GENERATE_OPENAI.value

    def build_request(
        self,
        new_turn: str,
        history: List[Dict[str, str]],
        model_params: OpenAIModelParams,
    ) -> Dict[str, Any]:
        return {
            'model': model_params.model,
            'input': new_turn,
            'max_tokens': model_params.max_output_tokens,
            'temperature': model_params.temperature,
            'top_p': model_params.top_p,
            'store': True,
            'system': model_params.instructions or None,
            'conversation_history': history,
        }

    def create_message(self, response: ProviderResponse) -> Message:
        choices = response.get('choices') or []
        if not choices:
            raise NoResponseChoices('No response choices available')

        message = choices[0]['message']
        return Message(role=message['role'], content=message.get('content') or '')

    def extract_token_usage(self, response: ProviderResponse) -> Optional[TokenUsage]:
        return self._usage(response, 'prompt_tokens', 'completion_tokens')
