from typing import Any, Dict, List, Optional

from chatbridge.adapters.llm.base import ProviderAdapter
from chatbridge.adapters.llm.constants import Command
from chatbridge.domain.models import (AnthropicModelParams, Message,
                                      ProviderResponse, TokenUsage)


class AnthropicAdapter(ProviderAdapter):
    command = Command.GENERATE_ANTHROPIC.value

    def build_request(
        self,
        new_turn: str,
        history: List[Dict[str, str]],
        model_params: AnthropicModelParams,
    ) -> Dict[str, Any]:
        thinking = model_params.thinking
        return {
            'model': model_params.model,
            'input': new_turn,
            'system': model_params.system or None,
            'max_tokens': model_params.max_output_tokens,
            'temperature': model_params.temperature,
            'top_p': model_params.top_p,
            'thinking': thinking.model_dump(exclude_none=True) if thinking else None,
            'convo_history': history,
        }

    def create_message(self, response: ProviderResponse) -> Message:
        # Join text blocks from the response; thinking and other blocks are skipped
        content = ''.join(
            block.get('text', '') for block in response.get('content') or []
            if block.get('type') == 'text'
        )
        return Message(role=response.get('role') or '', content=content)

    def extract_token_usage(self, response: ProviderResponse) -> Optional[TokenUsage]:
        return self._usage(response, 'input_tokens', 'output_tokens')
