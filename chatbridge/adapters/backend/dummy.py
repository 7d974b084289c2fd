from typing import Any, Dict, List, Optional, Tuple

from chatbridge.adapters.backend.catalog import CatalogCommands
from chatbridge.adapters.llm.constants import Command
from chatbridge.domain.errors import UnknownCommand
from chatbridge.domain.ports.invoker import InvokerPort


def _reply_for(params: Dict[str, Any], history_key: str) -> str:
    turns = len(params.get(history_key) or []) + 1
    return f"Echo after {turns} turn(s): {params.get('input', '')}"


def _words(text: str) -> int:
    return len(text.split())


class DummyBackend(InvokerPort):
    """Offline backend that answers with provider-shaped canned responses."""

    def __init__(self, catalog: Optional[CatalogCommands] = None) -> None:
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self.catalog = catalog or CatalogCommands()

    async def invoke(self, name: str, params: Dict[str, Any]) -> Any:
        self.calls.append((name, params))

        if name == Command.GENERATE_ANTHROPIC.value:
            text = _reply_for(params, 'convo_history')
            return {
                'id': 'msg_dummy',
                'type': 'message',
                'role': 'assistant',
                'model': params.get('model'),
                'content': [{'type': 'text', 'text': text}],
                'stop_reason': 'end_turn',
                'stop_sequence': None,
                'usage': {
                    'input_tokens': _words(params.get('input', '')),
                    'output_tokens': _words(text),
                },
            }

        if name == Command.GENERATE_OPENAI.value:
            text = _reply_for(params, 'conversation_history')
            return {
                'id': 'chatcmpl-dummy',
                'object': 'chat.completion',
                'model': params.get('model'),
                'choices': [
                    {
                        'index': 0,
                        'finish_reason': 'stop',
                        'message': {'role': 'assistant', 'content': text},
                    }
                ],
                'usage': {
                    'prompt_tokens': _words(params.get('input', '')),
                    'completion_tokens': _words(text),
                },
            }

        if name == Command.AVAILABLE_MODELS.value:
            return await self.catalog.get_available_models()

        raise UnknownCommand(f'Unknown command: {name}')
