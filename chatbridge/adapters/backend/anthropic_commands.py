from typing import Any, Dict, List, Optional

from anthropic import AsyncAnthropic


class AnthropicCommands:
    def __init__(self, client: AsyncAnthropic):
        self.client = client

    @staticmethod
    def _map_history(history: List[Dict[str, str]], new_turn: str) -> List[dict]:
        messages = [{'role': m['role'], 'content': m['content']} for m in history]
        messages.append({'role': 'user', 'content': new_turn})
        return messages

    async def generate_anthropic_response(
        self,
        *,
        model: str,
        input: str,
        max_tokens: int,
        temperature: float,
        top_p: float,
        system: Optional[str] = None,
        thinking: Optional[Dict[str, Any]] = None,
        convo_history: Optional[List[Dict[str, str]]] = None,
    ) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = dict(
            model=model,
            messages=self._map_history(convo_history or [], input),
            max_tokens=max_tokens,
            temperature=temperature,
            top_p=top_p,
        )
        # System goes in top-level 'system' as a single text block
        if system is not None:
            kwargs['system'] = [{'type': 'text', 'text': system}]
        if thinking is not None:
            kwargs['thinking'] = thinking

        resp = await self.client.messages.create(**kwargs)
        return resp.model_dump(mode='json')
