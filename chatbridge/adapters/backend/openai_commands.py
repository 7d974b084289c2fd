from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI


class OpenAICommands:
    def __init__(self, client: AsyncOpenAI):
        self.client = client

    @staticmethod
    def _map_history(
        history: List[Dict[str, str]], new_turn: str, system: Optional[str]
    ) -> List[dict]:
        out: List[dict] = []
        if system is not None:
            out.append({'role': 'system', 'content': system})
        out.extend({'role': m['role'], 'content': m['content']} for m in history)
        out.append({'role': 'user', 'content': new_turn})
        return out

    async def generate_openai_response(
        self,
        *,
        model: str,
        input: str,
        max_tokens: int,
        temperature: float,
        top_p: float,
        store: bool = True,
        system: Optional[str] = None,
        conversation_history: Optional[List[Dict[str, str]]] = None,
    ) -> Dict[str, Any]:
        resp = await self.client.chat.completions.create(
            model=model,
            messages=self._map_history(conversation_history or [], input, system),
            max_completion_tokens=max_tokens,
            temperature=temperature,
            top_p=top_p,
            store=store,
        )
        return resp.model_dump(mode='json')
