from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from chatbridge.domain.errors import BackendError, DomainError, UnknownCommand
from chatbridge.domain.ports.invoker import InvokerPort

logger = logging.getLogger(__name__)

CommandHandler = Callable[..., Awaitable[Any]]


class LocalBackend(InvokerPort):
    """
    In-process backend: dispatches named commands to registered handlers.

    Handlers receive the command params as keyword arguments. Domain errors
    raised by a handler pass through untouched; anything else is logged and
    re-raised as BackendError.
    """

    def __init__(self, commands: Optional[Dict[str, CommandHandler]] = None) -> None:
        self.commands: Dict[str, CommandHandler] = dict(commands or {})

    def register(self, name: str, handler: CommandHandler) -> None:
        self.commands[name] = handler

    async def invoke(self, name: str, params: Dict[str, Any]) -> Any:
        handler = self.commands.get(name)
        if handler is None:
            raise UnknownCommand(f'Unknown command: {name}')

        logger.info('[%s] request params=%s', name, params)
        try:
            result = await handler(**params)
        except DomainError:
            raise
        except Exception as e:
            err = BackendError(f'{name} failed: {type(e).__name__}: {e}')
            logger.error('[%s] %s', name, err)
            raise err from e

        logger.info('[%s] response received: %s', name, result)
        return result
