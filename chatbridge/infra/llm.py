from functools import lru_cache
from typing import Optional

from anthropic import AsyncAnthropic
from openai import AsyncOpenAI

from chatbridge.adapters.backend.anthropic_commands import AnthropicCommands
from chatbridge.adapters.backend.catalog import CatalogCommands
from chatbridge.adapters.backend.dummy import DummyBackend
from chatbridge.adapters.backend.local import LocalBackend
from chatbridge.adapters.backend.openai_commands import OpenAICommands
from chatbridge.adapters.llm.anthropic import AnthropicAdapter
from chatbridge.adapters.llm.base import ProviderAdapter
from chatbridge.adapters.llm.constants import BackendKind, Command, Provider
from chatbridge.adapters.llm.openai import OpenAIAdapter
from chatbridge.domain.errors import ConfigError
from chatbridge.domain.ports.invoker import InvokerPort
from chatbridge.infra.logging import setup_logging
from chatbridge.settings import settings


def make_anthropic_client() -> AsyncAnthropic:
    if not settings.ANTHROPIC_API_KEY:
        raise ConfigError('ANTHROPIC_API_KEY is required for provider=anthropic')

    return AsyncAnthropic(
        api_key=settings.ANTHROPIC_API_KEY,
        base_url=settings.ANTHROPIC_API_ENDPOINT,
        timeout=settings.REQUEST_TIMEOUT_S,
        max_retries=settings.LLM_MAX_RETRIES,
    )


def make_openai_client() -> AsyncOpenAI:
    if not settings.OPENAI_API_KEY:
        raise ConfigError('OPENAI_API_KEY is required for provider=openai')

    return AsyncOpenAI(
        api_key=settings.OPENAI_API_KEY,
        base_url=settings.OPENAI_API_ENDPOINT,
        timeout=settings.REQUEST_TIMEOUT_S,
        max_retries=settings.LLM_MAX_RETRIES,
    )


def _backend_kind(name: Optional[str]) -> BackendKind:
    wanted = (name or settings.BACKEND or BackendKind.DUMMY.value)
    wanted = getattr(wanted, 'value', wanted).strip().lower()
    try:
        return BackendKind(wanted)
    except ValueError:
        raise ConfigError(f'{wanted} is not a valid backend')


def make_local_backend() -> LocalBackend:
    # Only providers with a configured key get their command registered
    backend = LocalBackend()
    backend.register(
        Command.AVAILABLE_MODELS.value,
        CatalogCommands(settings.MODELS_CATALOG_PATH).get_available_models,
    )
    if settings.ANTHROPIC_API_KEY:
        backend.register(
            Command.GENERATE_ANTHROPIC.value,
            AnthropicCommands(make_anthropic_client()).generate_anthropic_response,
        )
    if settings.OPENAI_API_KEY:
        backend.register(
            Command.GENERATE_OPENAI.value,
            OpenAICommands(make_openai_client()).generate_openai_response,
        )
    return backend


def get_backend(name: Optional[str] = None) -> InvokerPort:
    if _backend_kind(name) == BackendKind.LOCAL:
        return make_local_backend()
    return DummyBackend(CatalogCommands(settings.MODELS_CATALOG_PATH))


@lru_cache(maxsize=1)
def get_backend_singleton() -> InvokerPort:
    # Build once per process; logging is configured alongside
    setup_logging(settings)
    return get_backend()


def get_adapter(
    provider: Optional[str] = None,
    backend: Optional[InvokerPort] = None,
) -> ProviderAdapter:
    wanted = getattr(provider, 'value', provider)
    wanted = (wanted or '').strip().lower()
    try:
        provider_enum = Provider(wanted)
    except ValueError:
        raise ConfigError(f'{provider} is not a valid provider')

    if backend is None:
        local = _backend_kind(None) == BackendKind.LOCAL
        if local and provider_enum == Provider.ANTHROPIC and not settings.ANTHROPIC_API_KEY:
            raise ConfigError('ANTHROPIC_API_KEY is required for provider=anthropic')
        if local and provider_enum == Provider.OPENAI and not settings.OPENAI_API_KEY:
            raise ConfigError('OPENAI_API_KEY is required for provider=openai')
        backend = get_backend_singleton()

    if provider_enum == Provider.ANTHROPIC:
        return AnthropicAdapter(invoker=backend)
    return OpenAIAdapter(invoker=backend)
