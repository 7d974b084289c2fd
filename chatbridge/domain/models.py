from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from chatbridge.domain.errors import CatalogError

# Raw JSON-like payload returned by a backend command
ProviderResponse = Dict[str, Any]


class Message(BaseModel):
    model_config = ConfigDict(frozen=True, extra='allow')

    role: str
    content: str


class TokenUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)


class ThinkingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal['enabled', 'disabled'] = 'disabled'
    budget_tokens: Optional[int] = Field(default=None, ge=1024)


class ModelParams(BaseModel):
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model: str
    max_output_tokens: int = Field(default=1024, ge=1)
    temperature: float = Field(default=1.0, ge=0.0, le=1.0)
    top_p: float = Field(default=1.0, ge=0.0, le=1.0)


class AnthropicModelParams(ModelParams):
    system: Optional[str] = None
    thinking: Optional[ThinkingConfig] = None

    @model_validator(mode='after')
    def check_thinking_budget(self):
        thinking = self.thinking
        if thinking is None or thinking.type != 'enabled':
            return self
        if thinking.budget_tokens is None:
            raise ValueError('thinking.budget_tokens is required when thinking is enabled')
        if thinking.budget_tokens >= self.max_output_tokens:
            raise ValueError('thinking.budget_tokens must be less than max_output_tokens')
        return self


class OpenAIModelParams(ModelParams):
    temperature: float = Field(default=1.0, ge=0.0, le=2.0)
    instructions: Optional[str] = None


class CatalogParams(BaseModel):
    max_tokens: int = Field(ge=1)
    temperature: float = Field(ge=0.0)
    top_p: float = Field(ge=0.0, le=1.0)


class ModelInfo(BaseModel):
    id: str
    display_name: str
    provider: str
    tags: List[str] = Field(default_factory=list)
    params: CatalogParams

    def to_params(self, **overrides) -> Union[AnthropicModelParams, OpenAIModelParams]:
        """
        Build the provider-specific parameter object seeded from the catalog
        defaults. Keyword overrides win over catalog values.
        """
        base = {
            'model': self.id,
            'max_output_tokens': self.params.max_tokens,
            'temperature': self.params.temperature,
            'top_p': self.params.top_p,
        }
        base.update(overrides)
        if self.provider == 'anthropic':
            return AnthropicModelParams(**base)
        if self.provider == 'openai':
            return OpenAIModelParams(**base)
        raise CatalogError(f'unsupported provider {self.provider!r} for model {self.id}')


class ModelCatalog(BaseModel):
    models: List[ModelInfo] = Field(default_factory=list)
