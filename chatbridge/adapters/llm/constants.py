from enum import Enum


class Provider(str, Enum):
    OPENAI = 'openai'
    ANTHROPIC = 'anthropic'


class BackendKind(str, Enum):
    LOCAL = 'local'
    DUMMY = 'dummy'


class Command(str, Enum):
    GENERATE_ANTHROPIC = 'generate_anthropic_response'
    GENERATE_OPENAI = 'generate_openai_response'
    AVAILABLE_MODELS = 'get_available_models'
