from dataclasses import dataclass


@dataclass(eq=False)
class DomainError(Exception):
    """Base class for all domain-level errors.

    These represent failures that occur within the bridge's own logic,
    independent of which provider or backend is in use. Raise subclasses
    of this in adapters, backends or factories when the problem is
    related to configuration, input shape or command dispatch.
    """

    message: str
    code: str = 'domain_error'

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class ConfigError(DomainError):
    """Raised when the system is misconfigured.

    Use this for missing or invalid environment variables, API keys,
    or unknown provider/backend names that prevent a backend or adapter
    from being built.
    """

    code: str = 'config_error'


@dataclass(eq=False)
class EmptyConversation(DomainError):
    code: str = 'empty_conversation'


@dataclass(eq=False)
class NoResponseChoices(DomainError):
    code: str = 'no_response_choices'


@dataclass(eq=False)
class UnknownCommand(DomainError):
    code: str = 'unknown_command'


@dataclass(eq=False)
class BackendError(DomainError):  # provider call failed inside the backend
    code: str = 'backend_error'


@dataclass(eq=False)
class CatalogError(DomainError):
    code: str = 'catalog_error'
