import abc
from typing import Any, Dict


class InvokerPort(abc.ABC):
    @abc.abstractmethod
    async def invoke(self, name: str, params: Dict[str, Any]) -> Any:
        """
        Run the named backend command with snake_case params
        and return its structured result, or raise.
        """
        raise NotImplementedError
