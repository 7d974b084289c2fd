import json
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from chatbridge.adapters.llm.constants import Command
from chatbridge.domain.errors import CatalogError
from chatbridge.domain.models import ModelCatalog, ModelInfo
from chatbridge.domain.ports.invoker import InvokerPort

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[2] / 'resources' / 'llm-info.json'


def load_catalog(path: Union[str, Path] = DEFAULT_CATALOG_PATH) -> ModelCatalog:
    path = Path(path)
    try:
        raw = path.read_text(encoding='utf-8')
    except OSError as e:
        raise CatalogError(f'Failed to read model catalog {path}: {e}') from e

    try:
        return ModelCatalog.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as e:
        raise CatalogError(f'Failed to parse JSON file {path}: {e}') from e


class CatalogCommands:
    def __init__(self, path: Union[str, Path] = DEFAULT_CATALOG_PATH):
        self.path = Path(path)

    async def get_available_models(self) -> List[Dict[str, Any]]:
        catalog = load_catalog(self.path)
        return [m.model_dump(mode='json') for m in catalog.models]


async def get_available_models(invoker: InvokerPort) -> List[ModelInfo]:
    raw = await invoker.invoke(Command.AVAILABLE_MODELS.value, {})
    return [ModelInfo.model_validate(m) for m in raw]
