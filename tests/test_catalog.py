import json

import pytest

from chatbridge.adapters.backend.catalog import (CatalogCommands, get_available_models,
                                                  load_catalog)
from chatbridge.adapters.backend.local import LocalBackend
from chatbridge.domain.errors import CatalogError
from chatbridge.domain.models import AnthropicModelParams, ModelInfo, OpenAIModelParams

CATALOG = {
    'models': [
        {
            'id': 'gpt-4o-mini',
            'display_name': 'GPT-4o mini',
            'provider': 'openai',
            'tags': ['fast'],
            'params': {'max_tokens': 512, 'temperature': 0.7, 'top_p': 0.95},
        },
        {
            'id': 'claude-3-5-sonnet-latest',
            'display_name': 'Claude 3.5 Sonnet',
            'provider': 'anthropic',
            'params': {'max_tokens': 2048, 'temperature': 0.3, 'top_p': 1.0},
        },
    ]
}


@pytest.fixture()
def catalog_path(tmp_path):
    path = tmp_path / 'llm-info.json'
    path.write_text(json.dumps(CATALOG), encoding='utf-8')
    return path


def test_load_bundled_catalog():
    catalog = load_catalog()
    assert catalog.models
    assert all(m.provider in {'anthropic', 'openai'} for m in catalog.models)


def test_load_catalog_from_file(catalog_path):
    catalog = load_catalog(catalog_path)

    assert [m.id for m in catalog.models] == ['gpt-4o-mini', 'claude-3-5-sonnet-latest']
    assert catalog.models[1].tags == []


def test_missing_catalog_raises(tmp_path):
    with pytest.raises(CatalogError) as e:
        load_catalog(tmp_path / 'nope.json')
    assert e.value.code == 'catalog_error'


def test_invalid_catalog_raises(tmp_path):
    path = tmp_path / 'broken.json'
    path.write_text('{"models": [{"id": 1', encoding='utf-8')

    with pytest.raises(CatalogError) as e:
        load_catalog(path)
    assert 'failed to parse json file' in str(e.value).lower()


def test_catalog_missing_fields_raises(tmp_path):
    path = tmp_path / 'partial.json'
    path.write_text(json.dumps({'models': [{'id': 'x'}]}), encoding='utf-8')

    with pytest.raises(CatalogError):
        load_catalog(path)


@pytest.mark.asyncio
async def test_get_available_models_through_backend(catalog_path):
    backend = LocalBackend({
        'get_available_models': CatalogCommands(catalog_path).get_available_models,
    })

    models = await get_available_models(backend)

    assert all(isinstance(m, ModelInfo) for m in models)
    assert models[0].params.max_tokens == 512


def test_model_info_to_params_by_provider(catalog_path):
    gpt, claude = load_catalog(catalog_path).models

    openai_params = gpt.to_params(instructions='Be kind.')
    assert isinstance(openai_params, OpenAIModelParams)
    assert openai_params.model == 'gpt-4o-mini'
    assert openai_params.max_output_tokens == 512
    assert openai_params.top_p == 0.95
    assert openai_params.instructions == 'Be kind.'

    anthropic_params = claude.to_params(temperature=0.0)
    assert isinstance(anthropic_params, AnthropicModelParams)
    assert anthropic_params.temperature == 0.0
    assert anthropic_params.max_output_tokens == 2048


def test_model_info_unknown_provider():
    info = ModelInfo(
        id='gemini-pro',
        display_name='Gemini',
        provider='google',
        params={'max_tokens': 1, 'temperature': 0, 'top_p': 1},
    )
    with pytest.raises(CatalogError) as e:
        info.to_params()
    assert "unsupported provider 'google'" in str(e.value)
