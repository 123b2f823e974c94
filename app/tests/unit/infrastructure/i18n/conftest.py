"""Feature-level fixtures for i18n system tests.

Provides fakes and runtimes for language resolution, rendering and
synchronization scenarios.
"""

import pytest
import yaml

from infrastructure.i18n import I18nRuntime, MessageStore
from tests.factories.i18n import (
    FakeSelect,
    make_document,
    make_environment,
    make_messages,
)


@pytest.fixture
def messages():
    """Sample en/es/pt message payload."""
    return make_messages()


@pytest.fixture
def store(messages):
    """MessageStore preloaded with sample messages."""
    return MessageStore(messages)


@pytest.fixture
def environment():
    """Environment with no query, storage or browser signals."""
    return make_environment()


@pytest.fixture
def select():
    """Primary language select, discoverable by the default selector."""
    return FakeSelect({"class": "lang-select"})


@pytest.fixture
def document(select):
    """Document with translation markers and the primary select."""
    return make_document(select)


@pytest.fixture
def runtime(environment, document, messages):
    """Initialized runtime starting in English."""
    rt = I18nRuntime(environment=environment, document=document)
    rt.init({"messages": messages, "initialLang": "en"})
    return rt


@pytest.fixture
def temp_messages_dir(tmp_path):
    """Create temporary directory with sample YAML message files.

    Returns a directory structure like:
    - home.en.yml
    - home.es.yml
    - nav.en.yml
    - pt.yml
    """
    files = {
        "home.en.yml": {"doc_title": "Home", "hero": {"title": "Welcome"}},
        "home.es.yml": {"doc_title": "Inicio", "hero": {"title": "Bienvenido"}},
        "nav.en.yml": {"lang_label": "Language", "doc_title": "Home page"},
        "pt.yml": {"doc_title": "Início"},
    }
    for name, data in files.items():
        with open(tmp_path / name, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)
    return tmp_path
