"""Configuração do pytest para o projeto events-card."""

import logging
import sys
from pathlib import Path

import pytest

# Adiciona src/ (imports absolutos) e a raiz (tests.fakes) ao PYTHONPATH
project_root = Path(__file__).parent.parent
for path in (project_root / "src", project_root):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture(autouse=True)
def _isolate_settings_and_logging():
    """Limpa caches de settings e restaura handlers do logger raiz."""
    from config.settings import get_card_theme, get_feed_settings

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    get_feed_settings.cache_clear()
    get_card_theme.cache_clear()
    yield
    get_feed_settings.cache_clear()
    get_card_theme.cache_clear()
    root.handlers, root.level = handlers, level
