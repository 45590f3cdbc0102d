"""Configuração do pytest para o webhook Tally → MailerLite."""

import logging
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas por processo; cada teste relê o ambiente."""
    from config.settings import (
        get_base_settings,
        get_mailerlite_settings,
        get_tally_settings,
    )

    for getter in (get_base_settings, get_mailerlite_settings, get_tally_settings):
        getter.cache_clear()
    yield
    for getter in (get_base_settings, get_mailerlite_settings, get_tally_settings):
        getter.cache_clear()


def _is_service_handler(handler: logging.Handler) -> bool:
    from config.logging import EmailMaskingFilter

    return any(isinstance(f, EmailMaskingFilter) for f in handler.filters)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Isola o root logger por teste.

    app.app chama configure_logging no import (durante a coleta); o handler
    JSON instalado ali mascara o record antes do caplog. Cada teste começa
    sem ele e o estado original volta ao final.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    root.handlers = [h for h in handlers if not _is_service_handler(h)]
    yield
    root.handlers = handlers
    root.setLevel(level)
