"""
Configuração do pacote: variáveis de ambiente (opcionalmente de um .env) e logging.
O núcleo da busca não lê configuração; só os adaptadores NetworkX e os scripts.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_LOG_LEVEL = "BUSCA_ASTAR_LOG_LEVEL"
ENV_WEIGHT_ATTRIBUTE = "BUSCA_ASTAR_WEIGHT_ATTRIBUTE"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_WEIGHT_ATTRIBUTE = "distance"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_env_file() -> Optional[Path]:
    """
    Carrega o .env da raiz do projeto (sobe do diretório do pacote até encontrar .env).
    Retorna o caminho carregado ou None. Variáveis já definidas no ambiente não são sobrescritas.
    """
    package_dir = Path(__file__).resolve().parent
    root = package_dir.parent
    for candidate in (root, root.parent):
        env_file = candidate / ".env"
        if env_file.is_file():
            load_dotenv(env_file)
            return env_file
    return None


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    weight_attribute: str = DEFAULT_WEIGHT_ATTRIBUTE


def load_weight_attribute() -> str:
    """Atributo de aresta com o custo base (BUSCA_ASTAR_WEIGHT_ATTRIBUTE); padrão 'distance'."""
    return os.environ.get(ENV_WEIGHT_ATTRIBUTE, "").strip() or DEFAULT_WEIGHT_ATTRIBUTE


def load_settings() -> Settings:
    """Lê BUSCA_ASTAR_LOG_LEVEL e BUSCA_ASTAR_WEIGHT_ATTRIBUTE. Levanta ValueError para nível inválido."""
    level = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(
            f"Nível de log inválido em {ENV_LOG_LEVEL}: {level!r}. "
            "Use DEBUG, INFO, WARNING, ERROR ou CRITICAL."
        )
    return Settings(log_level=level, weight_attribute=load_weight_attribute())


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configura o logging raiz para scripts. Bibliotecas só usam logging.getLogger(__name__)."""
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level, format=_LOG_FORMAT)
