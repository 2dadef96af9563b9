# bentogrid/config.py

from __future__ import annotations
import logging
import logging.handlers
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
# =========================
# Константы раскладки (вне Pydantic-модели!)
# =========================
FALLBACK_ROW_WINDOW = 3            # сколько строк просматривает запасной поиск за одну попытку
FALLBACK_ATTEMPTS_PER_COLUMN = 3   # попыток запасного поиска = columns * это число

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s: %(message)s"

# =========================
# Переменные окружения / настройки приложения
# =========================
class Settings(BaseSettings):
    # ---- Сетка ----
    GRID_COLUMNS: int = 6                  # колонок по умолчанию
    SHUFFLE: bool = True                   # перемешивать картинки перед раскладкой
    MAX_IMAGES: int = 500                  # лимит картинок в одном запросе
    MAX_COLUMNS: int = 48                  # лимит колонок: каждая строка сетки = columns ячеек

    # ---- Логи ----
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = None        # если задан: пишем ещё и в файл (с ротацией)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Глобальный инстанс настроек
settings = Settings()

# логгер
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO), format=LOG_FORMAT)
log = logging.getLogger("bentogrid")

if settings.LOG_FILE is not None:
    settings.LOG_FILE = Path(str(settings.LOG_FILE)).expanduser()
    settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    _fh = logging.handlers.RotatingFileHandler(
        filename=str(settings.LOG_FILE),
        maxBytes=5_000_000, backupCount=3, encoding="utf-8"
    )
    _fh.setFormatter(logging.Formatter(LOG_FORMAT))
    log.addHandler(_fh)

log.info(f"[Settings] GRID_COLUMNS={settings.GRID_COLUMNS} SHUFFLE={settings.SHUFFLE}")
