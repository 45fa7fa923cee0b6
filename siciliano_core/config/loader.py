"""
Загрузчик конфигурации провайдера.

Читает переопределения SiteConfig из JSON-файла. Отсутствующий файл
означает конфигурацию по умолчанию.
"""

import json
from typing import Optional
from pathlib import Path
import logging

from .base import SiteConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Загрузчик и валидатор конфигурации сайта."""

    def __init__(self, config_dir: str = "config"):
        """
        Инициализация загрузчика конфигурации.

        Args:
            config_dir: Директория с конфигурационными файлами
        """
        self.config_dir = Path(config_dir)
        self._site_config: Optional[SiteConfig] = None

    def load_site_config(self, config_path: Optional[str] = None) -> SiteConfig:
        """
        Загрузить конфигурацию сайта.

        Args:
            config_path: Путь к JSON-файлу конфигурации.
                        Если None, используется config/siciliano.json

        Returns:
            SiteConfig: Загруженная конфигурация
        """
        if config_path is None:
            config_path = self.config_dir / "siciliano.json"
        else:
            config_path = Path(config_path)

        if not config_path.exists():
            logger.warning(f"Файл конфигурации не найден: {config_path}")
            logger.info("Используется конфигурация по умолчанию")
            self._site_config = SiteConfig()
            return self._site_config

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = json.load(f)

            self._site_config = SiteConfig(**config_data)
            logger.info(f"Конфигурация сайта загружена из {config_path}")
            return self._site_config

        except json.JSONDecodeError as e:
            logger.error(f"Ошибка парсинга JSON в {config_path}: {e}")
            raise
        except Exception as e:
            logger.error(f"Ошибка загрузки конфигурации из {config_path}: {e}")
            raise

    def get_site_config(self) -> SiteConfig:
        """Конфигурация сайта (загружается при первом обращении)."""
        if self._site_config is None:
            return self.load_site_config()
        return self._site_config

    def save_site_config(
        self, site_config: SiteConfig, config_path: Optional[str] = None
    ) -> Path:
        """
        Сохранить конфигурацию сайта в JSON.

        Args:
            site_config: Конфигурация для сохранения
            config_path: Путь к файлу (по умолчанию config/siciliano.json)

        Returns:
            Path: Путь к сохранённому файлу
        """
        if config_path is None:
            config_path = self.config_dir / "siciliano.json"
        else:
            config_path = Path(config_path)

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(site_config.model_dump(mode="json"), f, ensure_ascii=False, indent=2)

        logger.info(f"Конфигурация сайта сохранена в {config_path}")
        return config_path
