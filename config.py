"""
Модуль управления конфигурацией для GlossaryTree.

Обрабатывает:
- Сохранение настроек (INI файл)
- Адрес источника данных (JSON документ глоссария)
- Задержки debounce поиска и hover-prefetch
- Singleton экземпляр ConfigManager

Больше ничего приложение не настраивает: источник данных и задержки.
"""

import configparser
import os
from typing import Final

# ===== КОНСТАНТЫ =====
CONFIG_FILE: Final[str] = "settings.ini"

DEFAULT_SOURCE_URL: Final[str] = (
    "https://gist.githubusercontent.com/kurwactionary/92207b218aaa06edc45ca193bdbac840"
    "/raw/52e15cc9e219e04ff0e0127058bf3a1326a2cc5e/dictionary.json"
)

DEFAULT_CONFIG: Final[dict] = {
    "SOURCE": {
        "Url": DEFAULT_SOURCE_URL,
        "TimeoutSeconds": "10"
    },
    "USER": {
        "SearchDelayMs": "250",      # Debounce поля поиска
        "HoverDelayMs": "60",        # Задержка перед prefetch определения
        "WindowX": "100",
        "WindowY": "100",
        "WindowWidth": "900",
        "WindowHeight": "600"
    }
}


# ===== МЕНЕДЖЕР КОНФИГУРАЦИИ =====

class ConfigManager:
    """
    Управляет конфигурацией приложения с автоматической валидацией и сохранением.
    Потокобезопасность: Этот класс НЕ потокобезопасен. Используйте singleton 'cfg'.
    """

    def __init__(self, path: str = CONFIG_FILE):
        self.path = path
        self.config = configparser.ConfigParser()

        if not os.path.exists(self.path):
            self._create_default()
        else:
            self.config.read(self.path, encoding='utf-8')
            self._validate()

    def _create_default(self):
        """Создает файл конфигурации по умолчанию"""
        for section, options in DEFAULT_CONFIG.items():
            self.config[section] = options
        self._save()

    def _validate(self):
        """
        Валидирует целостность конфигурации и добавляет недостающие ключи.
        Критично для обратной совместимости при добавлении новых настроек.
        """
        changed = False

        for section, options in DEFAULT_CONFIG.items():
            if not self.config.has_section(section):
                self.config.add_section(section)
                changed = True

            for key, val in options.items():
                if not self.config.has_option(section, key):
                    self.config.set(section, key, val)
                    changed = True

        if changed:
            self._save()

    def _save(self):
        """Сохраняет конфигурацию на диск"""
        with open(self.path, 'w', encoding='utf-8') as f:
            self.config.write(f)

    def get(self, section: str, key: str, fallback=None) -> str:
        """Получает значение конфигурации как строку"""
        return self.config.get(section, key, fallback=fallback)

    def get_int(self, section: str, key: str, fallback: int = 0) -> int:
        """
        Получает значение конфигурации как int.
        Испорченное значение (не число) → fallback, а не исключение.
        """
        try:
            return self.config.getint(section, key, fallback=fallback)
        except ValueError:
            return fallback

    def get_bool(self, section: str, key: str, fallback=False) -> bool:
        """Получает значение конфигурации как boolean"""
        return self.config.getboolean(section, key, fallback=fallback)

    def set(self, section: str, key: str, value) -> None:
        """
        Обновляет значение конфигурации и сохраняет на диск.
        Примечание: Каждый set() вызывает файловый I/O.
        """
        if not self.config.has_section(section):
            self.config.add_section(section)

        self.config.set(section, key, str(value))
        self._save()


# ===== SINGLETON ЭКЗЕМПЛЯР =====

# Импортируйте этот singleton вместо создания новых экземпляров ConfigManager
cfg = ConfigManager()
