"""
Контроллер выбранного слова.

Единственный источник истины "какое слово сейчас выбрано".
Неизвестное слово (LookupMiss) молча игнорируется: выбор и панель не меняются.
"""

from typing import Callable, Optional

from word_store import ROOT, WordEntry, WordStore


class SelectionController:
    """
    Responsibilities:
    - Хранит current (WordEntry или None)
    - Проверяет цель выбора через WordStore
    - Навигация к родителю
    - Callback on_change после каждого успешного выбора (перерисовка дерева и панели)
    """

    def __init__(self, store: WordStore, on_change: Optional[Callable[[], None]] = None):
        self.store = store
        self.on_change = on_change
        self.current: Optional[WordEntry] = None

    def select(self, word: Optional[str]) -> bool:
        """
        Выбирает слово по ключу (без учёта регистра).

        Returns:
            True если выбор состоялся, False если слова нет (состояние не меняется)
        """
        entry = self.store.find(word)
        if entry is None:
            return False

        self.current = entry
        self._notify()
        return True

    def select_parent(self) -> bool:
        """Переход к родителю текущего слова. No-op для None и для "root" """
        if self.current is None:
            return False

        parent = self.current.parent
        if not parent or parent == ROOT:
            return False

        return self.select(parent)

    def clear(self):
        """Сбрасывает выбор"""
        if self.current is None:
            return
        self.current = None
        self._notify()

    def _notify(self):
        if self.on_change:
            self.on_change()
