"""
Координатор ввода для GlossaryTree.

Обрабатывает:
- Загрузку документа в worker-потоке с возвратом результата в UI поток (after(0, ...))
- Поле поиска с debounce (SEARCH_DELAY_MS)
- Hover по узлу дерева → prefetch определения; уход курсора → сброс prefetch
- Клики по узлам и по ссылке "Parent"
- Копирование определения в буфер обмена

Architecture:
- Единственная точка запуска перерисовки (show_tree / show_definition у view)
- Таймеры: один слот на намерение (поиск, prefetch), новый запрос отменяет старый
- Scheduler = всё, что умеет after(ms, func, *args) / after_cancel(id); в приложении это tk.Tk
"""

import threading
from dataclasses import dataclass
from typing import Optional

import pyperclip

from network import FetchError
from word_store import WordStore
from tree_projector import TreeProjector, TreeStatus, TreeView
from selection import SelectionController
from definition import DefinitionContent, DefinitionRenderer, PrefetchCache


class PendingTask:
    """
    Отменяемая отложенная задача: один слот, последний запрос побеждает.

    Никакой очереди: schedule() отменяет ещё не сработавший таймер.
    """

    def __init__(self, scheduler):
        self._scheduler = scheduler
        self._timer_id = None

    @property
    def pending(self) -> bool:
        return self._timer_id is not None

    def schedule(self, delay_ms: int, func, *args):
        self.cancel()
        self._timer_id = self._scheduler.after(delay_ms, self._fire, func, args)

    def cancel(self):
        if self._timer_id is not None:
            self._scheduler.after_cancel(self._timer_id)
            self._timer_id = None

    def _fire(self, func, args):
        self._timer_id = None
        func(*args)


@dataclass
class ViewState:
    """Явное состояние UI, которым владеет координатор"""
    status: TreeStatus = TreeStatus.LOADING
    search_term: str = ""
    error: Optional[FetchError] = None

    @property
    def ready(self) -> bool:
        return self.status not in (TreeStatus.LOADING, TreeStatus.ERROR)


class InputCoordinator:
    """
    Связывает ввод пользователя с моделью и единственной точкой перерисовки.

    Responsibilities:
    - Жизненный цикл загрузки (loading → ready | error)
    - Debounced поиск
    - Hover prefetch и его отмена
    - Выбор слова (клик по узлу, по ссылке на родителя)

    Выбор слова СОХРАНЯЕТСЯ при очистке поиска: дерево возвращается в default режим
    с подсветкой того же слова, панель определения не меняется.
    """

    # ===== КОНСТАНТЫ =====
    SEARCH_DELAY_MS = 250
    HOVER_DELAY_MS = 60

    def __init__(self, scheduler, store: WordStore, view,
                 search_delay_ms: int = SEARCH_DELAY_MS,
                 hover_delay_ms: int = HOVER_DELAY_MS,
                 prefetch: bool = True):
        """
        Args:
            scheduler: Объект с after()/after_cancel() (tk.Tk в приложении)
            store: Хранилище записей
            view: Объект с show_tree(TreeView) и show_definition(DefinitionContent)
            search_delay_ms: Debounce поиска
            hover_delay_ms: Задержка перед prefetch
            prefetch: False отключает стратегию prefetch целиком
        """
        self.scheduler = scheduler
        self.store = store
        self.view = view
        self.search_delay_ms = search_delay_ms
        self.hover_delay_ms = hover_delay_ms

        self.state = ViewState()
        self.projector = TreeProjector(store)
        self.renderer = DefinitionRenderer(PrefetchCache() if prefetch else None)
        self.selection = SelectionController(store, on_change=self.render)

        self._search_task = PendingTask(scheduler)
        self._prefetch_task = PendingTask(scheduler)
        self._hovered: Optional[str] = None

    # ═══════════════════════════════════════════════════════════════════════
    # ЗАГРУЗКА
    # ═══════════════════════════════════════════════════════════════════════

    def start_loading(self, url: str, timeout: float = 10):
        """Показывает LOADING и запускает загрузку в отдельном потоке"""
        self.state.status = TreeStatus.LOADING
        self.state.error = None
        self.render()

        threading.Thread(
            target=self._worker_load,
            args=(url, timeout),
            daemon=True,
            name="GlossaryLoader"
        ).start()

    def _worker_load(self, url: str, timeout: float):
        """Worker: сетевой запрос и построение индексов вне UI потока"""
        try:
            self.store.load(url, timeout=timeout)
        except FetchError as exc:
            print(f"DEBUG: Failed to load dictionary: {exc}")
            self.scheduler.after(0, self.load_failed, exc)
            return
        except Exception as exc:
            # Поток не должен умереть молча: иначе UI навсегда останется в LOADING
            print(f"DEBUG: Unexpected error while loading dictionary: {exc}")
            error = FetchError(f"Unexpected error: {exc}", url=url, cause=exc)
            self.scheduler.after(0, self.load_failed, error)
            return

        self.scheduler.after(0, self.load_finished)

    def load_finished(self):
        """Вызывается в UI потоке после успешной загрузки"""
        self.state.status = TreeStatus.TREE
        self.state.error = None
        self.render()

    def load_failed(self, error: FetchError):
        """Вызывается в UI потоке при ошибке загрузки. Повторов нет"""
        self.state.status = TreeStatus.ERROR
        self.state.error = error
        self.render()

    # ═══════════════════════════════════════════════════════════════════════
    # РЕНДЕРИНГ
    # ═══════════════════════════════════════════════════════════════════════

    def current_tree(self) -> TreeView:
        if not self.state.ready:
            return TreeView(self.state.status)
        return self.projector.project(self.state.search_term, self.selection.current)

    def render_tree(self):
        tree = self.current_tree()
        if self.state.ready:
            self.state.status = tree.status
        self.view.show_tree(tree)

    def render_definition(self):
        content: DefinitionContent = self.renderer.render(self.selection.current)
        self.view.show_definition(content)

    def render(self):
        """Полная перерисовка: дерево + панель определения"""
        self.render_tree()
        self.render_definition()

    # ═══════════════════════════════════════════════════════════════════════
    # ПОИСК
    # ═══════════════════════════════════════════════════════════════════════

    def on_search_input(self, text: str):
        """Каждое нажатие откладывает фильтрацию; сработает только последнее"""
        self._search_task.schedule(self.search_delay_ms, self.apply_search, text)

    def apply_search(self, text: str):
        """Применяет запрос немедленно (без debounce)"""
        self.state.search_term = (text or "").strip().lower()
        if self.state.ready:
            self.render_tree()

    def clear_search(self):
        """Сброс поиска: отменяет ожидающую фильтрацию и возвращает default дерево"""
        self._search_task.cancel()
        self.apply_search("")

    # ═══════════════════════════════════════════════════════════════════════
    # ДЕРЕВО: HOVER / CLICK
    # ═══════════════════════════════════════════════════════════════════════

    def on_node_enter(self, word: str):
        """Курсор над узлом: планируем prefetch определения"""
        self._hovered = word
        self._prefetch_task.schedule(self.hover_delay_ms, self._prefetch, word)

    def on_node_leave(self, word: Optional[str] = None):
        """Курсор ушёл до клика: отменяем таймер и выбрасываем посчитанное"""
        self._hovered = None
        self._prefetch_task.cancel()
        self.renderer.discard_prefetch()

    def _prefetch(self, word: str):
        if word != self._hovered:
            return
        self.renderer.prefetch_for(self.store.find(word))

    def on_node_click(self, word: str) -> bool:
        self._prefetch_task.cancel()
        return self.selection.select(word)

    def on_parent_click(self, parent: str) -> bool:
        return self.selection.select(parent)

    # ═══════════════════════════════════════════════════════════════════════
    # ПРОЧЕЕ
    # ═══════════════════════════════════════════════════════════════════════

    def copy_selection(self) -> bool:
        """Копирует определение выбранного слова в буфер обмена"""
        entry = self.selection.current
        if entry is None:
            return False

        try:
            pyperclip.copy(DefinitionRenderer().render(entry).as_text())
        except pyperclip.PyperclipException as exc:
            print(f"DEBUG: Clipboard unavailable: {exc}")
            return False
        return True

    def close(self):
        """Отменяет все ожидающие таймеры (при закрытии окна)"""
        self._search_task.cancel()
        self._prefetch_task.cancel()
        self.renderer.discard_prefetch()
