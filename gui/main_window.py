"""
Главное окно приложения GlossaryTree.

Отображает:
- Поле поиска (debounce через координатор, Escape очищает)
- Слева: дерево или результаты поиска
- Справа: панель определения с тегами и ссылкой на родителя
- Статус бар: количество слов / совпадений и кнопка Copy

Architecture:
- Окно реализует "view" координатора: show_tree() / show_definition()
- Вся логика выбора, поиска и prefetch живёт в InputCoordinator
- Окно служит scheduler-ом координатора (after / after_cancel)
"""

import tkinter as tk

from config import cfg
from gui.styles import COLORS, FONTS
from gui.buttons import ActionButton
from gui.tree_panel import TreePanel
from gui.definition_panel import DefinitionPanel
from definition import DefinitionContent
from input_coordinator import InputCoordinator
from tree_projector import TreeStatus, TreeView
from word_store import WordStore


class MainWindow(tk.Tk):
    """
    Главное окно приложения.

    Responsibilities:
    - Window management (геометрия из config, сохранение при закрытии)
    - Layout: поиск, дерево, разделитель, определение, статус бар
    - Проброс событий виджетов в InputCoordinator
    """

    # ===== LAYOUT КОНСТАНТЫ =====
    TREE_WIDTH = 300
    MIN_WINDOW_WIDTH = 600
    MIN_WINDOW_HEIGHT = 400

    def __init__(self, store: WordStore):
        super().__init__()

        self.title("Glossary")
        x = cfg.get("USER", "WindowX", "100")
        y = cfg.get("USER", "WindowY", "100")
        w = cfg.get("USER", "WindowWidth", "900")
        h = cfg.get("USER", "WindowHeight", "600")
        self.geometry(f"{w}x{h}+{x}+{y}")
        self.configure(bg=COLORS["bg"])
        self.minsize(self.MIN_WINDOW_WIDTH, self.MIN_WINDOW_HEIGHT)

        # ===== КООРДИНАТОР =====
        self.coordinator = InputCoordinator(
            self,
            store,
            self,
            search_delay_ms=cfg.get_int("USER", "SearchDelayMs", InputCoordinator.SEARCH_DELAY_MS),
            hover_delay_ms=cfg.get_int("USER", "HoverDelayMs", InputCoordinator.HOVER_DELAY_MS)
        )

        self._init_ui()
        self.protocol("WM_DELETE_WINDOW", self.close_app)

    @property
    def content_width(self) -> int:
        """Ширина панели определения"""
        return self.definition_panel.winfo_width()

    def _init_ui(self):
        """
        КРИТИЧНО: status bar создаётся ДО основной области,
        иначе pack отдаст всё место дереву и определению.
        """
        self._create_search_bar()
        self._create_status_bar()
        self._create_content()

    def _create_search_bar(self):
        search_frame = tk.Frame(self, bg=COLORS["bg"])
        search_frame.pack(side="top", fill="x", padx=10, pady=(10, 6))

        self.search_var = tk.StringVar()
        self.search_entry = tk.Entry(
            search_frame,
            textvariable=self.search_var,
            font=FONTS["search"],
            bg=COLORS["bg_secondary"],
            fg=COLORS["text_main"],
            insertbackground=COLORS["text_accent"],
            relief="flat",
            highlightthickness=1,
            highlightbackground=COLORS["bg_secondary"],
            highlightcolor=COLORS["text_accent"]
        )
        self.search_entry.pack(fill="x", ipady=4)
        self.search_var.trace_add("write", lambda *args: self.coordinator.on_search_input(self.search_var.get()))
        self.search_entry.bind("<Escape>", self._on_escape)

    def _create_status_bar(self):
        status_bar = tk.Frame(self, bg=COLORS["bg"])
        status_bar.pack(side="bottom", fill="x", pady=2)

        self.lbl_status = tk.Label(
            status_bar,
            text="Loading...",
            font=FONTS["ui"],
            bg=COLORS["bg"],
            fg=COLORS["text_faint"]
        )
        self.lbl_status.pack(side="right", padx=10)

        self.btn_copy = ActionButton(status_bar, "Copy", self.copy_definition)
        self.btn_copy.pack(side="left", padx=(10, 5))

    def _create_content(self):
        content = tk.Frame(self, bg=COLORS["bg"])
        content.pack(side="top", fill="both", expand=True)

        self.tree_panel = TreePanel(
            content,
            on_click=self.coordinator.on_node_click,
            on_enter=self.coordinator.on_node_enter,
            on_leave=self.coordinator.on_node_leave
        )
        self.tree_panel.configure(width=self.TREE_WIDTH)
        self.tree_panel.pack(side="left", fill="y")
        self.tree_panel.pack_propagate(False)

        tk.Frame(content, width=1, bg=COLORS["separator"]).pack(side="left", fill="y", pady=4)

        self.definition_panel = DefinitionPanel(
            content,
            lambda: self.content_width,
            self.coordinator.on_parent_click
        )
        self.definition_panel.pack(side="left", fill="both", expand=True)

    # ===== VIEW ДЛЯ КООРДИНАТОРА =====

    def show_tree(self, view: TreeView):
        self.tree_panel.show(view)
        self.refresh_status(view)

    def show_definition(self, content: DefinitionContent):
        self.definition_panel.show(content)

    # ===== STATUS =====

    def refresh_status(self, view: TreeView):
        """Обновляет строку статуса"""
        store = self.coordinator.store
        if view.status is TreeStatus.LOADING:
            text = "Loading..."
        elif view.status is TreeStatus.ERROR:
            text = "Offline"
        elif view.status in (TreeStatus.SEARCH, TreeStatus.NO_RESULTS):
            text = f"{view.match_count} matches • {len(store)} words"
        else:
            text = f"{len(store)} words"
        self.lbl_status.config(text=text)

    # ===== ACTIONS =====

    def copy_definition(self):
        if self.coordinator.copy_selection():
            self.btn_copy.flash("Copied")
        else:
            self.btn_copy.flash("Nothing to copy")

    def _on_escape(self, event):
        self.search_var.set("")
        self.coordinator.clear_search()
        return "break"

    def close_app(self):
        """Закрытие приложения с сохранением геометрии"""
        self.coordinator.close()
        cfg.set("USER", "WindowX", self.winfo_x())
        cfg.set("USER", "WindowY", self.winfo_y())
        cfg.set("USER", "WindowWidth", self.winfo_width())
        cfg.set("USER", "WindowHeight", self.winfo_height())
        self.destroy()
