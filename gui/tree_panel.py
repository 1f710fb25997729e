"""
Панель дерева для GlossaryTree.

Responsibilities:
- Отрисовка TreeView (готового описания узлов) в прокручиваемой области
- Отступы по глубине, стили состояний FOCUS / HIDDEN / MORE, подсветка выбранного слова
- Привязка click / hover к callbacks координатора
- Текстовые сообщения для LOADING, ERROR, NO_DATA, NO_ROOTS, NO_RESULTS
"""

import tkinter as tk
from typing import Callable, Optional

from gui.styles import COLORS, FONTS, INDENT_PX
from gui.scrollbar import ScrollableFrame
from tree_projector import NodeKind, NodeState, TreeNode, TreeStatus, TreeView


class TreePanel(ScrollableFrame):
    """
    Перерисовывается целиком при каждом show(): узлов немного (глубина ≤ 3).
    """

    def __init__(self,
                 parent,
                 on_click: Callable[[str], None],
                 on_enter: Callable[[str], None],
                 on_leave: Callable[[str], None]):
        """
        Args:
            parent: Родительский контейнер
            on_click: Callback(word) клика по узлу
            on_enter: Callback(word) наведения на узел
            on_leave: Callback(word) ухода курсора с узла
        """
        super().__init__(parent)
        self.on_click = on_click
        self.on_enter = on_enter
        self.on_leave = on_leave
        self.view: Optional[TreeView] = None

    def show(self, view: TreeView):
        """Рендерит дерево или сообщение о состоянии"""
        self.clear()
        self.view = view

        if not view.populated:
            self._render_message(view)
            return

        for node in view.walk():
            self._render_node(node)

    def _render_message(self, view: TreeView):
        fg = COLORS["error"] if view.status is TreeStatus.ERROR else COLORS["text_faint"]
        lbl = tk.Label(
            self.body,
            text=view.message or "",
            font=FONTS["message"],
            bg=COLORS["bg"],
            fg=fg,
            wraplength=260,
            justify="left"
        )
        lbl.pack(anchor="w", padx=12, pady=20)
        self.bind_wheel(lbl)

    def _render_node(self, node: TreeNode):
        if node.kind is NodeKind.MORE:
            font = FONTS["node_more"]
        elif node.depth == 0:
            font = FONTS["node_root"]
        else:
            font = FONTS["node"]

        bg, fg = self._node_colors(node)
        lbl = tk.Label(
            self.body,
            text=node.label,
            font=font,
            bg=bg,
            fg=fg,
            anchor="w",
            padx=6,
            cursor="hand2" if node.interactive else "arrow"
        )
        lbl.pack(fill="x", padx=(8 + node.depth * INDENT_PX, 8), pady=1)
        self.bind_wheel(lbl)

        if not node.interactive:
            return

        word = node.label
        lbl.bind("<Button-1>", lambda e, w=word: self.on_click(w))
        lbl.bind("<Enter>", lambda e, w=word, n=node, l=lbl: self._on_node_enter(w, n, l))
        lbl.bind("<Leave>", lambda e, w=word, n=node, l=lbl: self._on_node_leave(w, n, l))

    @staticmethod
    def _node_colors(node: TreeNode):
        """(bg, fg) для узла с учётом выбранности и состояния поиска"""
        if node.active:
            return COLORS["node_active_bg"], COLORS["node_active_fg"]
        if node.kind is NodeKind.MORE or node.state is NodeState.HIDDEN:
            return COLORS["bg"], COLORS["text_faint"]
        if node.state is NodeState.FOCUS:
            return COLORS["bg"], COLORS["text_accent"]
        return COLORS["bg"], COLORS["text_main"]

    def _on_node_enter(self, word: str, node: TreeNode, label: tk.Label):
        if not node.active:
            label.config(bg=COLORS["node_hover"])
        self.on_enter(word)

    def _on_node_leave(self, word: str, node: TreeNode, label: tk.Label):
        label.config(bg=self._node_colors(node)[0])
        self.on_leave(word)
