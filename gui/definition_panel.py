"""
Панель определения для GlossaryTree.

Responsibilities:
- Отрисовка DefinitionContent: заголовок, текст определения
- Полоса тегов (chip на каждый тег), отсутствует при пустых тегах
- Строка "Parent: <link>", отсутствует для "root" и пустого родителя
- Placeholder "Select a word" когда ничего не выбрано
"""

import tkinter as tk
from typing import Callable

from gui.styles import COLORS, FONTS
from gui.scrollbar import ScrollableFrame
from definition import DefinitionContent


class DefinitionPanel(ScrollableFrame):
    """
    Рисует содержимое, которое уже посчитал DefinitionRenderer.
    Сам ничего не вычисляет и не знает про prefetch.
    """

    # Максимум chip-ов в строке до переноса
    TAGS_PER_ROW = 6

    def __init__(self, parent, get_content_width: Callable[[], int],
                 on_parent_click: Callable[[str], None]):
        """
        Args:
            parent: Родительский контейнер
            get_content_width: Функция получения ширины контента (для wraplength)
            on_parent_click: Callback(parent_word) клика по ссылке на родителя
        """
        super().__init__(parent)
        self.get_content_width = get_content_width
        self.on_parent_click = on_parent_click
        self.content = None

    def show(self, content: DefinitionContent):
        self.clear()
        self.content = content

        heading = tk.Label(
            self.body,
            text=content.heading,
            font=FONTS["header"],
            bg=COLORS["bg"],
            fg=COLORS["text_faint"] if content.placeholder else COLORS["text_header"],
            anchor="w",
            justify="left",
            wraplength=self._wraplength()
        )
        heading.pack(fill="x", padx=16, pady=(16, 8))
        self.bind_wheel(heading)

        body = tk.Label(
            self.body,
            text=content.body,
            font=FONTS["definition"],
            bg=COLORS["bg"],
            fg=COLORS["text_faint"] if content.placeholder else COLORS["text_main"],
            anchor="w",
            justify="left",
            wraplength=self._wraplength()
        )
        body.pack(fill="x", padx=16, pady=(0, 10))
        self.bind_wheel(body)

        if content.has_tags:
            self._render_tags(content.tags)

        if content.parent:
            self._render_parent_link(content.parent)

    def _wraplength(self) -> int:
        return max(200, self.get_content_width() - 40)

    def _render_tags(self, tags):
        """Chip-ы тегов в порядке источника, сеткой с переносом"""
        tags_frame = tk.Frame(self.body, bg=COLORS["bg"])
        tags_frame.pack(fill="x", padx=16, pady=(0, 10))
        self.bind_wheel(tags_frame)

        for idx, tag in enumerate(tags):
            chip = tk.Label(
                tags_frame,
                text=tag,
                font=FONTS["tag"],
                bg=COLORS["tag_bg"],
                fg=COLORS["text_accent"],
                padx=8,
                pady=2
            )
            chip.grid(row=idx // self.TAGS_PER_ROW, column=idx % self.TAGS_PER_ROW,
                      sticky="w", padx=(0, 6), pady=2)
            self.bind_wheel(chip)

    def _render_parent_link(self, parent: str):
        row = tk.Frame(self.body, bg=COLORS["bg"])
        row.pack(fill="x", padx=16, pady=(4, 16))

        tk.Label(
            row,
            text="Parent:",
            font=FONTS["definition"],
            bg=COLORS["bg"],
            fg=COLORS["text_faint"]
        ).pack(side="left")

        link = tk.Label(
            row,
            text=parent,
            font=FONTS["link"],
            bg=COLORS["bg"],
            fg=COLORS["text_accent"],
            cursor="hand2"
        )
        link.pack(side="left", padx=(6, 0))
        link.bind("<Button-1>", lambda e, p=parent: self.on_parent_click(p))
        link.bind("<Enter>", lambda e: link.config(fg=COLORS["text_main"]))
        link.bind("<Leave>", lambda e: link.config(fg=COLORS["text_accent"]))
