"""
Кнопки статус-бара для GlossaryTree.

Содержит:
- ActionButton: Кнопка для однократных действий (Copy, Clear search)
"""

import tkinter as tk
from typing import Callable
from gui.styles import COLORS


class ActionButton(tk.Label):
    """
    Кнопка для однократных действий без сохранения состояния.

    Label вместо tk.Button: единый плоский стиль на всех платформах.
    Поддерживает временную подпись (flash) для подтверждения действия.
    """

    FLASH_MS = 1200

    def __init__(self, parent: tk.Widget, text: str, command: Callable, **kwargs):
        """
        Args:
            parent: Родительский виджет
            text: Текст кнопки
            command: Callback вызываемый при клике (без аргументов)
            **kwargs: Дополнительные параметры для tk.Label
        """
        defaults = {
            "font": ("Segoe UI", 8),
            "bg": COLORS["bg_secondary"],
            "fg": COLORS["text_main"],
            "cursor": "hand2",
            "padx": 8,
            "pady": 3,
            "relief": "flat"
        }
        defaults.update(kwargs)

        super().__init__(parent, text=text, **defaults)

        self.command = command
        self._text = text
        self._flash_id = None

        self.bind("<Button-1>", lambda e: self.command())
        self.bind("<Enter>", self._on_enter)
        self.bind("<Leave>", self._on_leave)

    def flash(self, text: str):
        """Показывает временную подпись и возвращает исходную"""
        if self._flash_id:
            self.after_cancel(self._flash_id)
        self.config(text=text)
        self._flash_id = self.after(self.FLASH_MS, self._restore)

    def _restore(self):
        self._flash_id = None
        self.config(text=self._text)

    def _on_enter(self, event):
        """Hover эффект: яркая кнопка"""
        self.config(bg=COLORS["text_accent"], fg=COLORS["bg"])

    def _on_leave(self, event):
        """Возврат к обычному состоянию"""
        self.config(bg=COLORS["bg_secondary"], fg=COLORS["text_main"])
