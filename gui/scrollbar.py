"""
Кастомный scrollbar для Tkinter через Canvas.

Используется деревом и панелью определения:
- Узкий минималистичный дизайн (8px желоб, 4px бегунок)
- Hover эффекты
- Автоматическое скрытие когда весь контент виден
- Drag бегунка и клик по желобу
"""

import tkinter as tk
from gui.styles import COLORS


class CustomScrollbar:
    """
    Кастомный scrollbar реализованный через Canvas.

    Подключение: canvas.configure(yscrollcommand=scrollbar.update)
    """

    # ===== КОНСТАНТЫ ДИЗАЙНА =====
    CANVAS_WIDTH = 8  # Ширина желоба scrollbar
    THUMB_WIDTH = 4  # Ширина бегунка
    THUMB_PADDING = 2  # Отступы бегунка от краёв
    MIN_THUMB_HEIGHT = 20  # Минимальная высота бегунка в пикселях

    def __init__(self, parent, canvas_scroll):
        """
        Args:
            parent: Родительский контейнер для размещения scrollbar
            canvas_scroll: Canvas который нужно скроллить
        """
        self.canvas_scroll = canvas_scroll

        self.scrollbar_canvas = tk.Canvas(
            parent,
            width=self.CANVAS_WIDTH,
            bg=COLORS["bg_secondary"],
            highlightthickness=0,
            bd=0
        )

        self.thumb = None  # ID прямоугольника бегунка
        self._dragging = False
        self._drag_start_y = 0

        self.scrollbar_canvas.bind("<Button-1>", self._on_click)
        self.scrollbar_canvas.bind("<B1-Motion>", self._on_drag)
        self.scrollbar_canvas.bind("<ButtonRelease-1>", self._on_release)
        self.scrollbar_canvas.bind("<Enter>", lambda e: self._paint_thumb(COLORS["text_main"]))
        self.scrollbar_canvas.bind("<Leave>", lambda e: self._paint_thumb(COLORS["text_faint"]))

    def update(self, first, last):
        """
        Обновляет позицию и размер бегунка. Вызывается через yscrollcommand.

        Args:
            first: Начальная позиция видимой области (0.0 - 1.0)
            last: Конечная позиция видимой области (0.0 - 1.0)
        """
        first = float(first)
        last = float(last)

        if self.thumb:
            self.scrollbar_canvas.delete(self.thumb)
            self.thumb = None

        # Весь контент виден → scrollbar не нужен
        if first <= 0.0 and last >= 1.0:
            self.scrollbar_canvas.pack_forget()
            return

        if not self.scrollbar_canvas.winfo_ismapped():
            self.scrollbar_canvas.pack(side="right", fill="y")

        canvas_height = self.scrollbar_canvas.winfo_height()
        thumb_height = max(self.MIN_THUMB_HEIGHT, int(canvas_height * (last - first)))
        thumb_y = int(canvas_height * first)

        self.thumb = self.scrollbar_canvas.create_rectangle(
            self.THUMB_PADDING,
            thumb_y,
            self.THUMB_PADDING + self.THUMB_WIDTH,
            thumb_y + thumb_height,
            fill=COLORS["text_faint"],
            outline="",
            tags="thumb"
        )

    def _paint_thumb(self, color: str):
        if self.thumb:
            self.scrollbar_canvas.itemconfig(self.thumb, fill=color)

    def _on_click(self, event):
        """Клик по бегунку начинает drag, клик по желобу прыгает к позиции"""
        item = self.scrollbar_canvas.find_closest(event.x, event.y)
        if item and "thumb" in self.scrollbar_canvas.gettags(item[0]):
            self._dragging = True
            self._drag_start_y = event.y
        else:
            canvas_height = self.scrollbar_canvas.winfo_height() or 1
            self.canvas_scroll.yview_moveto(event.y / canvas_height)
        return "break"

    def _on_drag(self, event):
        if not self._dragging:
            return "break"

        canvas_height = self.scrollbar_canvas.winfo_height() or 1
        delta = (event.y - self._drag_start_y) / canvas_height
        self.canvas_scroll.yview_moveto(self.canvas_scroll.yview()[0] + delta)
        self._drag_start_y = event.y
        return "break"

    def _on_release(self, event):
        self._dragging = False
        return "break"


class ScrollableFrame(tk.Frame):
    """
    Frame с вертикальной прокруткой: Canvas + CustomScrollbar + внутренний body.

    Содержимое кладётся в self.body.
    """

    def __init__(self, parent, **kwargs):
        super().__init__(parent, bg=COLORS["bg"], **kwargs)

        self.canvas = tk.Canvas(self, bg=COLORS["bg"], highlightthickness=0, bd=0)
        self.scrollbar = CustomScrollbar(self, self.canvas)
        self.body = tk.Frame(self.canvas, bg=COLORS["bg"])

        self._window_id = self.canvas.create_window((0, 0), window=self.body, anchor="nw")
        self.body.bind("<Configure>", lambda e: self.canvas.configure(scrollregion=self.canvas.bbox("all")))
        self.canvas.bind("<Configure>", lambda e: self.canvas.itemconfig(self._window_id, width=e.width))
        self.canvas.configure(yscrollcommand=self.scrollbar.update)
        self.canvas.pack(side="left", fill="both", expand=True)

        self.canvas.bind("<MouseWheel>", self._on_mousewheel)
        self.body.bind("<MouseWheel>", self._on_mousewheel)

    def clear(self):
        """Удаляет всё содержимое и прокручивает в начало"""
        for widget in self.body.winfo_children():
            widget.destroy()
        self.canvas.yview_moveto(0)

    def bind_wheel(self, widget: tk.Widget):
        """Дочерние виджеты тоже прокручивают canvas"""
        widget.bind("<MouseWheel>", self._on_mousewheel)

    def _on_mousewheel(self, event):
        view = self.canvas.yview()
        if view[0] <= 0.0 and view[1] >= 1.0:
            return "break"
        self.canvas.yview_scroll(int(-1 * (event.delta / 120)), "units")
        return "break"
