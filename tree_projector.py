"""
Проекция глоссария в дерево для отображения.

Два режима:
- Default: дерево от "root" глубиной не более 3 уровней, на 3-м уровне
  показываются первые 3 ребёнка + маркер "+N more…"
- Search: плоский список кластеров parent → совпавшие дети

Architecture:
- Чистая функция от (WordStore, term, active) → TreeView
- Ничего не рисует: GUI получает готовое описание узлов
- LOADING / ERROR выставляет координатор, проектор их не производит
"""

import locale
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from word_store import ROOT, ResolvedEntry, WordEntry, WordStore

# ===== КОНСТАНТЫ =====
MAX_DEPTH = 3        # Уровней всего: 0, 1, 2. Дети 2-го уровня не раскрываются
VISIBLE_LEAVES = 3   # Сколько детей показывать на последнем уровне до маркера


class TreeStatus(Enum):
    LOADING = "loading"
    ERROR = "error"
    TREE = "tree"
    SEARCH = "search"
    NO_DATA = "no_data"        # Набор записей пуст
    NO_ROOTS = "no_roots"      # Записи есть, но у "root" нет детей
    NO_RESULTS = "no_results"  # Поиск ничего не нашёл


STATUS_MESSAGES: Dict[TreeStatus, str] = {
    TreeStatus.LOADING: "Loading dictionary...",
    TreeStatus.ERROR: "Error loading data. Please try again later.",
    TreeStatus.NO_DATA: "The dictionary is empty.",
    TreeStatus.NO_ROOTS: "No words to display.",
    TreeStatus.NO_RESULTS: "No results found.",
}


class NodeKind(Enum):
    WORD = "word"      # Обычный кликабельный узел
    HEADER = "header"  # Заголовок группы в поиске (родитель совпадений)
    MORE = "more"      # "+N more…", не интерактивен


class NodeState(Enum):
    NORMAL = "normal"
    FOCUS = "focus"    # Совпадение поиска
    HIDDEN = "hidden"  # Показан приглушённо ради контекста


@dataclass(frozen=True)
class TreeNode:
    label: str
    depth: int
    kind: NodeKind = NodeKind.WORD
    entry: Optional[ResolvedEntry] = None
    state: NodeState = NodeState.NORMAL
    active: bool = False
    children: Tuple["TreeNode", ...] = ()

    @property
    def interactive(self) -> bool:
        return self.kind is not NodeKind.MORE

    def walk(self):
        """Узел и все потомки в порядке отображения"""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True)
class TreeView:
    status: TreeStatus
    nodes: Tuple[TreeNode, ...] = ()
    term: str = ""

    @property
    def message(self) -> Optional[str]:
        return STATUS_MESSAGES.get(self.status)

    @property
    def populated(self) -> bool:
        return self.status in (TreeStatus.TREE, TreeStatus.SEARCH)

    def walk(self):
        for node in self.nodes:
            yield from node.walk()

    def labels(self) -> List[str]:
        return [node.label for node in self.walk()]

    @property
    def match_count(self) -> int:
        """Совпадения поиска без учёта заголовков групп"""
        return sum(1 for node in self.walk()
                   if node.kind is NodeKind.WORD and node.state is NodeState.FOCUS)


def more_label(remaining: int) -> str:
    return f"+{remaining} more…"


def _sort_key(entry: WordEntry, term: str):
    # Префиксные совпадения раньше; далее порядок локали; сырой word как последний tie-breaker
    folded = entry.word.casefold()
    # strxfrm не принимает NUL
    return (not folded.startswith(term), locale.strxfrm(folded.replace("\x00", "")), entry.word)


class TreeProjector:
    """
    Вычисляет видимый набор узлов для default и search режимов.

    Responsibilities:
    - Ограниченный обход дерева (MAX_DEPTH) с усечением последнего уровня
    - Фильтрация, сортировка и группировка результатов поиска
    - Пометка активного (выбранного) узла
    """

    def __init__(self, store: WordStore):
        self.store = store

    def project(self, term: str = "", active: Optional[WordEntry] = None) -> TreeView:
        """
        Args:
            term: Нормализованный поисковый запрос (strip + lower), "" = default режим
            active: Текущая выбранная запись для подсветки
        """
        if self.store.is_empty:
            return TreeView(TreeStatus.NO_DATA, term=term)

        if term:
            return self._project_search(term.casefold(), active)
        return self._project_tree(active)

    # ===== DEFAULT =====

    def _project_tree(self, active: Optional[WordEntry]) -> TreeView:
        roots = self.store.children_of(ROOT)
        if not roots:
            return TreeView(TreeStatus.NO_ROOTS)

        nodes = tuple(self._build_node(entry, 0, active) for entry in roots)
        return TreeView(TreeStatus.TREE, nodes)

    def _build_node(self, entry: WordEntry, depth: int, active: Optional[WordEntry]) -> TreeNode:
        children: Tuple[TreeNode, ...] = ()
        child_depth = depth + 1

        # Глубина ограничена жёстко: циклы в parent не уводят в бесконечную рекурсию
        if child_depth < MAX_DEPTH:
            kids = self.store.children_of(entry.word)
            is_last_level = child_depth == MAX_DEPTH - 1

            if is_last_level and len(kids) > VISIBLE_LEAVES:
                shown = [self._build_node(kid, child_depth, active) for kid in kids[:VISIBLE_LEAVES]]
                shown.append(TreeNode(
                    label=more_label(len(kids) - VISIBLE_LEAVES),
                    depth=child_depth,
                    kind=NodeKind.MORE
                ))
                children = tuple(shown)
            else:
                children = tuple(self._build_node(kid, child_depth, active) for kid in kids)

        return TreeNode(
            label=entry.word,
            depth=depth,
            entry=entry,
            active=_is_active(entry, active),
            children=children
        )

    # ===== SEARCH =====

    def _project_search(self, term: str, active: Optional[WordEntry]) -> TreeView:
        matches = [entry for entry in self.store.records if term in entry.word.casefold()]
        if not matches:
            return TreeView(TreeStatus.NO_RESULTS, term=term)

        matches.sort(key=lambda entry: _sort_key(entry, term))

        # Группы по значению parent в порядке первого появления в отсортированном списке
        groups: Dict[Optional[str], List[WordEntry]] = {}
        for entry in matches:
            group_key = None if entry.parent in (None, ROOT) else entry.parent
            groups.setdefault(group_key, []).append(entry)

        nodes: List[TreeNode] = []
        for parent_key, children in groups.items():
            if parent_key is None:
                # Совпадения верхнего уровня идут без заголовка
                nodes.extend(self._match_node(entry, 0, active) for entry in children)
                continue

            header = self.store.resolve(parent_key)
            header_matches = term in header.word.casefold()
            nodes.append(TreeNode(
                label=header.word,
                depth=0,
                kind=NodeKind.HEADER,
                entry=header,
                state=NodeState.FOCUS if header_matches else NodeState.HIDDEN,
                active=_is_active(header, active),
                children=tuple(self._match_node(entry, 1, active) for entry in children)
            ))

        return TreeView(TreeStatus.SEARCH, tuple(nodes), term=term)

    @staticmethod
    def _match_node(entry: WordEntry, depth: int, active: Optional[WordEntry]) -> TreeNode:
        return TreeNode(
            label=entry.word,
            depth=depth,
            entry=entry,
            state=NodeState.FOCUS,
            active=_is_active(entry, active)
        )


def _is_active(entry: ResolvedEntry, active: Optional[WordEntry]) -> bool:
    return active is not None and not entry.is_stub and entry == active
