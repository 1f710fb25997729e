"""
Содержимое панели определения.

Responsibilities:
- Преобразование выбранной записи в DefinitionContent (заголовок, текст, теги, родитель)
- Placeholder "Select a word" когда ничего не выбрано
- Опциональная стратегия prefetch: содержимое для слова под курсором считается
  заранее и забирается один раз при следующем render()

Prefetch только прячет задержку между hover и кликом: итоговое содержимое после
выбора всегда то же самое, меняется лишь момент вычисления.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from word_store import ROOT, WordEntry

PLACEHOLDER_HEADING = "Select a word"
PLACEHOLDER_BODY = "Click any word in the tree to see its definition."


@dataclass(frozen=True)
class DefinitionContent:
    heading: str
    body: str
    tags: Tuple[str, ...] = ()
    parent: Optional[str] = None
    placeholder: bool = False

    @property
    def has_tags(self) -> bool:
        return bool(self.tags)

    def as_text(self) -> str:
        """Текстовое представление для буфера обмена"""
        lines = [self.heading, self.body]
        if self.tags:
            lines.append("Tags: " + ", ".join(self.tags))
        if self.parent:
            lines.append(f"Parent: {self.parent}")
        return "\n".join(lines)


PLACEHOLDER = DefinitionContent(PLACEHOLDER_HEADING, PLACEHOLDER_BODY, placeholder=True)


def build_definition(entry: Optional[WordEntry]) -> DefinitionContent:
    """Чистое преобразование записи в содержимое панели"""
    if entry is None:
        return PLACEHOLDER

    parent = entry.parent if entry.parent and entry.parent != ROOT else None
    return DefinitionContent(
        heading=entry.word,
        body=entry.definition,
        tags=tuple(entry.tags),
        parent=parent
    )


class PrefetchCache:
    """
    Одноразовый кэш заранее посчитанного содержимого.

    Хранит ровно одно значение, привязанное к слову, для которого оно посчитано.
    consume() всегда очищает кэш; содержимое другого слова никогда не отдаётся.
    """

    def __init__(self):
        self._key: Optional[str] = None
        self._content: Optional[DefinitionContent] = None

    @property
    def has_content(self) -> bool:
        return self._content is not None

    def store(self, entry: WordEntry):
        self._key = entry.key
        self._content = build_definition(entry)

    def consume(self, entry: Optional[WordEntry]) -> Optional[DefinitionContent]:
        key, content = self._key, self._content
        self.discard()
        if entry is None or content is None or key != entry.key:
            return None
        return content

    def discard(self):
        self._key = None
        self._content = None


class DefinitionRenderer:
    """
    Единая точка получения содержимого панели.

    Prefetch подключается как стратегия (PrefetchCache), а не отдельной реализацией.
    """

    def __init__(self, prefetch: Optional[PrefetchCache] = None):
        self.prefetch = prefetch

    def render(self, entry: Optional[WordEntry]) -> DefinitionContent:
        if self.prefetch is not None:
            cached = self.prefetch.consume(entry)
            if cached is not None:
                return cached
        return build_definition(entry)

    def prefetch_for(self, entry: Optional[WordEntry]):
        """Заранее считает содержимое для слова под курсором"""
        if self.prefetch is None or entry is None:
            return
        self.prefetch.store(entry)

    def discard_prefetch(self):
        if self.prefetch is not None:
            self.prefetch.discard()
