"""
Хранилище записей глоссария.

Responsibilities:
- Держит загруженный набор записей (неизменяемый на время сессии)
- Строит индексы один раз после загрузки: по parent и по word в нижнем регистре
- Поиск по слову (case-insensitive), дети по ключу родителя (case-sensitive)
- Заглушки (StubEntry) для родителей, которых нет в наборе

Architecture:
- Записи + индексы лежат в одном неизменяемом snapshot
- Замена набора = одно присваивание атрибута: рендеры никогда не видят
  наполовину построенные индексы
- Ничего не знает про UI
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union

from network import fetch_glossary, DEFAULT_TIMEOUT

ROOT = "root"  # Sentinel родителя верхнего уровня, собственной записи не имеет


@dataclass(frozen=True)
class WordEntry:
    """Одна запись глоссария"""
    word: str
    definition: str = ""
    tags: Tuple[str, ...] = ()
    parent: Optional[str] = None

    @property
    def key(self) -> str:
        return self.word.lower()

    @property
    def is_stub(self) -> bool:
        return False


@dataclass(frozen=True)
class StubEntry:
    """Родитель, на которого ссылаются, но которого нет среди записей: только подпись"""
    word: str

    @property
    def key(self) -> str:
        return self.word.lower()

    @property
    def is_stub(self) -> bool:
        return True


ResolvedEntry = Union[WordEntry, StubEntry]


def parse_entry(raw) -> Optional[WordEntry]:
    """
    Превращает сырую запись JSON в WordEntry.

    Битые записи не чинятся:
    - не-dict или без строкового word → None (запись пропускается)
    - нет definition → ""
    - нет tags / не список → (), не-строковые теги отбрасываются
    - нет parent / не строка → None (запись ищется, но не висит в дереве)
    """
    if not isinstance(raw, dict):
        return None

    word = raw.get("word")
    if not isinstance(word, str) or not word:
        return None

    definition = raw.get("definition")
    if not isinstance(definition, str):
        definition = ""

    tags = raw.get("tags")
    if isinstance(tags, list):
        tags = tuple(tag for tag in tags if isinstance(tag, str))
    else:
        tags = ()

    parent = raw.get("parent")
    if not isinstance(parent, str) or not parent:
        parent = None

    return WordEntry(word=word, definition=definition, tags=tags, parent=parent)


class _Snapshot:
    """Записи и производные индексы одной загрузки"""

    __slots__ = ("records", "by_parent", "by_key")

    def __init__(self, records: Tuple[WordEntry, ...]):
        self.records = records

        by_parent: Dict[str, List[WordEntry]] = {}
        by_key: Dict[str, WordEntry] = {}

        for entry in records:
            if entry.parent is not None:
                by_parent.setdefault(entry.parent, []).append(entry)
            # Коллизия регистра: побеждает первая запись в порядке загрузки
            by_key.setdefault(entry.key, entry)

        self.by_parent = {parent: tuple(children) for parent, children in by_parent.items()}
        self.by_key = by_key


class WordStore:
    """
    Единственный владелец набора записей и индексов.

    Остальные компоненты только читают через children_of / find / resolve.
    """

    def __init__(self, items: Optional[Iterable] = None):
        self._snapshot = _Snapshot(())
        if items is not None:
            self.replace(items)

    # ===== ЗАГРУЗКА =====

    def load(self, source: str, timeout: float = DEFAULT_TIMEOUT) -> Tuple[WordEntry, ...]:
        """
        Загружает JSON документ и атомарно заменяет набор записей.

        Raises:
            FetchError: набор записей остаётся прежним
        """
        items = fetch_glossary(source, timeout=timeout)
        return self.replace(items)

    def replace(self, items: Iterable) -> Tuple[WordEntry, ...]:
        """Строит новый snapshot целиком и подменяет старый одним присваиванием"""
        records = tuple(entry for entry in map(parse_entry, items) if entry is not None)
        self._snapshot = _Snapshot(records)
        return records

    # ===== ЗАПРОСЫ =====

    @property
    def records(self) -> Tuple[WordEntry, ...]:
        return self._snapshot.records

    def __len__(self) -> int:
        return len(self._snapshot.records)

    @property
    def is_empty(self) -> bool:
        return not self._snapshot.records

    def children_of(self, parent_key: str) -> Tuple[WordEntry, ...]:
        """Записи с parent == parent_key (точное совпадение), в порядке источника"""
        return self._snapshot.by_parent.get(parent_key, ())

    def find(self, word: Optional[str]) -> Optional[WordEntry]:
        """Точное совпадение без учёта регистра"""
        if not word:
            return None
        return self._snapshot.by_key.get(word.lower())

    def resolve(self, key: str) -> ResolvedEntry:
        """Запись по ключу или заглушка с одной подписью"""
        return self.find(key) or StubEntry(key)
