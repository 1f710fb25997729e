"""
Shared fixtures: a manual-clock scheduler standing in for tk's after(),
a recording view, and small glossary data sets.
"""

import pytest

from word_store import WordStore


class FakeScheduler:
    """after()/after_cancel() with a manually advanced clock"""

    def __init__(self):
        self.now = 0
        self._timers = {}
        self._next_id = 0

    def after(self, delay_ms, func, *args):
        self._next_id += 1
        self._timers[self._next_id] = (self.now + delay_ms, func, args)
        return self._next_id

    def after_cancel(self, timer_id):
        self._timers.pop(timer_id, None)

    @property
    def pending(self) -> int:
        return len(self._timers)

    def advance(self, ms: int):
        self.now += ms
        while True:
            due = sorted((when, timer_id) for timer_id, (when, _, _) in self._timers.items() if when <= self.now)
            if not due:
                return
            _, timer_id = due[0]
            _, func, args = self._timers.pop(timer_id)
            func(*args)


class RecordingView:
    """Collects everything the coordinator asks to draw"""

    def __init__(self):
        self.trees = []
        self.definitions = []

    def show_tree(self, view):
        self.trees.append(view)

    def show_definition(self, content):
        self.definitions.append(content)

    @property
    def tree(self):
        return self.trees[-1]

    @property
    def definition(self):
        return self.definitions[-1]


BOLT_RECORDS = [
    {"word": "Bolt", "parent": "root", "definition": "A fastener", "tags": ["hardware"]},
    {"word": "Hex Bolt", "parent": "Bolt", "definition": "Six-sided head", "tags": []},
]


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def bolt_store():
    return WordStore(BOLT_RECORDS)


@pytest.fixture
def deep_store():
    """root → Tools → Fasteners → Bolt → Hex Bolt, plus a wide level-2 list under Fasteners"""
    return WordStore([
        {"word": "Tools", "parent": "root", "definition": "Things to work with"},
        {"word": "Materials", "parent": "root", "definition": "Stuff"},
        {"word": "Fasteners", "parent": "Tools", "definition": "Hold things together"},
        {"word": "Hammer", "parent": "Tools", "definition": "Hits nails"},
        {"word": "Bolt", "parent": "Fasteners", "definition": "A threaded fastener"},
        {"word": "Nail", "parent": "Fasteners", "definition": "A pin"},
        {"word": "Rivet", "parent": "Fasteners", "definition": "A permanent pin"},
        {"word": "Screw", "parent": "Fasteners", "definition": "A threaded pin"},
        {"word": "Staple", "parent": "Fasteners", "definition": "A bent wire"},
        {"word": "Hex Bolt", "parent": "Bolt", "definition": "Six-sided head"},
        {"word": "Wood", "parent": "Materials", "definition": "From trees"},
    ])
