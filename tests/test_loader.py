from __future__ import annotations

from recstore.loader import StoreRecordHandler, feed_records
from recstore.records import Pokemon
from recstore.store import RecordStore


def test_handler_forwards_records_to_store() -> None:
    store: RecordStore[Pokemon] = RecordStore()
    handler = StoreRecordHandler(store)

    handler.add_record(Pokemon(id="Bulbasaur", attack=50, defense=10))

    assert store.get("Bulbasaur") == Pokemon(id="Bulbasaur", attack=50, defense=10)


def test_feed_records_preserves_source_order() -> None:
    store: RecordStore[Pokemon] = RecordStore()
    written: list[str] = []
    store.on_after_add(lambda event: written.append(event.value.id))
    records = [
        Pokemon(id="Bulbasaur", attack=49, defense=49),
        Pokemon(id="Ivysaur", attack=62, defense=63),
        Pokemon(id="Venusaur", attack=82, defense=83),
    ]

    count = feed_records(records, StoreRecordHandler(store))

    assert count == 3
    assert written == ["Bulbasaur", "Ivysaur", "Venusaur"]


def test_feed_records_later_duplicates_win() -> None:
    store: RecordStore[dict[str, object]] = RecordStore()

    feed_records(
        [{"id": "Mew", "attack": 1}, {"id": "Mew", "attack": 2}],
        StoreRecordHandler(store),
    )

    assert store.get("Mew") == {"id": "Mew", "attack": 2}
    assert len(store) == 1


def test_feed_records_accepts_any_handler_shape() -> None:
    class _Collector:
        def __init__(self) -> None:
            self.records: list[str] = []

        def add_record(self, record: str) -> None:
            self.records.append(record)

    collector = _Collector()

    assert feed_records(iter(["a", "b"]), collector) == 2
    assert collector.records == ["a", "b"]
