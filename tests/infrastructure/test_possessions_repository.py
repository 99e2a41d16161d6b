"""Tests for the in-memory possession ledger."""

from datetime import date
from decimal import Decimal
import json
import threading

import pytest

from src.domain.errors import (
    DuplicatePossessionError,
    InvalidPossessionError,
    PossessionNotFoundError,
)
from src.domain.models import Possession
from src.infrastructure.possessions_repository import (
    InMemoryPossessionsRepository,
    load_possessions_file,
)
from src.utils.utils import get_project_root


def _possession(label: str = "Laptop") -> Possession:
    return Possession(
        label=label,
        initial_value=Decimal("1000"),
        start_date=date(2020, 1, 1),
    )


def test_repository_preserves_insertion_order() -> None:
    """Possessions should be listed in the order they were added."""
    repository = InMemoryPossessionsRepository([_possession("B")])
    repository.add_possession(_possession("A"))

    assert [item.label for item in repository.fetch_possessions()] == [
        "B",
        "A",
    ]


def test_fetch_possessions_returns_a_snapshot() -> None:
    """Later writes should not leak into a list already handed out."""
    repository = InMemoryPossessionsRepository([_possession()])

    snapshot = repository.fetch_possessions()
    repository.add_possession(_possession("Car"))

    assert len(snapshot) == 1


def test_duplicate_labels_are_rejected() -> None:
    """Seeding or adding a known label should fail."""
    with pytest.raises(DuplicatePossessionError):
        InMemoryPossessionsRepository([_possession(), _possession()])

    repository = InMemoryPossessionsRepository([_possession()])
    with pytest.raises(DuplicatePossessionError):
        repository.add_possession(_possession())


def test_update_end_date_replaces_the_record() -> None:
    """Closing should swap in a closed copy."""
    repository = InMemoryPossessionsRepository([_possession()])

    updated = repository.update_end_date("Laptop", date(2022, 1, 1))

    assert updated.end_date == date(2022, 1, 1)
    assert repository.fetch_possession("Laptop") == updated


def test_unknown_labels_raise_not_found() -> None:
    """Reads and writes on unknown labels should fail loudly."""
    repository = InMemoryPossessionsRepository()

    with pytest.raises(PossessionNotFoundError):
        repository.fetch_possession("Laptop")
    with pytest.raises(PossessionNotFoundError):
        repository.update_end_date("Laptop", date(2022, 1, 1))
    with pytest.raises(PossessionNotFoundError):
        repository.remove_possession("Laptop")


def test_remove_possession_deletes_the_record() -> None:
    """Removed labels should disappear from the ledger."""
    repository = InMemoryPossessionsRepository([_possession()])

    repository.remove_possession("Laptop")

    assert repository.fetch_possessions() == []


def test_concurrent_writers_do_not_lose_records() -> None:
    """Parallel inserts should all land in the ledger."""
    repository = InMemoryPossessionsRepository()
    threads = [
        threading.Thread(
            target=repository.add_possession,
            args=(_possession(f"Item {index}"),),
        )
        for index in range(20)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(repository.fetch_possessions()) == 20


def test_load_possessions_file_accepts_list_or_object(tmp_path) -> None:
    """Both a bare list and a wrapped list should be read."""
    record = {
        "label": "Laptop",
        "initial_value": "1000",
        "start_date": "2020-01-01",
    }
    bare = tmp_path / "bare.json"
    bare.write_text(json.dumps([record]), encoding="utf-8")
    wrapped = tmp_path / "wrapped.json"
    wrapped.write_text(json.dumps({"possessions": [record]}), encoding="utf-8")

    assert load_possessions_file(bare) == [_possession()]
    assert load_possessions_file(str(wrapped)) == [_possession()]


def test_load_possessions_file_rejects_other_payloads(tmp_path) -> None:
    """Non-list payloads should raise InvalidPossessionError."""
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"possessions": "Laptop"}), encoding="utf-8")

    with pytest.raises(InvalidPossessionError):
        load_possessions_file(path)


def test_shipped_sample_ledger_loads() -> None:
    """The sample ledger in data/ should parse into five possessions."""
    path = get_project_root() / "data" / "possessions.json"

    repository = InMemoryPossessionsRepository.from_file(path)

    possessions = repository.fetch_possessions()
    assert len(possessions) == 5
    assert repository.fetch_possession("Motorbike").end_date == date(
        2023, 9, 30
    )
    assert all(item.owner == "John Doe" for item in possessions)
