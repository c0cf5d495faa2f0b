import sys
import threading

import pytest

from rifa.backend.store import InMemoryParticipantStore, StoreRejection, create_store


def test_create_store_returns_in_memory_store() -> None:
    store = create_store()

    assert isinstance(store, InMemoryParticipantStore)
    assert store.list_participants() == []


def test_add_participant_trims_name_and_keeps_order() -> None:
    store = InMemoryParticipantStore()

    store.add_participant(name="  Ana ", numbers=[5, 12, 999])
    store.add_participant(name="Luis", numbers=[1])

    participants = store.list_participants()
    assert [p.name for p in participants] == ["Ana", "Luis"]
    assert participants[0].numbers == (5, 12, 999)
    assert participants[0].to_payload() == {"name": "Ana", "numbers": [5, 12, 999]}


def test_add_participant_rejects_taken_number() -> None:
    store = InMemoryParticipantStore()
    store.add_participant(name="Ana", numbers=[5])

    with pytest.raises(StoreRejection) as excinfo:
        store.add_participant(name="Luis", numbers=[4, 5])

    assert "005" in excinfo.value.message
    assert "Ana" in excinfo.value.message
    assert [p.name for p in store.list_participants()] == ["Ana"]


@pytest.mark.parametrize(
    "name, numbers",
    [
        ("   ", [1]),
        ("Ana", []),
        ("Ana", [1, 2, 3, 4]),
        ("Ana", [7, 7]),
        ("Ana", [1000]),
        ("Ana", [-1]),
    ],
)
def test_add_participant_rejects_invalid_claims(name: str, numbers: list[int]) -> None:
    store = InMemoryParticipantStore()

    with pytest.raises(StoreRejection):
        store.add_participant(name=name, numbers=numbers)

    assert store.list_participants() == []


def test_reset_frees_every_number_and_is_idempotent() -> None:
    store = InMemoryParticipantStore()
    store.add_participant(name="Ana", numbers=[5])

    store.reset()
    store.reset()

    assert store.list_participants() == []
    store.add_participant(name="Luis", numbers=[5])
    assert store.list_participants()[0].name == "Luis"


def test_concurrent_claims_of_same_numbers_have_single_winner() -> None:
    previous_interval = sys.getswitchinterval()
    sys.setswitchinterval(1e-6)
    try:
        for _ in range(50):
            store = InMemoryParticipantStore()
            barrier = threading.Barrier(8)
            outcomes: list[str] = []

            def claim(index: int) -> None:
                barrier.wait()
                try:
                    store.add_participant(name=f"p{index}", numbers=[7, 8, 9])
                    outcomes.append("ok")
                except StoreRejection:
                    outcomes.append("rejected")

            threads = [threading.Thread(target=claim, args=(i,)) for i in range(8)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

            assert outcomes.count("ok") == 1
            assert len(store.list_participants()) == 1
    finally:
        sys.setswitchinterval(previous_interval)
