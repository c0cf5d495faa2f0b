from rifa.client.pool import NumberPool
from rifa.client.selection import SelectionBuffer


def _pool_with_ana() -> NumberPool:
    pool = NumberPool()
    pool.rebuild([{"name": "Ana", "numbers": [5, 12, 999]}])
    return pool


def test_toggle_occupied_number_is_ignored() -> None:
    pool = _pool_with_ana()
    selection = SelectionBuffer()

    changed = selection.toggle(5, pool)

    assert changed is False
    assert selection.numbers == ()


def test_toggle_twice_restores_previous_selection() -> None:
    pool = _pool_with_ana()
    selection = SelectionBuffer()
    selection.toggle(1, pool)
    before = selection.numbers

    selection.toggle(7, pool)
    selection.toggle(7, pool)

    assert selection.numbers == before == (1,)


def test_fourth_number_is_ignored() -> None:
    pool = NumberPool()
    selection = SelectionBuffer()
    for number in (10, 20, 30):
        assert selection.toggle(number, pool) is True

    changed = selection.toggle(40, pool)

    assert changed is False
    assert selection.numbers == (10, 20, 30)
    assert selection.is_full is True


def test_deselect_from_full_buffer_frees_a_slot() -> None:
    pool = NumberPool()
    selection = SelectionBuffer()
    for number in (10, 20, 30):
        selection.toggle(number, pool)

    selection.toggle(20, pool)
    selection.toggle(40, pool)

    assert selection.numbers == (10, 30, 40)


def test_out_of_range_numbers_are_ignored() -> None:
    selection = SelectionBuffer()

    assert selection.toggle(1000, NumberPool()) is False
    assert selection.toggle(-1, NumberPool()) is False
    assert len(selection) == 0


def test_prune_drops_numbers_claimed_elsewhere() -> None:
    pool = NumberPool()
    selection = SelectionBuffer()
    selection.toggle(5, pool)
    selection.toggle(6, pool)

    pool.rebuild([{"name": "Ana", "numbers": [5]}])
    dropped = selection.prune(pool)

    assert dropped == [5]
    assert selection.numbers == (6,)
    assert 5 not in selection


def test_clear_empties_buffer() -> None:
    pool = NumberPool()
    selection = SelectionBuffer()
    selection.toggle(1, pool)

    selection.clear()

    assert selection.numbers == ()
