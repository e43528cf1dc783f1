"""Tests for queue ordering and end-of-queue handling."""

import random

import pytest

from radiopress.features.playback.domain import EndOfQueuePolicy, PlaybackSequencer, fisher_yates


def test_fisher_yates_returns_permutation() -> None:
    items = list(range(20))
    shuffled = fisher_yates(items, random.Random(7))

    assert sorted(shuffled) == items
    assert items == list(range(20))


def test_fisher_yates_is_reproducible_with_seed() -> None:
    assert fisher_yates("abcdef", random.Random(3)) == fisher_yates("abcdef", random.Random(3))


def test_unshuffled_queue_is_catalog_order() -> None:
    sequencer = PlaybackSequencer()

    assert sequencer.rebuild([3, 0, 2]) == (0, 2, 3)


def test_next_wraps_without_regenerating() -> None:
    sequencer = PlaybackSequencer(shuffle=True, end_of_queue=EndOfQueuePolicy.WRAP, rng=random.Random(1))
    queue = sequencer.rebuild(range(6))

    advance = sequencer.next(5)

    assert advance.position == 0
    assert advance.wrapped is True
    assert sequencer.queue == queue


def test_next_in_middle_does_not_wrap() -> None:
    sequencer = PlaybackSequencer()
    _ = sequencer.rebuild(range(3))

    advance = sequencer.next(0)

    assert (advance.position, advance.wrapped) == (1, False)


def test_reshuffle_policy_regenerates_on_wrap() -> None:
    rng = random.Random(11)
    sequencer = PlaybackSequencer(shuffle=True, end_of_queue=EndOfQueuePolicy.RESHUFFLE, rng=rng)
    _ = sequencer.rebuild(range(8))
    orders = set()

    for _ in range(5):
        advance = sequencer.next(len(sequencer) - 1)
        assert advance.position == 0
        assert sorted(sequencer.queue) == list(range(8))
        orders.add(sequencer.queue)

    assert len(orders) > 1


def test_reshuffle_policy_without_shuffle_restarts_in_order() -> None:
    sequencer = PlaybackSequencer(end_of_queue=EndOfQueuePolicy.RESHUFFLE)
    _ = sequencer.rebuild([0, 1, 2])

    advance = sequencer.next(2)

    assert advance.position == 0
    assert sequencer.queue == (0, 1, 2)


def test_previous_wraps_to_end() -> None:
    sequencer = PlaybackSequencer()
    _ = sequencer.rebuild(range(4))

    assert sequencer.previous(0) == 3
    assert sequencer.previous(2) == 1


def test_set_shuffle_off_restores_order() -> None:
    sequencer = PlaybackSequencer(shuffle=True, rng=random.Random(5))
    _ = sequencer.rebuild(range(5))

    assert sequencer.set_shuffle(False) == (0, 1, 2, 3, 4)
    assert sequencer.shuffle is False


def test_position_of() -> None:
    sequencer = PlaybackSequencer()
    _ = sequencer.rebuild([1, 4, 6])

    assert sequencer.position_of(4) == 1
    assert sequencer.catalog_index(2) == 6
    assert sequencer.position_of(5) is None


def test_empty_queue_cannot_advance() -> None:
    sequencer = PlaybackSequencer()
    _ = sequencer.rebuild([])

    with pytest.raises(IndexError):
        _ = sequencer.next(0)
    with pytest.raises(IndexError):
        _ = sequencer.previous(0)


@pytest.mark.parametrize("policy", list(EndOfQueuePolicy))
@pytest.mark.parametrize(
    ("length", "position"),
    [(length, position) for length in range(1, 7) for position in range(length)],
)
def test_previous_undoes_next_in_linear_mode(
    policy: EndOfQueuePolicy, length: int, position: int
) -> None:
    sequencer = PlaybackSequencer(shuffle=False, end_of_queue=policy)
    queue = sequencer.rebuild(range(length))

    advanced = sequencer.next(position)

    assert sequencer.previous(advanced.position) == position
    assert sequencer.queue == queue
