from typing import Sequence, Tuple


def shape_to_axes(old_shape: Sequence[int], new_shape: Sequence[int]) -> Tuple[int, ...]:
    """axes where two same-rank shapes disagree, i.e. the broadcast/reduced ones"""
    assert len(old_shape) == len(new_shape), (
        "shape_to_axes: len(old_shape) != len(new_shape)"
    )
    return tuple(
        i for i, (a, b) in enumerate(zip(old_shape, new_shape)) if a != b
    )


def argsort(v: Sequence[int]):
    # like numpy argsort: indices that would sort v.
    # for a permutation this is its inverse.
    return [i for i, _ in sorted(enumerate(v), key=lambda p: p[1])]


invert_permutation = argsort


def is_permutation(order: Sequence[int], rank: int) -> bool:
    return sorted(order) == list(range(rank))
