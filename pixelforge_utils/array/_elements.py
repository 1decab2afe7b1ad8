"""
Element accessors for ordered sequences.
"""
from collections.abc import Sequence
from typing import TypeVar, overload

_T = TypeVar('_T')
_D = TypeVar('_D')


@overload
def last_element(seq: Sequence[_T]) -> _T | None: ...


@overload
def last_element(seq: Sequence[_T], default: _D) -> _T | _D: ...


def last_element(
        seq: Sequence[_T],
        default: _D | None = None,
) -> _T | _D | None:
    """
    Return the last element of the sequence, or ``default`` if it is empty.

    Only one indexing operation is made, so it is constant-time for all
    built-in sequences. Iterators and generators are not sequences:
    they would need to be consumed, so they are not supported.

    The absence of elements is not an error: ``None`` is returned instead,
    unless a specific ``default`` is provided. Mind that for sequences
    containing ``None`` as their last element, the result is ambiguous;
    pass an own marker object as ``default`` if this case matters.
    """
    return seq[-1] if len(seq) else default
