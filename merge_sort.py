from typing import Callable, Sequence, TypeVar

T = TypeVar('T')

Comparator = Callable[[T, T], int]


def natural_order(a, b) -> int:
    return a.compare_to(b)


def merge_sort(items: Sequence[T], compare: Comparator = natural_order) -> list[T]:
    """
    Stable top-down merge sort.

    Returns a new sorted list and leaves `items` untouched. `compare` is any
    callable returning a negative, zero or positive int. Elements that compare
    equal keep their input order, which the collinear detector relies on.

    Time complexity: O(n*log(n)) comparisons.
    """
    array = list(items)
    aux = [None] * len(array)
    _sort(array, aux, 0, len(array) - 1, compare)
    return array


def _sort(array: list, aux: list, lo: int, hi: int, compare: Comparator):
    if lo >= hi:
        return

    mid = (lo + hi) // 2
    _sort(array, aux, lo, mid, compare)
    _sort(array, aux, mid + 1, hi, compare)
    _merge(array, aux, lo, mid, hi, compare)


def _merge(array: list, aux: list, lo: int, mid: int, hi: int, compare: Comparator):
    # halves already in order
    if compare(array[mid], array[mid + 1]) <= 0:
        return

    aux[lo:hi + 1] = array[lo:hi + 1]

    i, j = lo, mid + 1
    for k in range(lo, hi + 1):
        if i > mid:
            array[k] = aux[j]
            j += 1
        elif j > hi:
            array[k] = aux[i]
            i += 1
        elif compare(aux[i], aux[j]) <= 0:
            # left wins ties
            array[k] = aux[i]
            i += 1
        else:
            array[k] = aux[j]
            j += 1
