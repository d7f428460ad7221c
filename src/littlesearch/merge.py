"""Binary-search insertion into occurrence lists kept in descending frequency."""

from collections.abc import Sequence

from littlesearch.data_models.occurrence import Occurrence


def find_insertion_point(
    occs: Sequence[Occurrence], key: Occurrence
) -> tuple[int, list[int]]:
    """Return (slot, probed midpoints) for inserting key into sorted occs.

    occs must already be sorted by descending frequency. The search stops at the
    first midpoint with the same frequency as key, so among equal frequencies the
    slot is decided by that single midpoint:

    find_insertion_point([12, 8, 7, 5, 3, 2], 6)  -> (3, [2, 4, 3])
    find_insertion_point([5, 5, 5], 5)            -> (2, [1])
    """
    low = 0
    high = len(occs) - 1
    middle = 0
    probes: list[int] = []
    while high >= low:
        middle = (low + high) // 2
        probes.append(middle)
        freq = occs[middle].frequency
        if freq == key.frequency:
            break
        if freq > key.frequency:
            low = middle + 1
        else:
            high = middle - 1
    if not occs:
        return 0, probes
    if key.frequency <= occs[middle].frequency:
        return middle + 1, probes
    return middle, probes


def insert_last_occurrence(occs: list[Occurrence]) -> list[int] | None:
    """Move the last element of occs into its descending-frequency slot.

    occs[:-1] must already be sorted. Returns the midpoints probed by the binary
    search, or None when occs holds a single element.
    """
    if len(occs) < 2:
        return None
    key = occs.pop()
    slot, probes = find_insertion_point(occs, key)
    occs.insert(slot, key)
    return probes
