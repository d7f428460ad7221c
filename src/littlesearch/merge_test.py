import random

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.merge import find_insertion_point, insert_last_occurrence


def _occs(*freqs: int) -> list[Occurrence]:
    return [Occurrence(document=f"d{i}", frequency=f) for i, f in enumerate(freqs)]


def _freqs(occs: list[Occurrence]) -> list[int]:
    return [o.frequency for o in occs]


def test_single_element_returns_none():
    occs = _occs(4)
    assert insert_last_occurrence(occs) is None
    assert _freqs(occs) == [4]


def test_empty_list_returns_none():
    assert insert_last_occurrence([]) is None


def test_find_insertion_point_empty_prefix():
    assert find_insertion_point([], Occurrence(document="x", frequency=1)) == (0, [])


def test_probe_sequence_middle_insert():
    occs = _occs(12, 8, 7, 5, 3, 2, 6)
    probes = insert_last_occurrence(occs)
    assert probes == [2, 4, 3]
    assert _freqs(occs) == [12, 8, 7, 6, 5, 3, 2]


def test_new_maximum_goes_first():
    occs = _occs(3, 2, 1, 9)
    probes = insert_last_occurrence(occs)
    assert probes == [1, 0]
    assert _freqs(occs) == [9, 3, 2, 1]
    assert occs[0].document == "d3"


def test_new_minimum_stays_last():
    occs = _occs(9, 7, 5, 1)
    probes = insert_last_occurrence(occs)
    assert probes == [1, 2]
    assert _freqs(occs) == [9, 7, 5, 1]
    assert occs[-1].document == "d3"


def test_two_elements_greater_key():
    occs = _occs(2, 3)
    assert insert_last_occurrence(occs) == [0]
    assert [o.document for o in occs] == ["d1", "d0"]


def test_equal_frequency_lands_after_probed_midpoint():
    # stops at the first equal midpoint (index 1), inserts right after it
    occs = _occs(5, 5, 5, 5)
    probes = insert_last_occurrence(occs)
    assert probes == [1]
    assert [o.document for o in occs] == ["d0", "d1", "d3", "d2"]


def test_equal_frequency_with_neighbors():
    occs = _occs(9, 4, 4, 4, 1, 4)
    probes = insert_last_occurrence(occs)
    assert probes == [2]
    assert [o.document for o in occs] == ["d0", "d1", "d2", "d5", "d3", "d4"]


def test_find_insertion_point_does_not_mutate():
    occs = _occs(6, 4, 2)
    before = list(occs)
    slot, probes = find_insertion_point(occs, Occurrence(document="x", frequency=3))
    assert (slot, probes) == (2, [1, 2])
    assert occs == before


def test_random_inserts_keep_order():
    rng = random.Random(7)
    occs: list[Occurrence] = []
    for i in range(200):
        occs.append(Occurrence(document=f"d{i}", frequency=rng.randint(0, 20)))
        insert_last_occurrence(occs)
        freqs = _freqs(occs)
        assert freqs == sorted(freqs, reverse=True)
    assert len(occs) == 200
