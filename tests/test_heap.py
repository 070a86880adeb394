import io

import pytest

from dsakit.heap import build_max_heap, build_min_heap, main

SAMPLES = [
    [],
    [7],
    [5, 3, 8, 1],
    [40, 10, 30, 20, 50, 60, 5, 5, 90],
    list(range(20)),
    list(range(20, 0, -1)),
    [3, 3, 3, 1, 1, 2],
]


def _is_heap(items, ok):
    return all(
        ok(items[(i - 1) // 2], items[i]) for i in range(1, len(items))
    )


@pytest.mark.parametrize("values", SAMPLES)
def test_min_heap_property_and_permutation(values):
    heap = build_min_heap(values)
    assert sorted(heap) == sorted(values)
    assert _is_heap(heap, lambda parent, child: parent <= child)


@pytest.mark.parametrize("values", SAMPLES)
def test_max_heap_property_and_permutation(values):
    heap = build_max_heap(values)
    assert sorted(heap) == sorted(values)
    assert _is_heap(heap, lambda parent, child: parent >= child)


@pytest.mark.parametrize("values", SAMPLES[1:])
def test_root_is_extreme(values):
    assert build_min_heap(values)[0] == min(values)
    assert build_max_heap(values)[0] == max(values)


def test_input_is_not_modified():
    values = [9, 2, 7, 4]
    build_min_heap(values)
    build_max_heap(values)
    assert values == [9, 2, 7, 4]


def test_already_heap_is_unchanged():
    heap = build_min_heap([8, 6, 4, 2, 0])
    assert build_min_heap(heap) == heap


def test_main_prints_heaps(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n5 1 3\n1\n2\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Min Heap:\n1 " in out
    assert "Max Heap:\n5 " in out
    assert out.rstrip().endswith("Exiting...")