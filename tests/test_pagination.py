"""Tests for client-side pagination."""

import pytest

from hrms_console.services.pagination import paginate


def test_first_and_last_page():
    items = list(range(23))
    first = paginate(items, 1, 10)
    assert first.items == list(range(10))
    assert first.total_pages == 3
    assert first.total_records == 23

    last = paginate(items, 3, 10)
    assert last.items == [20, 21, 22]


def test_out_of_range_pages():
    assert paginate([1, 2, 3], 0, 10).current_page == 1
    assert paginate([1, 2, 3], 5, 10).items == []


def test_empty_list():
    page = paginate([], 1, 10)
    assert page.items == []
    assert page.total_pages == 0
    assert page.info().total_records == 0


def test_rejects_bad_page_size():
    with pytest.raises(ValueError):
        paginate([1], 1, 0)
