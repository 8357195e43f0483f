import pytest

from jsendjar.models import CollectionSource, ModelCollection, RowCollection


def test_unpaginated_returns_everything():
    col = RowCollection([1, 2, 3])
    assert col.get_items() == [1, 2, 3]
    assert len(col) == 3
    assert col.holds_models is False


def test_pagination_slices_current_page():
    col = ModelCollection(range(5), page=2, page_size=2)
    assert col.get_items() == [2, 3]
    assert col.total_count == 5
    assert col.holds_models is True


def test_last_partial_and_out_of_range_pages():
    assert RowCollection(range(5), page=3, page_size=2).get_items() == [4]
    assert RowCollection(range(5), page=9, page_size=2).get_items() == []


def test_page_size_without_page_means_first_page():
    assert RowCollection("abcde", page_size=2).get_items() == ["a", "b"]


@pytest.mark.parametrize("kwargs", [{"page": 0}, {"page_size": 0}])
def test_invalid_paging(kwargs):
    with pytest.raises(ValueError):
        RowCollection([], **kwargs)


def test_items_are_copied():
    src = [1]
    col = RowCollection(src)
    col.get_items().append(2)
    src.append(3)
    assert col.get_items() == [1]


def test_protocol_conformance():
    assert isinstance(ModelCollection([]), CollectionSource)
    assert isinstance(RowCollection([]), CollectionSource)
    assert not isinstance([], CollectionSource)
