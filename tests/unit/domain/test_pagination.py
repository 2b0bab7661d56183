import pytest

from inkwell.domain.value_objects.pagination import Page, PageRequest


class TestPageRequestClamped:
    def test_defaults(self):
        page = PageRequest.clamped()
        assert (page.limit, page.offset) == (10, 0)

    def test_limit_clamped_to_maximum(self):
        assert PageRequest.clamped(limit=1000).limit == 100

    @pytest.mark.parametrize("limit", [0, -5])
    def test_non_positive_limit_becomes_one(self, limit):
        assert PageRequest.clamped(limit=limit).limit == 1

    def test_negative_offset_becomes_zero(self):
        assert PageRequest.clamped(offset=-3).offset == 0

    def test_custom_bounds(self):
        page = PageRequest.clamped(None, 5, default_limit=20, max_limit=50)
        assert (page.limit, page.offset) == (20, 5)


class TestPageRequestFromPage:
    def test_offset_from_page_number(self):
        page = PageRequest.from_page(3, 10)
        assert (page.limit, page.offset, page.page) == (10, 20, 3)

    def test_page_zero_is_first_page(self):
        page = PageRequest.from_page(0, 10)
        assert page.offset == 0
        assert page.page == 1

    def test_non_positive_page_size_uses_default(self):
        assert PageRequest.from_page(1, 0, default_limit=15).limit == 15

    def test_page_size_clamped(self):
        assert PageRequest.from_page(2, 500).limit == 100


def test_constructor_rejects_invalid_window():
    with pytest.raises(ValueError):
        PageRequest(limit=0)
    with pytest.raises(ValueError):
        PageRequest(offset=-1)


def test_page_has_more():
    assert Page(items=[1, 2], total=5, limit=2, offset=0).has_more
    assert not Page(items=[5], total=5, limit=2, offset=4).has_more
    assert Page(items=[], total=0).page == 1
