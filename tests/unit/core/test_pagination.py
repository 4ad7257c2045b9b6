import pytest

from roster.core.pagination import Page, PageRequest, update_page_headers


@pytest.mark.unit
def test_page_request_parses_sort_expressions():
    req = PageRequest.of(2, 10, ["last_name", "email,DESC", " first_name , asc "])
    assert req.offset == 20
    assert req.sort == (("last_name", "asc"), ("email", "desc"), ("first_name", "asc"))


@pytest.mark.unit
@pytest.mark.parametrize("sort", [[",asc"], ["email,sideways"], ["password"]])
def test_page_request_rejects_bad_sort(sort):
    with pytest.raises(ValueError):
        PageRequest.of(0, 10, sort, allowed={"email", "last_name"})


@pytest.mark.unit
@pytest.mark.parametrize("page, size", [(-1, 10), (0, 0)])
def test_page_request_rejects_bad_bounds(page, size):
    with pytest.raises(ValueError):
        PageRequest(page=page, size=size)


@pytest.mark.unit
@pytest.mark.parametrize("total, size, pages", [(0, 20, 0), (1, 20, 1), (20, 20, 1), (21, 20, 2)])
def test_total_pages(total, size, pages):
    assert Page(items=[], total_elements=total, page=0, size=size).total_pages == pages


@pytest.mark.unit
def test_map_keeps_totals():
    page = Page(items=[1, 2], total_elements=7, page=1, size=2).map(str)
    assert page.items == ["1", "2"]
    assert (page.total_elements, page.page, page.size, page.total_pages) == (7, 1, 2, 4)


class _Sink:
    def __init__(self):
        self.headers = {}


@pytest.mark.unit
def test_update_page_headers():
    sink = _Sink()
    update_page_headers(sink, Page(items=["a"], total_elements=41, page=2, size=20))
    assert sink.headers == {
        "X-Total-Count": "41",
        "X-Total-Pages": "3",
        "X-Page-Number": "2",
        "X-Page-Size": "20",
    }
