"""Tests for offset alignment and pagination info."""

import pytest

from clickup_mcp.clickup.errors import InvalidParameterError
from clickup_mcp.shaping.pagination import fetch_window, get_pagination, page_index


class TestPageIndex:
    @pytest.mark.parametrize("limit", [1, 7, 20, 33, 100])
    def test_accepts_only_multiples_of_limit(self, limit):
        for offset in range(0, 301):
            if offset % limit == 0:
                page = page_index(offset, limit)
                assert page == offset // limit
                assert page * limit == offset
            else:
                with pytest.raises(InvalidParameterError) as exc:
                    page_index(offset, limit)
                message = str(exc.value)
                assert f"offset ({offset})" in message
                assert f"limit ({limit})" in message
                assert "multiple of limit" in message

    def test_misaligned_example(self):
        with pytest.raises(InvalidParameterError, match=r"offset \(25\) must be a multiple of limit \(20\)"):
            page_index(25, 20)

    @pytest.mark.parametrize("limit", [0, -5, 101])
    def test_rejects_limit_out_of_range(self, limit):
        with pytest.raises(InvalidParameterError, match="limit"):
            page_index(0, limit)

    def test_rejects_negative_offset(self):
        with pytest.raises(InvalidParameterError, match="negative"):
            page_index(-20, 20)


class TestGetPagination:
    def test_full_page_without_total_has_more(self):
        info = get_pagination(None, 20, 40, 20)
        assert info.has_more is True
        assert info.next_offset == 60

    def test_short_page_without_total_is_last(self):
        info = get_pagination(None, 7, 40, 20)
        assert info.has_more is False
        assert info.next_offset is None
        assert "next_offset" not in info.model_dump(exclude_none=True)

    def test_known_total(self):
        assert get_pagination(45, 20, 20, 20).next_offset == 40
        last = get_pagination(45, 5, 40, 20)
        assert last.has_more is False
        assert last.next_offset is None

    def test_zero_total(self):
        info = get_pagination(0, 0, 0, 20)
        assert info.has_more is False
        assert info.total == 0

    @pytest.mark.parametrize("limit", [1, 20, 30, 100])
    def test_next_offset_round_trips(self, limit):
        offset = 0
        for _ in range(5):
            info = get_pagination(None, limit, offset, limit)
            assert info.has_more
            assert page_index(info.next_offset, limit) == offset // limit + 1
            offset = info.next_offset


class FixedPages:
    """Upstream that always serves 100-task pages, like ClickUp."""

    def __init__(self, total):
        self.tasks = [{"id": str(i)} for i in range(total)]
        self.pages: list[int] = []

    async def __call__(self, page):
        self.pages.append(page)
        return {"tasks": self.tasks[page * 100 : page * 100 + 100]}


class TestFetchWindow:
    async def test_window_inside_one_page(self):
        upstream = FixedPages(150)
        tasks, has_more = await fetch_window(upstream, offset=20, limit=20)
        assert [t["id"] for t in tasks] == [str(i) for i in range(20, 40)]
        assert has_more is True
        assert upstream.pages == [0]

    async def test_window_crossing_page_boundary(self):
        upstream = FixedPages(150)
        tasks, has_more = await fetch_window(upstream, offset=90, limit=30)
        assert [t["id"] for t in tasks] == [str(i) for i in range(90, 120)]
        assert has_more is True
        assert upstream.pages == [0, 1]

    async def test_last_partial_window(self):
        upstream = FixedPages(150)
        tasks, has_more = await fetch_window(upstream, offset=140, limit=20)
        assert [t["id"] for t in tasks] == [str(i) for i in range(140, 150)]
        assert has_more is False

    @pytest.mark.parametrize("total", [0, 7, 100, 150, 225])
    @pytest.mark.parametrize("limit", [20, 30, 100])
    async def test_following_next_offset_visits_every_task_once(self, total, limit):
        upstream = FixedPages(total)
        seen = []
        offset = 0
        while True:
            page_index(offset, limit)
            tasks, has_more = await fetch_window(upstream, offset=offset, limit=limit)
            info = get_pagination(None, len(tasks), offset, limit, has_more=has_more)
            seen.extend(t["id"] for t in tasks)
            if not info.has_more:
                break
            offset = info.next_offset
        assert seen == [str(i) for i in range(total)]
