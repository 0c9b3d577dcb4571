"""
Search filter and pagination tests.
"""
import pytest

from app.core.errors import ValidationFailed
from app.services.search import build_filter, list_tours, total_pages


class TestBuildFilter:

    def test_no_term_matches_everything(self):
        assert build_filter(None) is None
        assert build_filter("") is None

    def test_term_builds_predicate(self):
        assert build_filter("beach") is not None
        assert build_filter("   ") is not None


class TestSearch:

    async def test_matches_title_or_content_case_insensitively(self, db, users, seed_tours):
        await seed_tours(users["author"], [
            {"title": "Beach days in Busan"},
            {"title": "Mountains", "content": "then a long BEACH walk"},
            {"title": "Temples", "content": "no sand here"},
        ])

        page = await list_tours(db, term="beach")

        titles = {t.title for t in page.items}
        assert titles == {"Beach days in Busan", "Mountains"}
        assert page.total_count == 2

    async def test_substring_is_not_anchored(self, db, users, seed_tours):
        await seed_tours(users["author"], [{"title": "Jeju seaside"}, {"title": "Seoul"}])

        page = await list_tours(db, term="asid")

        assert [t.title for t in page.items] == ["Jeju seaside"]

    async def test_surrounding_spaces_are_part_of_the_term(self, db, users, seed_tours):
        await seed_tours(users["author"], [
            {"title": "Busan", "content": "Haeundae"},
            {"title": "to Busan trip"},
            {"title": "Jeju", "content": "then Busan "},
        ])

        leading = await list_tours(db, term=" Busan")
        trailing = await list_tours(db, term="Busan ")

        assert {t.title for t in leading.items} == {"to Busan trip", "Jeju"}
        assert {t.title for t in trailing.items} == {"to Busan trip", "Jeju"}
        assert len((await list_tours(db, term="Busan")).items) == 3

    async def test_wildcards_in_term_are_literal(self, db, users, seed_tours):
        await seed_tours(users["author"], [
            {"title": "100% fun"},
            {"title": "1000 fun things"},
        ])

        page = await list_tours(db, term="0%")

        assert [t.title for t in page.items] == ["100% fun"]

    async def test_no_term_lists_all_newest_first(self, db, users, seed_tours):
        await seed_tours(users["author"], [{"title": "first"}, {"title": "second"}, {"title": "third"}])

        page = await list_tours(db)

        assert [t.title for t in page.items] == ["third", "second", "first"]

    async def test_items_carry_author(self, db, users, seed_tours):
        await seed_tours(users["author"], [{"title": "with author"}])

        page = await list_tours(db)

        assert page.items[0].author.name == "Mina"
        assert page.items[0].author.id == users["author"].id


class TestPagination:

    async def test_second_page_of_twelve_matches(self, db, users, seed_tours):
        specs = [{"title": f"beach {i}"} for i in range(12)]
        specs.insert(4, {"title": "city"})
        await seed_tours(users["author"], specs)

        page = await list_tours(db, term="beach", page=2, limit=5)

        # newest first: beach 11..7 on page 1, beach 6..2 on page 2
        assert [t.title for t in page.items] == ["beach 6", "beach 5", "beach 4", "beach 3", "beach 2"]
        assert page.page == 2
        assert page.limit == 5
        assert page.total_count == 12
        assert page.total_pages == 3

    async def test_pages_cover_every_match_once(self, db, users, seed_tours):
        await seed_tours(users["author"], [{"title": f"t{i}"} for i in range(7)])

        seen = []
        for n in range(1, 4):
            page = await list_tours(db, page=n, limit=3)
            assert len(page.items) <= 3
            seen.extend(t.title for t in page.items)

        assert seen == [f"t{i}" for i in reversed(range(7))]

    async def test_page_past_the_end_is_empty(self, db, users, seed_tours):
        await seed_tours(users["author"], [{"title": "only"}])

        page = await list_tours(db, page=5, limit=10)

        assert page.items == []
        assert page.total_count == 1
        assert page.total_pages == 1

    async def test_empty_store_reports_one_page(self, db):
        page = await list_tours(db)

        assert page.items == []
        assert page.total_count == 0
        assert page.total_pages == 1

    @pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (-1, 5)])
    async def test_rejects_non_positive_page_or_limit(self, db, page, limit):
        with pytest.raises(ValidationFailed):
            await list_tours(db, page=page, limit=limit)

    def test_total_pages(self):
        assert total_pages(0, 10) == 1
        assert total_pages(10, 10) == 1
        assert total_pages(11, 10) == 2
