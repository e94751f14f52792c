import pytest
from sqlalchemy.exc import SQLAlchemyError

from swipefeed.shared.core.exceptions import StoreReadError
from swipefeed.shared.models import GenreCategory
from swipefeed.shared.repositories.genre_repository import GenreRepository
from swipefeed.shared.services.taxonomy_service import TaxonomyService


async def test_list_categories_in_sort_order(db_session, taxonomy):
    categories = await TaxonomyService(db_session).list_categories()

    assert [c.name for c in categories] == ["Scene", "Style", "Archive"]


async def test_list_active_genres_skips_inactive_and_breaks_ties_by_id(db_session, taxonomy):
    genres = await TaxonomyService(db_session).list_active_genres()

    assert [g.name for g in genres] == ["Outdoor", "Comedy", "Drama", "Office"]
    assert all(g.is_active for g in genres)


async def test_list_active_genres_for_one_category(db_session, taxonomy):
    genres = await TaxonomyService(db_session).list_active_genres(category_id=1)

    assert [g.name for g in genres] == ["Outdoor", "Office"]


async def test_get_taxonomy_groups_genres_under_categories(db_session, taxonomy):
    grouped = await TaxonomyService(db_session).get_taxonomy()

    assert [(c.name, [g.name for g in c.genres]) for c in grouped] == [
        ("Scene", ["Outdoor", "Office"]),
        ("Style", ["Comedy", "Drama"]),
        ("Archive", []),
    ]


async def test_empty_catalog_is_not_an_error(db_session):
    service = TaxonomyService(db_session)

    assert await service.list_categories() == []
    assert await service.list_active_genres() == []
    assert await service.get_taxonomy() == []


async def test_malformed_category_is_skipped(db_session, taxonomy):
    db_session.add(GenreCategory(id=9, name="", sort_order=1))
    await db_session.commit()

    categories = await TaxonomyService(db_session).list_categories()

    assert 9 not in [c.id for c in categories]
    assert len(categories) == 3


async def test_store_failure_raises_store_read_error(db_session, taxonomy, monkeypatch):
    async def fail(*args, **kwargs):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(GenreRepository, "list_active", fail)

    with pytest.raises(StoreReadError) as exc_info:
        await TaxonomyService(db_session).get_taxonomy()

    assert exc_info.value.message == "Genre taxonomy is unavailable"
    assert exc_info.value.status_code == 503
