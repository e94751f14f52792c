"""
Taxonomy Handler

Read-only genre catalog endpoints used by the submission form.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from swipefeed.shared.schemas.taxonomy import (
    GenreCategoryRecord,
    GenreRecord,
    TaxonomyResponse,
)
from swipefeed.shared.services.taxonomy_service import TaxonomyService
from swipefeed.api.dependencies.services import get_taxonomy_service


router = APIRouter()


@router.get("", response_model=TaxonomyResponse)
async def get_taxonomy(
    taxonomy_service: TaxonomyService = Depends(get_taxonomy_service),
):
    """Categories with their active genres, in display order."""
    categories = await taxonomy_service.get_taxonomy()
    return TaxonomyResponse(categories=categories)


@router.get("/categories", response_model=list[GenreCategoryRecord])
async def list_categories(
    taxonomy_service: TaxonomyService = Depends(get_taxonomy_service),
):
    """All genre categories in display order."""
    return await taxonomy_service.list_categories()


@router.get("/genres", response_model=list[GenreRecord])
async def list_active_genres(
    category_id: Optional[int] = Query(None, description="Only genres of this category"),
    taxonomy_service: TaxonomyService = Depends(get_taxonomy_service),
):
    """
    Active genres in display order.

    An empty list means no genres are offered yet.
    """
    return await taxonomy_service.list_active_genres(category_id=category_id)
