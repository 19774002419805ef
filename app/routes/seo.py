"""
SEO Routes

hreflang alternates for one entry, sitemap.xml for a list of entries and
robots.txt.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.dependencies import get_seo_service
from app.schemas.seo import ContentEntryRef, HreflangLink, HreflangRequest, HreflangResponse
from app.services.seo_service import SEOService

router = APIRouter(tags=["SEO"])


@router.post("/api/v1/seo/hreflang", response_model=HreflangResponse)
def get_hreflang_links(
    payload: HreflangRequest,
    service: SEOService = Depends(get_seo_service),
) -> HreflangResponse:
    """Alternate-language links for the locale variants of one entry."""
    links = service.generate_hreflang_links(payload.collection, payload.variants)
    return HreflangResponse(
        collection=payload.collection,
        links=[HreflangLink(**link) for link in links],
        tags=service.render_hreflang_tags(links),
    )


@router.post("/api/v1/seo/sitemap.xml")
def build_sitemap(
    entries: list[ContentEntryRef],
    service: SEOService = Depends(get_seo_service),
) -> Response:
    """
    Generate an XML sitemap for the entries listed by the site generator.

    Entries sharing a mapping key get hreflang alternates.
    """
    return Response(content=service.generate_sitemap(entries), media_type="application/xml")


@router.get("/robots.txt")
def get_robots_txt(service: SEOService = Depends(get_seo_service)) -> Response:
    return Response(
        content=service.generate_robots_txt(),
        media_type="text/plain",
        headers={"Cache-Control": "public, max-age=86400"},
    )
