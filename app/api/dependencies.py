from fastapi import Request

from app.services.catalog import CatalogService


def get_catalog_service(request: Request) -> CatalogService:
    """The service instance owned by the running application."""
    return request.app.state.catalog_service
