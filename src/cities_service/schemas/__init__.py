from .city import DocumentCity, RelationalCity

__all__ = ["DocumentCity", "RelationalCity"]
