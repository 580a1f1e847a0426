from .stores import (
    DocumentStoreDep,
    RelationalStoreDep,
    get_document_store,
    get_relational_store,
)

__all__ = [
    "DocumentStoreDep",
    "RelationalStoreDep",
    "get_document_store",
    "get_relational_store",
]
