from .integration import attach_stores

__all__ = ["attach_stores"]
