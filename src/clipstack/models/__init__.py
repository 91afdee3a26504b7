from clipstack.models.entry import Entry

__all__ = ["Entry"]
