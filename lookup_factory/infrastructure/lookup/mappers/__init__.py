from .lookup_mapper import LookupMapper

__all__ = ["LookupMapper"]
