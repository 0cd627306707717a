from .envelope import ErrorEnvelope, LookupEntryResponse

__all__ = ["ErrorEnvelope", "LookupEntryResponse"]
