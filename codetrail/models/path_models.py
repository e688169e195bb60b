from pydantic import BaseModel


class ReconciledPath(BaseModel):
    """Canonical key derived from a file path and a qualified type name."""

    key: str
    matched: bool  # False when the raw directory was returned as a fallback
