"""Output formatting for ServiceResult (Rich text, quiet, and JSON)."""
