"""Use classification codes and their display names."""

from firecode.uses.catalog import TableUseCatalog, UseCatalog
from firecode.uses.codes import ALL_USE_CODES, code_matches, is_composite

__all__ = ["ALL_USE_CODES", "TableUseCatalog", "UseCatalog", "code_matches", "is_composite"]
