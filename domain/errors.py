"""Domain exceptions."""


class CatalogLoadError(ValueError):
    """Fatal failure while building a catalog; no model is published."""
