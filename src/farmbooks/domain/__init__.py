"""Domain layer for farmbooks application."""

_SERVICES = {
    "CategoryService": "farmbooks.domain.category",
    "TransactionService": "farmbooks.domain.transaction",
    "LivestockService": "farmbooks.domain.livestock",
    "AssetService": "farmbooks.domain.asset",
    "LiabilityService": "farmbooks.domain.liability",
    "InventoryService": "farmbooks.domain.inventory",
    "ReportService": "farmbooks.domain.reports",
    "AdvisorService": "farmbooks.domain.advice",
}

__all__ = list(_SERVICES)


# Import services lazily; they depend on the database layer, which imports
# the entities from this package
def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
