from carecenter.routers import contracts, family, health, profile

__all__ = [
    "health",
    "family",
    "contracts",
    "profile",
]
