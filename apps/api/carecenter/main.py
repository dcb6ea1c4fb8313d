from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from carecenter.core.config import Settings, settings as default_settings
from carecenter.core.logging import configure_logging
from carecenter.routers import contracts, family, health, profile
from carecenter.services.directory import FamilyDirectory
from carecenter.services.fixtures import build_directory, build_profile_store
from carecenter.services.profile import ProfileStore


def create_app(
    settings: Settings | None = None,
    *,
    directory: FamilyDirectory | None = None,
    profile_store: ProfileStore | None = None,
) -> FastAPI:
    """
    Builds the API with its own family directory and profile store.

    State lives on ``app.state`` and is seeded from fixtures unless supplied;
    it is discarded with the app.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Customer Care Center API",
        version=settings.app_version,
        description="Family directory, contracts and profile for the customer care center demo.",
        root_path=settings.root_path,
    )
    app.state.settings = settings
    app.state.directory = directory if directory is not None else build_directory()
    app.state.profile_store = profile_store if profile_store is not None else build_profile_store()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    prefix = settings.api_prefix.rstrip("/")

    @app.get("/", include_in_schema=False)
    def index():
        return {
            "message": "Customer Care Center Demo Backend API",
            "version": settings.app_version,
            "endpoints": {
                "profile": f"{prefix}/profile",
                "family": f"{prefix}/family",
                "contracts": f"{prefix}/contracts",
            },
        }

    app.include_router(health.router)
    app.include_router(family.router, prefix=prefix)
    app.include_router(contracts.router, prefix=prefix)
    app.include_router(profile.router, prefix=prefix)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("carecenter.main:app", host=default_settings.server_host, port=default_settings.server_port)
