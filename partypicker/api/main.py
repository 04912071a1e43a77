from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from partypicker import __version__
from partypicker.utils.observability import initialize_observability, Logger
from partypicker.api.routes import router as api_router
import os

# Initialize Observability
ENVIRONMENT = os.getenv('ENVIRONMENT', 'development')
initialize_observability(environment=ENVIRONMENT)

logger = Logger(__name__)

def create_app() -> FastAPI:
    app = FastAPI(
        title="Party Picker API",
        description="Tournament brackets and spinner wheel picks for game nights.",
        version=__version__
    )

    # Browser front end is served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    def root():
        return {"message": "Party Picker API. Go to /docs for Swagger UI.", "version": __version__}

    logger.log_event("api_startup_complete", environment=ENVIRONMENT)

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("partypicker.api.main:app", host="0.0.0.0", port=8000, reload=True)
