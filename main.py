from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from config.settings import settings
from config.logging_config import setup_logging
from config.database import Database
from crud import operations
from routes import (
    graphql_routes,
    salon_routes,
    staff_routes,
    user_routes,
    booking_routes
)
import uvicorn
import logging

setup_logging(settings.log_level, settings.log_file or None)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.project_name)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include all routers
app.include_router(graphql_routes.router)
app.include_router(salon_routes.router, prefix="/api")
app.include_router(staff_routes.router, prefix="/api")
app.include_router(user_routes.router, prefix="/api")
app.include_router(booking_routes.router, prefix="/api")


@app.on_event("startup")
async def startup_db_client():
    try:
        if Database.data_file is None:
            Database.connect_db()
    except Exception as e:
        logger.error(f"Error during startup: {str(e)}")
        raise

    logger.info("Available queries: " + ", ".join(operations.QUERIES))
    logger.info("Available mutations: " + ", ".join(operations.MUTATIONS))


@app.on_event("shutdown")
async def shutdown_db_client():
    Database.close_db()


@app.get("/")
def read_root():
    return {
        "message": "Welcome to Salon Booking API",
        "endpoint": "/graphql",
        "operations": operations.operation_names()
    }


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
