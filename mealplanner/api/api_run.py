import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mealplanner.api.routes import meals, planner
from mealplanner.utilities.exceptions import StorageError

# Logging
logger = logging.getLogger("mealplanner")

# Initialize FastAPI app
app = FastAPI(title="Meal Planner API")

# Include routers
app.include_router(meals.router)
app.include_router(planner.router)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content=exc.to_dict())


@app.get("/health")
def health():
    return {"status": "ok"}
