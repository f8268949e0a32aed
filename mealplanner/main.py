import logging

import uvicorn

from mealplanner.api.api_run import app
from mealplanner.utilities.config import APP_HOST, APP_PORT, DEBUG, LOG_FORMAT, LOG_LEVEL
from mealplanner.infra.paths import DATA_DIR


if __name__ == "__main__":
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format=LOG_FORMAT)
    print(f"Uvicorn running on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    print(f"Storing data in {DATA_DIR}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level="debug" if DEBUG else LOG_LEVEL.lower())
