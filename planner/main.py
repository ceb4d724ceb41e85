import logging

import uvicorn
from planner.api.api_run import app
from planner.utilities.config import APP_HOST, APP_PORT, DEBUG


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on http://{APP_HOST}:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
