"""
FastAPI Application Entry Point

Run: uvicorn main:app --reload --host 0.0.0.0 --port 8080
"""

import logging

from api import create_app
from infra import get_config

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

config = get_config()
app = create_app(config)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=config.port,
        reload=config.environment == "development",
    )
