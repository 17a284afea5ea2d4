"""
FastAPI Application Entry Point.

REST API server for Product Registry Service.
"""
import os

import uvicorn
from dotenv import load_dotenv

from config.settings import Settings
from internal.transport.http.app import create_app
from pkg.logger.logger import setup_logging


# Load environment variables
load_dotenv()

settings = Settings()

# Setup logging
setup_logging(
    level=settings.LOG_LEVEL,
    json_format=settings.json_logs,
    service=settings.APP_NAME,
)

app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        app_dir=os.path.dirname(os.path.abspath(__file__)),
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        workers=settings.WORKERS,
    )
