"""
Entry point for the AdoptMe Backend
"""

import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from adoptme.app import create_app
from adoptme.config.settings import load_settings

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = load_settings()
app = create_app(settings)

if __name__ == "__main__":
    if settings.auto_listen:
        import uvicorn
        logger.info(f"Servidor escuchando en el puerto {settings.port}")
        uvicorn.run(app, host="0.0.0.0", port=settings.port)
    else:
        logger.info("AUTO_LISTEN disabled - serve main:app with an external ASGI server")
