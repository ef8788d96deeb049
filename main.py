import logging

import gradio as gr
import uvicorn
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from core.config import HOST, LOG_LEVEL, PORT, REGISTER_PATH
from core.log import configure_logging
from ui.register import create_register_page

logger = logging.getLogger(__name__)


def create_app():
    configure_logging(LOG_LEVEL)
    app = FastAPI()

    @app.get("/")
    async def root():
        return RedirectResponse(url=REGISTER_PATH, status_code=307)

    @app.get("/health")
    async def health():
        return {"ok": True}

    # --------------------------
    # Mount the register page
    # --------------------------
    app = gr.mount_gradio_app(app, create_register_page(), path=REGISTER_PATH)
    logger.info("Register page mounted at %s", REGISTER_PATH)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
