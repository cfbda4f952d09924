
import os
import logging
import azure.functions as func

from src.function_blueprints.http_generate_creative import bp as generate_creative_bp
from src.function_blueprints.http_video_status import bp as video_status_bp

app = func.FunctionApp()


def _configure_logging() -> None:
    lvl = (os.getenv("AZURE_SDK_LOG_LEVEL") or "").upper()
    if lvl:
        level = getattr(logging, lvl, logging.INFO)
        logging.getLogger("azure").setLevel(level)
    app_lvl = (os.getenv("CREATIVE_LOG_LEVEL") or "INFO").upper()
    logging.getLogger("creative").setLevel(getattr(logging, app_lvl, logging.INFO))


_configure_logging()

app.register_functions(generate_creative_bp)
app.register_functions(video_status_bp)
