import logging
import random

from flask import Flask

from .config import Config


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stream handler to the package logger (safe to call twice)."""
    numeric = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger("game_suggester")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(numeric)
    return logger


def create_app(config: Config | None = None, random_source=None):
    app = Flask(__name__)

    config = config or Config.from_env()
    setup_logging(config.log_level)

    # Missing credentials are reported per request, not at startup
    app.extensions["game_suggester"] = {
        "config": config,
        "random_source": random_source or random.random,
    }

    from .routes import api
    app.register_blueprint(api)

    return app
