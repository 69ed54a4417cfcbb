import logging

from flask import Flask
from flask.logging import default_handler

from .extensions import db, migrate


def configure_logging(app):
    logger = logging.getLogger(__name__)
    logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    if default_handler not in logger.handlers:
        logger.addHandler(default_handler)


def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app)
    db.init_app(app)
    migrate.init_app(app, db)

    from . import models

    from .commands import register_commands
    register_commands(app)

    return app
