import logging
import os
from typing import Optional

from flask import Flask

from beerstock.core.config import (
    get_log_level,
    get_log_to_file,
    get_rate_limit_enabled,
    is_production,
    is_testing,
    load_environment,
    log_config,
)


def create_app(config: Optional[dict] = None) -> Flask:
    """Build the Flask application.

    ``config`` entries are applied on top of the environment-derived
    settings, which lets tests toggle TESTING or RATELIMIT_ENABLED.
    """
    load_environment()

    app = Flask(__name__)

    if is_testing():
        app.config["TESTING"] = True
    app.config["RATELIMIT_ENABLED"] = get_rate_limit_enabled()
    if config:
        app.config.update(config)

    # Configure structured logging (after app creation so we can register hooks)
    from beerstock.core.logging_config import setup_logging

    production = is_production()
    setup_logging(
        app=app,
        log_level=get_log_level(),
        enable_sql_echo=not production,
        log_to_file=get_log_to_file(),
        use_json_format=production,
    )
    log_config()

    # Bind the global limiter; RATELIMIT_ENABLED decides whether limits apply
    from beerstock.core.limiter_config import limiter

    limiter.init_app(app)

    from beerstock.core.api_utils import register_error_handlers

    register_error_handlers(app)

    from beerstock.controllers.beer_controller import beer_bp
    from beerstock.controllers.health_controller import health_bp

    app.register_blueprint(beer_bp)
    app.register_blueprint(health_bp)

    logging.getLogger(__name__).info(
        "Application created",
        extra={
            "context": {
                "pid": os.getpid(),
                "blueprints": sorted(app.blueprints),
                "testing": app.config.get("TESTING", False),
            }
        },
    )
    return app
