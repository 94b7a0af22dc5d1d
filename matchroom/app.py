import logging
import os
import random

from flask import Flask, jsonify

from .config import config

logger = logging.getLogger(__name__)


def create_app(config_name: str = None) -> Flask:
    """Application factory for the matchmaking service."""
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')
    if config_name not in config:
        config_name = 'default'

    app = Flask(__name__)
    app.config.from_object(config[config_name])

    # Seeded source makes a whole run of pairings reproducible
    seed = app.config['PAIRING_SEED']
    app.rng = random.Random(seed) if seed is not None else random
    app.config_name = config_name

    register_routes(app)

    from .routes import pairings
    app.register_blueprint(pairings.bp)

    logger.info(f"Matchroom app created with '{config_name}' config")
    return app


def register_routes(app: Flask):
    """Register service routes."""

    @app.route('/health')
    def health_check():
        """Health check endpoint."""
        return jsonify({
            'status': 'healthy',
            'env': app.config_name
        })
