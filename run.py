#!/usr/bin/env python3
"""
Entry point for the Matchroom service.

Usage:
    python run.py

Environment Variables:
    FLASK_ENV: development, production or testing (default: development)
    PORT: Port to run on (default: 5000)
    LOG_LEVEL: Root log level (default: DEBUG in development, else INFO)
    ALLOW_TRIPLE: Allow a trailing group of three (default: true)
    PAIRING_SEED: Seed for reproducible pairings (default: unset)
"""
import logging
import os

from matchroom.app import create_app


def run_matchroom():
    """Run the matchmaking service."""
    app = create_app()
    port = int(os.getenv('PORT', 5000))

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    print(f"Starting Matchroom on port {port}...")
    app.run(host='0.0.0.0', port=port, debug=app.config['DEBUG'])


if __name__ == '__main__':
    run_matchroom()
