"""
Purpose: Flask server answering pathing queries for the AI layer.
Dependencies: flask, server/routes/level.py, core/log.py.
Ext Hooks: Add more routes.
Client/Server: Server for logic; clients send the level with each query.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flask import Flask

from core.log import setup_logging
from server.routes.level import bp


def create_app():
    app = Flask(__name__)
    app.register_blueprint(bp)
    return app


app = create_app()

if __name__ == "__main__":
    setup_logging()
    app.run(debug=True)
