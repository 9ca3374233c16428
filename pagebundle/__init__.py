"""Single-page server that inlines head scripts and stylesheets."""

from flask import Flask
from .blueprint import create_blueprint


def create_app(config=None):
    app = Flask(__name__)
    app.register_blueprint(create_blueprint(config=config), url_prefix="/")
    return app
