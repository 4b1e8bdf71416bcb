"""Blueprint registrations for application routes."""

from flask import Flask

from .admin import blueprint as admin_blueprint
from .exclusions import blueprint as exclusions_blueprint
from .localization import blueprint as translations_blueprint
from .translation import blueprint as translation_blueprint


def register_routes(app: Flask) -> None:
    """Register all Flask blueprints with the provided application."""

    app.register_blueprint(admin_blueprint)
    app.register_blueprint(exclusions_blueprint)
    app.register_blueprint(translation_blueprint)
    app.register_blueprint(translations_blueprint)
