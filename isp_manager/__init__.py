# isp_manager/__init__.py
import logging

from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager

from isp_manager.config import Config
from isp_manager.extension.extensions import db
from isp_manager.errors import register_error_handlers

jwt = JWTManager()  # global instance

def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    log_level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(level=log_level)
    app.logger.setLevel(log_level)

    # JWT config BEFORE blueprints
    jwt.init_app(app)

    # Extensions
    CORS(app)
    db.init_app(app)
    Migrate(app, db)

    # Import models and blueprints AFTER extensions are inited
    from isp_manager import models  # noqa: F401
    from .routes import api_service
    from isp_manager.controllers.package_controller import bp_packages
    from isp_manager.controllers.member_controller import bp_members
    from isp_manager.controllers.subscription_controller import bp_subs
    from isp_manager.controllers.transaction_controller import bp_transactions
    from isp_manager.commands import register_commands

    # Register blueprints
    app.register_blueprint(api_service, url_prefix="/api")
    app.register_blueprint(bp_packages)
    app.register_blueprint(bp_members)
    app.register_blueprint(bp_subs)
    app.register_blueprint(bp_transactions)

    register_error_handlers(app)
    register_commands(app)

    app.logger.info(f"ISP subscription manager ready ({app.config['SQLALCHEMY_DATABASE_URI'].split('://')[0]})")
    return app
