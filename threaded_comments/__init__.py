# threaded_comments/__init__.py

# =====================================================================================
# 1. Environment variables (loaded before anything reads them)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. Module imports
# =====================================================================================
import os
import logging
from typing import Optional
from flask import Flask
from flask_cors import CORS

# - Settings
from threaded_comments.core.config import config_by_name
from threaded_comments.core.errors import register_error_handlers
from threaded_comments.core.security import init_jwt

# - API blueprints
from threaded_comments.api.auth.routes import auth_bp
from threaded_comments.api.comments.routes import comments_bp
from threaded_comments.api.health.routes import health_bp

# - Services
from threaded_comments.api.auth.services import AuthService
from threaded_comments.api.comments.services import CommentService
from threaded_comments.services.comment_store import CommentStore
from threaded_comments.services.demo_data import DEMO_USER, demo_comments


def create_app(config_name: Optional[str] = None):
    """
    Flask application factory.
    Every call builds its own comment store and auth service, so each app
    (and each test) starts from fresh state.
    """
    # =====================================================================================
    # 3. Flask app and base settings
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    origins = app.config['CORS_ORIGINS']
    CORS(app, origins='*' if origins == '*' else [o.strip() for o in origins.split(',') if o.strip()])

    # =====================================================================================
    # 4. Service instances stored on 'app.services' (dependency injection)
    # =====================================================================================
    app.services = {}

    seed = app.config['SEED_DEMO_DATA']
    store = CommentStore(demo_comments() if seed else ())
    app.services['comment_store'] = store
    app.services['comments'] = CommentService(
        store,
        default_author=app.config['DEFAULT_AUTHOR'],
        anonymous_user_id=app.config['ANONYMOUS_USER_ID']
    )

    auth_service = AuthService()
    if seed:
        auth_service.add_user(DEMO_USER['username'], DEMO_USER['password'], user_id=DEMO_USER['user_id'])
    app.services['auth'] = auth_service

    init_jwt(app, auth_service)

    # =====================================================================================
    # 5. Blueprints
    # =====================================================================================
    app.register_blueprint(comments_bp, url_prefix='/comments')
    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(health_bp)

    # =====================================================================================
    # 6. Global error handlers
    # =====================================================================================
    register_error_handlers(app)

    # =====================================================================================
    # 7. Logging
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment ({len(store)} comments loaded).")

    return app
