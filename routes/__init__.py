from .health import health_bp
from .public import public_bp
from .rooms import rooms_bp
from .auth import auth_bp
from .admin import admin_bp
