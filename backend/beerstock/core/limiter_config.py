from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from beerstock.core.config import get_limiter_storage_uri

# Global Limiter instance imported by controllers.
# create_app() binds it to the app and applies RATE_LIMIT_ENABLED.
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["200 per hour", "50 per minute"],
    storage_uri=get_limiter_storage_uri(),
)
