import hashlib
import hmac
import uuid

import bcrypt

from app.config.environments import SECRET_KEY


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False


def new_session_token() -> str:
    return str(uuid.uuid4())


def digest_token(session_token: str) -> str:
    """Only the HMAC of a session token is stored, never the token itself."""
    return hmac.new(SECRET_KEY.encode("utf-8"), session_token.encode("utf-8"), hashlib.sha256).hexdigest()
