import bcrypt
from flask import current_app


def _to_bcrypt_secret(password):
    """
    bcrypt only uses the first 72 BYTES of the password.
    Truncate explicitly so long passwords don't raise.
    """
    pw = password.encode("utf-8")
    if len(pw) > 72:
        pw = pw[:72]
    return pw


def hash_password(password):
    """Return a bcrypt hash as a UTF-8 string, ready for the members table"""
    rounds = current_app.config.get("BCRYPT_ROUNDS", 12)
    hashed = bcrypt.hashpw(_to_bcrypt_secret(password), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password, password_hash):
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_to_bcrypt_secret(password), password_hash.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False
