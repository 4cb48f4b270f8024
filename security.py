from werkzeug.security import generate_password_hash, check_password_hash

# Hash único pbkdf2:sha256 (Werkzeug), sin fallback a otros formatos.

def hash_password(plain: str) -> str:
    """Return a salted secure hash for storage."""
    return generate_password_hash(plain, method="pbkdf2:sha256", salt_length=16)

def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time verify of a plain password against its hash."""
    if not hashed:
        return False
    return check_password_hash(hashed, plain)
