import hashlib

import bcrypt


def hash_password(password: str) -> str:
    # SHA-256 first so passwords longer than bcrypt's 72 byte limit still count in full
    password_hash = hashlib.sha256(password.encode('utf-8')).digest()

    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password_hash, salt)

    return hashed.decode('utf-8')
