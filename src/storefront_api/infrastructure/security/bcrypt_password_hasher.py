import bcrypt

from storefront_api.core.application.ports import PasswordHasherPort

# bcrypt ignores everything past 72 bytes and newer releases refuse longer input
MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(PasswordHasherPort):
    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        secret = password.encode("utf-8")[:MAX_PASSWORD_BYTES]
        return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        secret = password.encode("utf-8")[:MAX_PASSWORD_BYTES]
        try:
            return bcrypt.checkpw(secret, password_hash.encode("utf-8"))
        except ValueError:
            # malformed stored hash
            return False
