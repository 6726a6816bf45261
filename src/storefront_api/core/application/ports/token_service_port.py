from abc import ABC, abstractmethod

from storefront_api.core.domain.identity import AuthClaims, User


class TokenServicePort(ABC):
    @abstractmethod
    def issue(self, user: User) -> str:
        pass

    @abstractmethod
    def decode(self, token: str) -> AuthClaims:
        """Raises AuthenticationError for malformed, tampered or expired tokens."""
        pass
