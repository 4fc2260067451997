"""Password Hasher Interface

Defines the contract for hashing and verifying login passwords.
"""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """
    Abstract password hasher

    Implementations must salt every hash and compare in constant time.
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        """
        Hash a plain-text password

        Args:
            password: Plain-text password

        Returns:
            Encoded hash, safe to persist
        """
        pass

    @abstractmethod
    def verify(self, password: str, encoded: str) -> bool:
        """
        Check a plain-text password against a stored hash

        Returns:
            True if the password matches, False otherwise (including malformed hashes)
        """
        pass
