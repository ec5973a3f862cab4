"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing is CPU and memory bound, so the async helpers run it in a thread
pool to keep the event loop responsive.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from bloglist.configs import CONFIG_MAP, settings
from bloglist.decorators.with_retry import with_retry
from bloglist.errors import PasswordHashingError
from bloglist.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    Password hashing and verification using the Argon2id algorithm.

    pbkdf2_sha256 stays accepted as a deprecated scheme so that older hashes
    still verify.
    """

    def __init__(self, level: str | None = None) -> None:
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        cost = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=cost.memory_cost,
            argon2__time_cost=cost.time_cost,
            argon2__parallelism=cost.parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.hash("salainen")  # $argon2id$v=19$m=65536,t=3,p=4$...
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Error hashing password")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str | None) -> bool:
        """
        Verify a plaintext password against a hashed password.

        A missing hash still runs a dummy verification so that unknown
        users take as long as wrong passwords.

        Example:
            >>> hasher = PasswordHasher()
            >>> hashed = hasher.hash("salainen")
            >>> hasher.verify("salainen", hashed)
            True
            >>> hasher.verify("wrong", hashed)
            False
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            self.pwd_context.dummy_verify()
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """
    Get or create the default password hasher instance.

    Returns:
        PasswordHasher: The shared password hasher instance
    """
    global _default_hasher  # noqa: PLW0603
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


@with_retry(base_delay=1, max_delay=10, exec_retry=PasswordHashingError)
async def hash_password(password: str) -> str:
    """Hash a password off the event loop with the default hasher."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str | None) -> bool:
    """Verify a password off the event loop with the default hasher."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )
