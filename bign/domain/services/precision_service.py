from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Optional

from bign.domain.exceptions import InvalidArgumentError
from bign.domain.values.rounding import RoundingMode, RoundingPolicy
from bign.shared.logging import get_logger

if TYPE_CHECKING:
    from bign.domain.values.fixed_point import FixedPointNumber

logger = get_logger(__name__)

DEFAULT_PRECISION = 80


@dataclass(frozen=True)
class PrecisionPolicy:
    """Policy defining internal precision and rounding for fixed-point numbers."""

    default_precision: int = DEFAULT_PRECISION
    rounding: RoundingPolicy = field(default_factory=RoundingPolicy)

    def __post_init__(self):
        if self.default_precision < 0:
            raise InvalidArgumentError(
                f"default precision cannot be negative: {self.default_precision}"
            )

    @classmethod
    def from_settings(cls, default_precision: int, rounding_mode: str) -> "PrecisionPolicy":
        return cls(
            default_precision=default_precision,
            rounding=RoundingPolicy(RoundingMode(rounding_mode)),
        )


_active_policy: ContextVar[Optional[PrecisionPolicy]] = ContextVar(
    "bign_precision_policy", default=None
)


def default_policy() -> PrecisionPolicy:
    """Build the policy described by the environment settings."""
    from bign.shared.config import get_settings

    settings = get_settings()

    return PrecisionPolicy.from_settings(
        settings.DEFAULT_PRECISION, settings.DEFAULT_ROUNDING_MODE
    )


def get_policy() -> PrecisionPolicy:
    """
    Return the policy active in the current context.

    The first read in a context without an explicit policy falls back to the
    settings default.
    """
    policy = _active_policy.get()

    if policy is None:
        policy = default_policy()
        _active_policy.set(policy)

    return policy


def set_policy(policy: PrecisionPolicy) -> Token:
    """
    Make ``policy`` active for every later construction and narrowing in the
    current context. Numbers that already exist keep their precision.

    :return: Token accepted by reset_policy()
    """
    token = _active_policy.set(policy)

    logger.debug(
        "precision_policy_set",
        default_precision=policy.default_precision,
        rounding_mode=policy.rounding.mode.value,
    )

    return token


def reset_policy(token: Optional[Token] = None) -> None:
    """Restore the policy that was active before ``token``, or the settings default."""
    if token is not None:
        _active_policy.reset(token)
    else:
        _active_policy.set(None)

    logger.debug("precision_policy_reset", restored_from_token=token is not None)


@contextmanager
def policy_scope(policy: PrecisionPolicy) -> Iterator[PrecisionPolicy]:
    token = set_policy(policy)
    try:
        yield policy
    finally:
        reset_policy(token)


class PrecisionService:
    """
    Domain service for rescaling fixed-point numbers under one policy.
    """

    def __init__(self, policy: PrecisionPolicy = None):
        self._policy = policy or PrecisionPolicy()

    @property
    def policy(self) -> PrecisionPolicy:
        return self._policy

    def normalize(self, number: "FixedPointNumber", digits: int) -> "FixedPointNumber":
        """
        Rescale a number to the given fractional digits.

        :param number: Number to rescale
        :param digits: Target precision
        :return: New number at ``digits`` precision, rounded by the policy
        """
        return number.rescale(digits, rounding=self._policy.rounding)

    def validate_precision(self, number: "FixedPointNumber", digits: int) -> bool:
        """
        Check if number is representable with ``digits`` fractional digits.

        :param number: Number to check
        :param digits: Expected fractional digits

        :return: bool(does precision match our expectations?)
        """
        return number.eq(self.normalize(number, digits))
