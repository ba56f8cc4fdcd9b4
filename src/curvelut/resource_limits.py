"""Resource limits for curve inputs.

Curve files and key point lists are tiny in practice; these limits reject
oversized or malicious inputs before any parsing or spline work happens.
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILE_SIZE = 65536
DEFAULT_MAX_POINTS = 0


@dataclass
class ResourceLimits:
    """Limits applied while building curves.

    Limits can be configured via environment variables or constructor parameters.
    Constructor parameters take precedence over environment variables.

    Environment variables:
        CURVELUT_MAX_FILE_SIZE: Maximum curve file size in bytes (default: 65536)
        CURVELUT_MAX_POINTS: Maximum number of key points per curve (default: 0, no limit)

    Example:
        >>> limits = ResourceLimits.default()
        >>> limits = ResourceLimits(max_file_size=1024, max_points=16)
        >>> limits = ResourceLimits(max_points=0)  # No key point limit
    """

    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_points: int = DEFAULT_MAX_POINTS

    @classmethod
    def default(cls) -> "ResourceLimits":
        """Create ResourceLimits from environment variables.

        Returns:
            ResourceLimits instance with values from environment variables,
            falling back to hardcoded defaults if not set.

        Raises:
            ValueError: If environment variable contains invalid integer value.

        Note:
            Negative values are treated as 0 (disabled limit) with a warning logged.
        """

        def parse_env_int(key: str, default: int) -> int:
            value_str = os.environ.get(key)
            if value_str is None:
                return default

            try:
                value = int(value_str)
            except ValueError as e:
                raise ValueError(
                    f"Environment variable {key}={value_str!r} is not a valid integer"
                ) from e

            if value < 0:
                logger.warning(
                    f"Environment variable {key}={value} is negative, "
                    f"treating as 0 (disabled limit). "
                    f"Consider using ResourceLimits.unlimited() instead."
                )
                return 0

            return value

        return cls(
            max_file_size=parse_env_int("CURVELUT_MAX_FILE_SIZE", DEFAULT_MAX_FILE_SIZE),
            max_points=parse_env_int("CURVELUT_MAX_POINTS", DEFAULT_MAX_POINTS),
        )

    @classmethod
    def unlimited(cls) -> "ResourceLimits":
        """Create ResourceLimits with all limits disabled.

        Warning:
            Only use this for trusted input files in controlled environments.
        """
        return cls(max_file_size=0, max_points=0)

    def is_file_size_limited(self) -> bool:
        """Check if file size limit is enabled."""
        return self.max_file_size > 0

    def is_points_limited(self) -> bool:
        """Check if key point limit is enabled."""
        return self.max_points > 0
