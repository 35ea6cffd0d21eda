"""Custom exception classes for launchpad-deployments library."""


class DeployError(Exception):
    """Base exception for deployment-related errors."""

    pass


class ConfigurationError(DeployError, ValueError):
    """Raised when network or credential configuration is malformed."""

    pass


class AuthenticationError(ConfigurationError):
    """Raised when no usable signing credential is configured."""

    pass


class NetworkNotFoundError(ConfigurationError):
    """Raised when the requested network is not configured."""

    pass


class ArtifactNotFoundError(DeployError, FileNotFoundError):
    """Raised when no deployable artifact exists for a contract name."""

    pass


class NetworkError(DeployError, ConnectionError):
    """Raised when the RPC endpoint is unreachable or answers with an error."""

    pass


class TransactionRevertedError(DeployError, RuntimeError):
    """Raised when the deployment transaction is rejected on chain."""

    pass
