"""
Error taxonomy for PhiloTrans actions
"""


class PhiloTransError(Exception):
    """Base class for all PhiloTrans errors"""


class InputRejectedError(PhiloTransError, ValueError):
    """Request has nothing to send; the network must not be called"""


class UnsupportedInputError(PhiloTransError, ValueError):
    """Uploaded file has an unrecognized type or could not be read"""


class AuthorizationError(PhiloTransError):
    """No valid API key after the key-selection flow"""


class NoImageProducedError(PhiloTransError):
    """Image model replied without any inline image data"""


class UpstreamError(PhiloTransError):
    """The model call itself failed (network, quota, timeout, bad payload)"""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause
