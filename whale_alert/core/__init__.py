# Core module - Error taxonomy shared by the client and the model decoders

from .errors import NetworkingError, NetworkingErrorKind, DecodeError

__all__ = ["NetworkingError", "NetworkingErrorKind", "DecodeError"]
