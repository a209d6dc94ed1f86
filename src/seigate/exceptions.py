"""Error taxonomy shared by the services and both front ends."""


class GatewayError(Exception):
    """Base for every error the gateway raises on purpose."""

    status_code = 500


class InvalidAddressError(GatewayError):
    status_code = 400


class InvalidKeyError(GatewayError):
    status_code = 400


class UnsupportedNetworkError(GatewayError):
    status_code = 400


class ValidationError(GatewayError):
    """Malformed request parameters (amounts, ABIs, token ids, tool arguments)."""

    status_code = 400


class NodeCommunicationError(GatewayError):
    """Any failure reported by, or while talking to, the chain node."""

    status_code = 502


class EndpointUnavailableError(NodeCommunicationError):
    """Transport-level failure: the endpoint could not be reached or timed out."""


class ChainDataNotFoundError(NodeCommunicationError):
    status_code = 404


class ExternalServiceError(GatewayError):
    """Non-chain upstream failure (market data provider)."""

    status_code = 502


class SessionNotFoundError(GatewayError):
    """A tool-protocol message named a session that is not open."""

    status_code = 404
