"""
Relay service clients for the RelayKit SDK.
"""
from .transport import RelayRequest, RelayTransport
from .http_transport import HttpRelayTransport
from .stub_transport import StubTransport

__all__ = ['RelayRequest', 'RelayTransport', 'HttpRelayTransport', 'StubTransport']
