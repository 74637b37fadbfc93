"""
Relay packs: one per relay provider.
"""
from .base import RelayPack
from .gelato import GelatoRelayPack

__all__ = ['RelayPack', 'GelatoRelayPack']
