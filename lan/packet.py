"""
LAN Packet

A unit of information sent around the token ring. One packet is created per
request and is never modified afterwards.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Packet:
    """Packet travelling the ring from origin towards destination"""

    payload: str
    origin: str
    destination: str

    # Constants
    BROADCAST_PAYLOAD = "BROADCAST"

    @classmethod
    def create(cls, payload: str, origin: str, destination: str) -> 'Packet':
        """Factory method for a point-to-point packet"""
        return cls(payload=payload, origin=origin, destination=destination)

    @classmethod
    def broadcast(cls, destination: str) -> 'Packet':
        """Factory method for a broadcast packet; it has no origin and returns to #destination"""
        return cls(payload=cls.BROADCAST_PAYLOAD, origin="", destination=destination)

    @property
    def is_broadcast(self) -> bool:
        return self.origin == ""

    def has_reached(self, name: str) -> bool:
        return self.destination == name

    def is_back_at_origin(self, name: str) -> bool:
        return self.origin == name

    def __str__(self) -> str:
        """String representation for logging"""
        return (f"Packet(origin={self.origin or '-'}, dst={self.destination}, "
                f"payload={len(self.payload)} chars)")
