"""Domain ports: protocols implemented outside the domain."""

from class2greylist.domain.ports.consumer import GreylistConsumerProtocol

__all__ = ["GreylistConsumerProtocol"]
