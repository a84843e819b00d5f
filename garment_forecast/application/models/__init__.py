"""Application-level models shared across use cases."""

from .service_info import ServiceInfo

__all__ = ["ServiceInfo"]
