"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceInfo:
    """Subset of configuration required by the health use case."""

    title: str
    description: str
    version: str
    environment: str
