"""Match-v4 proxy feature: gateway, dependencies and router."""

from .gateway import MatchGateway
from .router import router

__all__ = ["MatchGateway", "router"]
