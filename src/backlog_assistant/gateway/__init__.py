"""Forwarding gateway relaying API calls to the Backlog upstream mirrors."""

from .app import create_app, run_gateway
from .config import GatewayConfig
from .forwarder import ForwardAttempt, UpstreamForwarder

__all__ = [
    "ForwardAttempt",
    "GatewayConfig",
    "UpstreamForwarder",
    "create_app",
    "run_gateway",
]
