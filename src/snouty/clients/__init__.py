# src/snouty/clients/__init__.py
"""Clients for external services.

Example:
    from snouty.clients import AntithesisClient
    from snouty.core.config import load_settings

    client = AntithesisClient(load_settings())
    body = client.launch("basic_test", params)
"""

from snouty.clients.http import DEBUGGING_ENDPOINT, AntithesisClient

__all__ = [
    "DEBUGGING_ENDPOINT",
    "AntithesisClient",
]
