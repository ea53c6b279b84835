"""
ethwatch: Ethereum address subscription and transaction polling service.

Clients subscribe addresses over HTTP and poll for transactions touching them
in the most recent blocks of an upstream Ethereum JSON-RPC node.
"""

__version__ = "0.1.0"
