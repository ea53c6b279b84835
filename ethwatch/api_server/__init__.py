"""
API server package: HTTP/REST interface.

Lets clients subscribe Ethereum addresses and poll for their recent
transactions. Delegates to the EthereumParser context object.
"""
