from ethevent.clients.rpc import RPC, build_response

__all__ = ["RPC", "build_response"]
