from hedera_agent_core.shared.signer.server_signer import ServerSigner

__all__ = ["ServerSigner"]
