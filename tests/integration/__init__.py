"""
Integration tests that drive the token standard adapters through a real AsyncWeb3
request pipeline against an in-process JSON-RPC provider.
"""
