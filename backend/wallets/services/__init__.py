"""
Service layer for wallet address operations.
"""
