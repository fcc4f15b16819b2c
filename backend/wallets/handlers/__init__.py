"""
Database access handlers for wallet address records.
"""
