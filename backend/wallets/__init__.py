"""
Wallets app: wallet address records and the trade types query built on them.
"""
