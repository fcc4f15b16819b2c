"""
Global constants for wallet address functionality.
"""

# Logging
GET_TRADE_TYPES = "GET_TRADE_TYPES"

# Response envelope
RESPONSE_MESSAGE_SUCCESS = "success"
RESPONSE_MESSAGE_ERROR = "error"

# Field lengths
TRADE_TYPE_MAX_LENGTH = 32
ADDRESS_MAX_LENGTH = 128
REMARK_MAX_LENGTH = 255
