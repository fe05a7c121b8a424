"""Custom exceptions for the pool client"""


class BPoolError(Exception):
    """Base exception for all pool client errors"""
    pass


class ConfigError(BPoolError):
    """Configuration-related errors"""
    pass


class ConnectionError(BPoolError):
    """Web3 connection errors"""
    pass


class TransactionError(BPoolError):
    """Transaction execution errors"""
    pass


class AbiError(BPoolError):
    """ABI lookup errors (missing function or event)"""
    pass


class ConversionError(BPoolError):
    """Amount conversion errors (bad decimal string, wrong token count, etc.)"""
    pass


class NotMarketFeeCollectorError(BPoolError):
    """Caller is not the publish market fee collector of the pool"""

    def __init__(self, caller=None, collector=None):
        self.caller = caller
        self.collector = collector
        super().__init__("Caller is not MarketFeeCollector")
