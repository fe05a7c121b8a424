"""Shared call path for pool operations: bind, convert, estimate, send, log"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from ..core.exceptions import ConversionError
from ..utils.gas import GasManager
from ..utils.transactions import TransactionBuilder

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Where a failed pool interaction broke down"""

    CALL = "call"                # read call, or a lookup needed to prepare a transaction
    CONVERSION = "conversion"    # human amount could not be turned into base units
    TRANSACTION = "transaction"  # sending or mining the transaction


@dataclass(frozen=True)
class CallResult:
    """
    Outcome of one pool interaction.

    `value` may legitimately be falsy (False, "0", []); check `ok` to tell
    a falsy on-chain value from a failed call.
    """

    value: Any = None
    error: Optional[BaseException] = None
    kind: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value) -> "CallResult":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, error: BaseException) -> "CallResult":
        return cls(error=error, kind=kind)

    def unwrap(self):
        """Value on success, re-raise the original error on failure"""
        if self.error is not None:
            raise self.error
        return self.value


class CallExecutor:
    """
    Runs pool reads and transactions under one failure policy.

    Failures are logged and turned into a failed CallResult. Public callers
    get either the CallResult (return_results=True) or its value, which is
    None on failure.
    """

    def __init__(self, manager, gas_manager=None, tx_builder=None, return_results=False):
        """
        Args:
            manager: Web3Manager instance
            gas_manager: GasManager instance (created if None)
            tx_builder: TransactionBuilder instance (created if None)
            return_results: Return CallResult objects instead of bare values
        """
        self.manager = manager
        self.gas_manager = gas_manager or GasManager(manager)
        self.tx_builder = tx_builder or TransactionBuilder(manager, self.gas_manager)
        self.return_results = return_results

    def finish(self, result: CallResult):
        return result if self.return_results else result.value

    def run_read(self, description: str, fetch: Callable[[], Any]) -> CallResult:
        """Run `fetch`, capturing and logging any failure"""
        try:
            return CallResult.success(fetch())
        except ConversionError as e:
            logger.error("ERROR: Failed to %s: %s", description, e)
            return CallResult.failure(ErrorKind.CONVERSION, e)
        except Exception as e:
            logger.error("ERROR: Failed to %s: %s", description, e)
            return CallResult.failure(ErrorKind.CALL, e)

    def read(self, description: str, fetch: Callable[[], Any]):
        return self.finish(self.run_read(description, fetch))

    def estimate(self, build: Callable[[], Any], from_address, operation_type) -> int:
        """
        Gas estimate for the contract function returned by `build`.

        Never raises: a failure to build the call or to estimate it yields
        the fallback gas limit.
        """
        try:
            contract_func = build()
        except Exception as e:
            fallback = self.gas_manager.getGasLimit(operation_type)
            logger.debug("Could not prepare %s for estimation, using %d: %s", operation_type, fallback, e)
            return fallback
        return self.gas_manager.estimateGas(contract_func, from_address, operation_type)

    def run_transaction(self, description: str, build: Callable[[], Any], from_address,
                        operation_type) -> CallResult:
        """
        Build the contract call, estimate gas (with fallback) and send it.

        Args:
            description: Human description for log lines
            build: Returns the bound contract function, converting amounts
            from_address: Sender
            operation_type: Contract method name, used for fallback gas lookup
        """
        try:
            contract_func = build()
        except ConversionError as e:
            logger.error("ERROR: Failed to %s: %s", description, e)
            return CallResult.failure(ErrorKind.CONVERSION, e)
        except Exception as e:
            logger.error("ERROR: Failed to %s: %s", description, e)
            return CallResult.failure(ErrorKind.CALL, e)

        gas = self.gas_manager.estimateGas(contract_func, from_address, operation_type)

        try:
            receipt = self.tx_builder.build_and_send(contract_func, from_address, gas)
        except Exception as e:
            logger.error("ERROR: Failed to %s: %s", description, e)
            return CallResult.failure(ErrorKind.TRANSACTION, e)
        return CallResult.success(receipt)

    def transact(self, description: str, build: Callable[[], Any], from_address, operation_type):
        return self.finish(self.run_transaction(description, build, from_address, operation_type))
