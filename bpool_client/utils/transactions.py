"""Transaction submission"""

from ..core.exceptions import TransactionError
from .gas import GasManager


class TransactionBuilder:
    """Build and send pool transactions with unified gas management"""

    def __init__(self, manager, gas_manager=None):
        """
        Args:
            manager: Web3Manager instance
            gas_manager: GasManager instance (created if None, loads from gas_config.json)
        """
        self.manager = manager
        self.gas_manager = gas_manager or GasManager(manager)

    def _uses_local_signer(self, from_address):
        account = self.manager.account
        return account is not None and account.address.lower() == from_address.lower()

    def build(self, contract_func, from_address, gas, value=0):
        """
        Build a transaction for a contract function.

        Args:
            contract_func: Contract function to call
            from_address: Sender address
            gas: Gas limit (already estimated)
            value: ETH value to send in wei (default 0)

        Returns:
            Transaction dictionary
        """
        tx = {
            "from": from_address,
            "gas": int(gas),
            "gasPrice": self.gas_manager.getFairGasPrice(),
        }

        if value > 0:
            tx["value"] = value

        if self._uses_local_signer(from_address):
            tx["nonce"] = self.manager.get_nonce(from_address)
            tx["chainId"] = self.manager.chain_id
            return contract_func.build_transaction(tx)
        return tx

    def build_and_send(self, contract_func, from_address, gas, value=0, wait=True):
        """
        Build and send a transaction.

        Signs locally when the manager holds the sender's key, otherwise
        relies on the node's unlocked account.

        Args:
            contract_func: Contract function to call
            from_address: Sender address
            gas: Gas limit
            value: ETH value to send in wei
            wait: Whether to wait for receipt

        Returns:
            Transaction receipt if wait=True, else tx_hash

        Raises:
            TransactionError: If the mined transaction reverted (status 0)
        """
        tx = self.build(contract_func, from_address, gas, value)

        if self._uses_local_signer(from_address):
            signed = self.manager.account.sign_transaction(tx)
            tx_hash = self.manager.w3.eth.send_raw_transaction(signed.raw_transaction)
        else:
            tx_hash = contract_func.transact(tx)

        if not wait:
            return tx_hash

        receipt = self.manager.w3.eth.wait_for_transaction_receipt(tx_hash)
        if receipt.get("status") == 0:
            raise TransactionError(f"Transaction {receipt.get('transactionHash', tx_hash)} reverted")
        return receipt
