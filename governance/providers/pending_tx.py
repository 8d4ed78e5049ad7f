from typing import Union

from hexbytes import HexBytes
from web3 import AsyncWeb3
from web3.types import TxReceipt

from utils.formatter_utils import to_hex_data

DEFAULT_RECEIPT_TIMEOUT = 120


class PendingTx:
    """
    Acknowledgment of a submitted transaction.
    Holding one says nothing about mining; call `wait_for_receipt` to find out.
    """

    def __init__(self, w3: AsyncWeb3, tx_hash: Union[HexBytes, bytes, str]):
        self._w3 = w3
        self.transaction_hash = to_hex_data(tx_hash)

    async def wait_for_receipt(self, timeout: float = DEFAULT_RECEIPT_TIMEOUT) -> TxReceipt:
        return await self._w3.eth.wait_for_transaction_receipt(self.transaction_hash, timeout=timeout)

    def __repr__(self) -> str:
        return f"PendingTx({self.transaction_hash})"
