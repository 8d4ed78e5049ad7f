from typing import Any, Dict, List, Optional, Tuple

from web3 import AsyncWeb3
from web3.contract import AsyncContract

from utils.formatter_utils import to_normalized_address
from utils.logger_utils import get_logger

logger = get_logger("Contract Handle")


class ContractHandle:
    """
    A deployed contract bound to its address and ABI.
    Calls are read-only `eth_call`s; encoding and decoding never touch the network.
    """

    def __init__(self, w3: AsyncWeb3, address: str, abi: List[Dict[str, Any]], name: str = "contract"):
        self.name = name
        self.address = to_normalized_address(address)
        self.contract: AsyncContract = w3.eth.contract(address=self.address, abi=abi)

    async def call(self, fn_name: str, *args: Any) -> Any:
        logger.debug(f"eth_call {self.name}.{fn_name}{args}")
        return await getattr(self.contract.functions, fn_name)(*args).call()

    def encode(self, fn_name: str, *args: Any) -> str:
        """Returns the 0x-prefixed calldata for `fn_name(*args)`."""
        return self.contract.encode_abi(fn_name, args=list(args))

    def decode(self, data: str) -> Tuple[str, Dict[str, Any]]:
        """Inverse of encode: returns the function name and its named arguments."""
        fn, params = self.contract.decode_function_input(data)
        return fn.fn_name, params

    async def get_past_events(
        self,
        event_name: str,
        from_block: Any = 0,
        to_block: Any = "latest",
        argument_filters: Optional[Dict[str, Any]] = None,
    ) -> List[Any]:
        logger.debug(f"eth_getLogs {self.name}.{event_name} [{from_block}, {to_block}]")
        event = getattr(self.contract.events, event_name)()
        return await event.get_logs(
            argument_filters=argument_filters,
            from_block=from_block,
            to_block=to_block,
        )

    def __repr__(self) -> str:
        return f"ContractHandle(name={self.name!r}, address={self.address!r})"
