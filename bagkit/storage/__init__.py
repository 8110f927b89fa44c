from bagkit.storage.array_bag import DEFAULT_CAPACITY, MAX_CAPACITY, ArrayBag
from bagkit.storage.chain_bag import ChainBag

__all__ = ["ArrayBag", "ChainBag", "DEFAULT_CAPACITY", "MAX_CAPACITY"]
