from bagkit.interface.bag import Bag, CapacityExceeded
from bagkit.storage.array_bag import ArrayBag
from bagkit.storage.chain_bag import ChainBag

__all__ = [
    "Bag",
    "CapacityExceeded",
    "ArrayBag",
    "ChainBag",
]
