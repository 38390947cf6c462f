from orderedmap.errors import UnhashableKeyError
from orderedmap.ordered_map import OrderedMap

__all__ = ["OrderedMap", "UnhashableKeyError"]
