
from ..diff_format import json_equal


class DiffConfig:
    """Set of options to pass around while comparing"""

    def __init__(self, *, sort_keys=True, compare=None):
        if compare is None:
            compare = json_equal

        self.sort_keys = sort_keys
        self.compare = compare

    def keys(self, obj):
        "Return the keys of obj in the order they are compared."
        if self.sort_keys:
            return sorted(obj.keys())
        return list(obj.keys())
