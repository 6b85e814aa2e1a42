import math


class Accessor:
    """Extracts one coordinate from a record"""

    def __call__(self, record):
        raise NotImplementedError


class IndexAccessor(Accessor):
    """Reads ``record[index]``; the record type must support indexed access"""

    def __init__(self, index):
        self.index = index

    def __call__(self, record):
        return record[self.index]

    def __repr__(self):
        return f"IndexAccessor({self.index})"


class NanAccessor(Accessor):
    """Always NaN, for opaque records that expose no coordinate"""

    def __call__(self, record):
        return math.nan

    def __repr__(self):
        return "NanAccessor()"


def supports_index(record_type):
    return hasattr(record_type, '__getitem__')


def accessor_for(record_type, index):
    """
    Pick the default accessor for a record type

    Args:
        record_type: Class of the records to be binned
        index: Element to read when the type supports indexed access

    Returns:
        IndexAccessor(index) for subscriptable types, NanAccessor() otherwise
    """
    if supports_index(record_type):
        return IndexAccessor(index)
    return NanAccessor()


point_x = IndexAccessor(0)
point_y = IndexAccessor(1)
