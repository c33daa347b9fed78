from .slicer import DEFAULT_SPLIT_STRATEGY, MeshSplitter, SplitPointStrategy, get_split_point

__all__ = [
    "DEFAULT_SPLIT_STRATEGY",
    "MeshSplitter",
    "SplitPointStrategy",
    "get_split_point",
]
