WEIGHT_ATTR: str = "weight"
DEFAULT_WEIGHT: float = 1.0
WEIGHT_TOLERANCE: float = 1e-9
DEFAULT_ALGORITHM: str = "kruskal"
EDGELIST_COMMENT: str = "#"
