import logging


LOGGING_LEVEL = logging.INFO
ALGORITHM: str = "kruskal"
RANDOM_N_NODES: int = 200
RANDOM_EDGE_PROB: float = 0.5
RANDOM_SEED: int = 33
