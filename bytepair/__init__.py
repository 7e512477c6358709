from bytepair.config import TokenizerConfig
from bytepair.stats import find_max_pair, get_stats, merge
from bytepair.tokenizer import Tokenizer, TokenizerState, decode, destroy, encode, train

__all__ = [
    "Tokenizer",
    "TokenizerConfig",
    "TokenizerState",
    "decode",
    "destroy",
    "encode",
    "find_max_pair",
    "get_stats",
    "merge",
    "train",
]
