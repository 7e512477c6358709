from dataclasses import dataclass


@dataclass
class TokenizerConfig:
    encoding: str = "utf-8"
    errors: str = "replace"  # passed to bytes.decode
    verbose: bool = False  # log every merge during training
    log_every: int = 100
