import argparse


def load_txt(data_path: str) -> str:
    with open(data_path, "r", encoding="utf-8") as f:
        data = f.read()
    return data


def str2bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if value.lower() in ("yes", "true", "t", "y", "1"):
        return True
    if value.lower() in ("no", "false", "f", "n", "0"):
        return False
    raise argparse.ArgumentTypeError("Boolean value expected.")
