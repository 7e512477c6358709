def get_stats(ids: list[int], counts: dict = None) -> dict:
    """
    Count every adjacent pair in a token list.
    Params:
        ids (list): list of integer-type tokens.
        counts (dict): optional dict to accumulate into.

    Return:
        counts (dict): (int, int) -> number of occurrences.
    """
    counts = {} if counts is None else counts
    for pair in zip(ids, ids[1:]):
        counts[pair] = counts.get(pair, 0) + 1
    return counts


def find_max_pair(stats: dict) -> tuple[tuple[int, int], int]:
    """
    Pick the most frequent pair. Ties go to the smallest (left, right) pair,
    so training and encoding always agree on the choice.

    Return:
        (pair, count), or ((0, 0), 0) for an empty table.
    """
    if not stats:
        return (0, 0), 0
    pair = min(stats, key=lambda p: (-stats[p], p))
    return pair, stats[pair]


def merge(ids: list[int], pair: tuple[int, int], idx: int) -> list[int]:
    # left to right, a hit consumes both tokens
    newids = []
    i = 0
    while i < len(ids):
        if i < len(ids) - 1 and ids[i] == pair[0] and ids[i + 1] == pair[1]:
            newids.append(idx)
            i += 2
        else:
            newids.append(ids[i])
            i += 1
    return newids
