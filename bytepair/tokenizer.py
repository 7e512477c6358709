import enum
import logging

from bytepair.config import TokenizerConfig
from bytepair.stats import find_max_pair, get_stats, merge

logger = logging.getLogger(__name__)


class TokenizerState(enum.Enum):
    EMPTY = "empty"
    TRAINED = "trained"
    DESTROYED = "destroyed"


class Tokenizer:
    def __init__(self, config: TokenizerConfig = None):
        self.config = config if config is not None else TokenizerConfig()
        self.merges: list[tuple[tuple[int, int], int]] = []  # creation order, used to build vocabulary
        self.merges_rules: dict[tuple[int, int], int] = {}  # (int, int) -> int, used in encode
        self.vocabulary: dict[int, bytes] = {}  # int -> bytes, used in decode
        self.history: list[int] = []  # occurrences of each merged pair
        self._state = TokenizerState.EMPTY

    @property
    def state(self) -> TokenizerState:
        return self._state

    @property
    def vocab_size(self) -> int:
        return len(self.vocabulary)

    @property
    def num_merges(self) -> int:
        return len(self.merges)

    def train(self, corpus) -> None:
        """
        Learn merge rules from a corpus until no adjacent pair occurs more than once.
        Params:
            corpus (bytes | str): training data, str is encoded with config.encoding.

        Return:
            None
        """
        assert self._state is not TokenizerState.DESTROYED, "tokenizer has been destroyed"

        ids = self.text2bin(corpus)
        n_bytes = len(ids)
        merges = []
        merges_rules = {}
        history = []

        idx = 256
        while True:
            stats = get_stats(ids)
            pair, count = find_max_pair(stats)
            if count <= 1:
                break

            ids = merge(ids, pair, idx)
            merges.append((pair, idx))
            merges_rules[pair] = idx
            history.append(count)

            if self.config.verbose:
                logger.info(f"merge {idx - 255}: {pair} -> {idx} had {count} occurrences")
            elif (idx - 255) % self.config.log_every == 0:
                logger.debug(f"merge {idx - 255}: sequence length {len(ids)}")
            idx += 1

        vocabulary = {i: bytes([i]) for i in range(256)}
        for (p0, p1), new_id in merges:
            vocabulary[new_id] = vocabulary[p0] + vocabulary[p1]

        self.merges = merges
        self.merges_rules = merges_rules
        self.vocabulary = vocabulary
        self.history = history
        self._state = TokenizerState.TRAINED

        ratio = n_bytes / len(ids) if ids else 1.0
        logger.info(f"trained {len(merges)} merges on {n_bytes} bytes, compression {ratio:.2f}X")

    def encode(self, text) -> list[int]:
        """
        Encode the input string into a token list.
        Stops as soon as the most frequent pair has no learned rule.
        """
        assert self._state is TokenizerState.TRAINED, f"cannot encode with a tokenizer in state {self._state.value}"

        ids = self.text2bin(text)
        while len(ids) >= 2:
            pair, count = find_max_pair(get_stats(ids))
            if count <= 1:
                break
            if pair not in self.merges_rules:
                break
            ids = merge(ids, pair, self.merges_rules[pair])
        return ids

    def decode_bytes(self, ids: list[int]) -> bytes:
        assert self._state is TokenizerState.TRAINED, f"cannot decode with a tokenizer in state {self._state.value}"

        chunks = []
        for idx in ids:
            assert idx in self.vocabulary, f"token {idx} has no entry in the vocabulary"
            chunks.append(self.vocabulary[idx])
        return b"".join(chunks)

    def decode(self, ids: list[int]) -> str:
        """
        Decode a token list into a string.
        Params:
            ids (list): list of integer-type tokens.

        Return:
            text (str): string-type data.
        """
        return self.bin2text(self.decode_bytes(ids))

    def destroy(self) -> None:
        self.merges.clear()
        self.merges_rules.clear()
        self.vocabulary.clear()
        self.history.clear()
        self._state = TokenizerState.DESTROYED

    def text2bin(self, content) -> list[int]:
        if isinstance(content, str):
            content = content.encode(self.config.encoding)
        return list(content)

    def bin2text(self, content: bytes) -> str:
        return content.decode(self.config.encoding, errors=self.config.errors)


def train(tokenizer: Tokenizer, corpus) -> None:
    tokenizer.train(corpus)


def encode(tokenizer: Tokenizer, text) -> list[int]:
    return tokenizer.encode(text)


def decode(tokenizer: Tokenizer, ids: list[int]) -> str:
    return tokenizer.decode(ids)


def destroy(tokenizer: Tokenizer) -> None:
    tokenizer.destroy()
