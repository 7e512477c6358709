import argparse
import logging

from tokenizers import Tokenizer as HFTokenizer

from bytepair.config import TokenizerConfig
from bytepair.figures import merge_history
from bytepair.tokenizer import Tokenizer
from bytepair.utils import load_txt, str2bool


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description="Train a byte-level BPE tokenizer on a text file.")
    parser.add_argument(
        '--data_path',
        type=str,
        default=None,
        help='Path to the training corpus.',
        required=True,
    )
    parser.add_argument(
        '--test_text',
        type=str,
        action='append',
        default=[],
        help='Extra text to encode after training. Can be given several times.',
    )
    parser.add_argument(
        '--verbose',
        type=str2bool,
        default=False,
        help='Whether to log every merge.',
    )
    parser.add_argument(
        '--compare_gpt2',
        type=str2bool,
        default=False,
        help='Whether to compare token counts with the pretrained GPT-2 tokenizer.',
    )
    parser.add_argument(
        '--plot_path',
        type=str,
        default=None,
        help='Where to save the merge history plot.',
    )
    args = parser.parse_args(argv)
    return args


def main(argv=None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(level=logging.INFO)

    content = load_txt(args.data_path)

    t = Tokenizer(TokenizerConfig(verbose=args.verbose))
    t.train(content)
    print('merges: ', t.num_merges)
    print('vocab size: ', t.vocab_size)

    ids = t.encode(content)
    roundtrip = t.decode(ids) == content
    print('corpus: bytes = ', len(t.text2bin(content)), ', tokens = ', len(ids))
    print('round trip: ', roundtrip)

    gpt2 = None
    if args.compare_gpt2:
        gpt2 = HFTokenizer.from_pretrained("gpt2")
        print('gpt2 encoder: corpus len = ', len(gpt2.encode(content).ids))

    for i, text in enumerate(args.test_text):
        print(f'test{i + 1}:')
        print('my encoder: len = ', len(t.encode(text)))
        if gpt2 is not None:
            print('gpt2 encoder: len = ', len(gpt2.encode(text).ids))

    if args.plot_path is not None:
        merge_history(t, save_path=args.plot_path)

    t.destroy()
    return 0 if roundtrip else 1


if __name__ == "__main__":
    raise SystemExit(main())
