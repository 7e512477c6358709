import matplotlib.pyplot as plt

from bytepair.tokenizer import Tokenizer


def merge_history(tokenizer: Tokenizer, save_path: str = None):
    """Plot how often each learned pair occurred, in the order the merges were made."""
    history = tokenizer.history
    l = len(history)

    fig, ax = plt.subplots()
    ax.plot(range(256, 256 + l), history, label='pair occurrences')
    if l:
        avg = sum(history) / l
        ax.plot(range(256, 256 + l), [avg] * l, linestyle='--', label='avg occurrences(reference)')
    ax.legend()
    ax.set_title('Merge History')
    ax.set_xlabel('Token id')
    ax.set_ylabel('Occurrences')
    if save_path is not None:
        fig.savefig(save_path)
        plt.close(fig)
    else:
        plt.show()
    return fig
