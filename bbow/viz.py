import os
import matplotlib.pyplot as plt
import seaborn as sns

from .bag import Bag
from .config import OUTPUT_DIR, DEFAULT_TOP_N, PLOT_DPI, BAR_COLOR

# Fallback fonts so CJK words in the chart do not render as boxes.
# Applied after the seaborn style, which would otherwise reset font.sans-serif.
CHART_RC = {
    'font.sans-serif': ['Noto Sans CJK SC', 'Microsoft YaHei', 'SimSun', 'sans-serif'],
    'axes.unicode_minus': False,
}


def plot_top_words(bag: Bag, picname: str, output_dir: str = OUTPUT_DIR,
                   title: str = 'BBOW', topn: int = DEFAULT_TOP_N):
    if bag.is_empty():
        raise ValueError('cannot plot the top words of an empty bag')
    os.makedirs(output_dir, exist_ok=True)
    top = bag.most_common(topn)
    words = [w for w, _ in top]
    vals = [c for _, c in top]
    # styles are scoped to this chart, the caller's rcParams are left alone
    with sns.axes_style('whitegrid'), plt.rc_context(CHART_RC):
        fig, ax = plt.subplots(1, 1, figsize=(12, 4), dpi=PLOT_DPI, constrained_layout=True)
        ax.bar(words, vals, color=BAR_COLOR)
        ax.set_title(f"Top {len(words)} Words ({bag.count()} total, {bag.len()} distinct)")
        ax.set_ylabel('Count')
        plt.setp(ax.get_xticklabels(), rotation=45, ha='right')
        fig.suptitle(title, fontsize=14)
        out_path = os.path.join(output_dir, f'{picname}_top_words.png')
        plt.savefig(out_path, bbox_inches='tight')
        plt.close(fig)
    return out_path
