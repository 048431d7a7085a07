# diceforge/experiments/plot_heatmap.py
"""
Heatmap of uniformity test pass rates: x axis = range size passed to
next_in_range, y axis = generator, cell = share of trials with p >= alpha.

CSV expected columns: generator, range_size, trial, p_value

Usage:
    python -m diceforge.experiments.plot_heatmap --csv results/experiments_XXXX.csv --out heatmap.png
"""

import argparse
import os

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

REQUIRED = {'generator', 'range_size', 'trial', 'p_value'}


def prepare_pivot(df, alpha=0.01):
    df = df.assign(passed=(df['p_value'] >= alpha).astype(float))
    agg = df.groupby(['generator', 'range_size'], as_index=False)['passed'].mean()
    # rows = generator, cols = range_size (sorted asc)
    pivot = agg.pivot(index='generator', columns='range_size', values='passed')
    return pivot.sort_index(axis=1)


def plot_heatmap(pivot, title='Uniformity Pass Rate', out_file=None, annotate=True, show=True):
    rows = pivot.index.tolist()
    cols = pivot.columns.tolist()
    data = pivot.values  # may contain NaN for missing combos

    fig, ax = plt.subplots(figsize=(0.8 * len(cols) + 3, 0.6 * len(rows) + 2))
    im = ax.imshow(data, aspect='auto', interpolation='nearest', vmin=0.0, vmax=1.0)

    ax.set_xticks(np.arange(len(cols)))
    ax.set_yticks(np.arange(len(rows)))
    ax.set_xticklabels(cols)
    ax.set_yticklabels(rows)
    ax.set_xlabel('Range size (max - min + 1)')
    ax.set_ylabel('Generator')
    ax.set_title(title)

    plt.setp(ax.get_xticklabels(), rotation=45, ha='right')

    if annotate:
        for i in range(len(rows)):
            for j in range(len(cols)):
                val = data[i, j]
                if np.isnan(val):
                    ax.text(j, i, 'N/A', ha='center', va='center', color='gray', fontsize=9)
                else:
                    ax.text(j, i, f"{val:.2f}", ha='center', va='center',
                            color='white' if val > 0.5 else 'black', fontsize=9)

    cbar = fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)
    cbar.set_label('Pass rate (0-1)')

    plt.tight_layout()
    if out_file:
        os.makedirs(os.path.dirname(out_file) or '.', exist_ok=True)
        plt.savefig(out_file, dpi=300)
        print(f"Heatmap saved to {out_file}")
    if show:
        plt.show()
    return fig


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('--csv', required=True, help='Path to experiments CSV')
    parser.add_argument('--out', default='results/heatmap_pass_rate.png', help='Output PNG path')
    parser.add_argument('--title', default='Uniformity Pass Rate', help='Plot title')
    parser.add_argument('--alpha', type=float, default=0.01, help='significance level')
    parser.add_argument('--no-show', action='store_true', help='only save the figure')
    args = parser.parse_args(argv)

    if args.no_show:
        matplotlib.use('Agg')

    df = pd.read_csv(args.csv)
    if not REQUIRED.issubset(set(df.columns)):
        raise SystemExit(f"CSV must contain columns: {REQUIRED}. Found: {df.columns.tolist()}")

    df['range_size'] = df['range_size'].astype(int)
    df['p_value'] = df['p_value'].astype(float)

    pivot = prepare_pivot(df, alpha=args.alpha)
    plot_heatmap(pivot, title=args.title, out_file=args.out, annotate=True, show=not args.no_show)


if __name__ == '__main__':
    main()
