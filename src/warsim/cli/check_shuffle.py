"""CLI command for checking that deck shuffles are uniform."""

from __future__ import annotations

import sys

import click

from warsim.analysis.uniformity import shuffle_uniformity


@click.command()
@click.option("-t", "--trials", type=click.IntRange(min=1), default=10_000,
              help="Number of decks to shuffle")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--alpha", type=float, default=0.001, help="Significance level")
def main(trials: int, seed: int | None, alpha: float):
    """Shuffle many decks and chi-square test card positions against uniform."""
    result = shuffle_uniformity(num_trials=trials, seed=seed)

    click.echo(f"Shuffled {result.num_trials} decks")
    click.echo(f"  Every deck complete: {'yes' if result.all_decks_complete else 'NO'}")
    click.echo(f"  Chi-square: {result.chi2_statistic:.1f}")
    click.echo(f"  p-value: {result.p_value:.4f}")
    click.echo(f"  Largest cell deviation: {result.max_deviation:.1%}")

    if result.is_uniform(alpha):
        click.echo(f"Uniform (not rejected at alpha={alpha})")
    else:
        click.echo(f"NOT uniform (rejected at alpha={alpha})", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
