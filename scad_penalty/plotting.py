"""
SCAD penalty plotting utilities.

Draws penalty curves and discards the resulting matplotlib figures.
"""

import warnings
from typing import Optional, Tuple

from .exceptions import FigureCleanupWarning, PlotError
from .penalty import DEFAULT_A
from .validation import check_coefficients, check_lambda, check_a, check_same_size


def plot_scad(
    beta,
    penalty,
    lam: float,
    a: float = DEFAULT_A,
    figsize: Tuple[int, int] = (8, 5),
    save_path: Optional[str] = None,
    ax=None,
    show_breakpoints: bool = True,
):
    """
    Plot SCAD penalty values against coefficients.

    Inputs are validated with the same rules as ``scad_penalty`` so the
    two never disagree on what is valid.

    Parameters
    ----------
    beta : array-like
        Coefficient values (x-axis).
    penalty : array-like
        Penalty values (y-axis), same number of elements as ``beta``.
    lam : float
        Threshold λ > 0, shown in the title.
    a : float, default=3.7
        Concavity parameter (> 2), shown in the title.
    figsize : tuple, default=(8, 5)
        Figure size when a new figure is created.
    save_path : str, optional
        If provided, save figure to this path.
    ax : matplotlib.axes.Axes, optional
        Axes to draw on. A new figure is created if None.
    show_breakpoints : bool, default=True
        Draw dashed vertical lines at ±λ and ±aλ.

    Returns
    -------
    matplotlib.figure.Figure
        The figure containing the plot.

    Raises
    ------
    EmptyInputError, NonFiniteInputError, InvalidLambdaError, InvalidAError
        If an input is invalid.
    ShapeMismatchError
        If ``beta`` and ``penalty`` differ in size.
    PlotError
        If matplotlib fails while drawing.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib is required for plotting. Install with: pip install matplotlib")

    beta_arr = check_coefficients(beta, name='beta')
    penalty_arr = check_coefficients(penalty, name='penalty')
    lam = check_lambda(lam)
    a = check_a(a)
    check_same_size(beta_arr, penalty_arr, 'beta', 'penalty')

    title = f'SCAD Penalty (λ={lam:.2f}, a={a:.2f})'

    try:
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
            if fig.canvas.manager is not None:
                fig.canvas.manager.set_window_title(title)
        else:
            fig = ax.figure

        ax.plot(beta_arr.ravel(), penalty_arr.ravel(), linewidth=2)

        if show_breakpoints:
            for x in (-a * lam, -lam, lam, a * lam):
                ax.axvline(x=x, color='gray', linestyle='--', alpha=0.5)

        ax.set_xlabel('β', fontsize=12)
        ax.set_ylabel('SCAD Penalty', fontsize=12)
        ax.set_title(title, fontsize=13, fontweight='bold')
        ax.grid(True, alpha=0.3)
        ax.tick_params(labelsize=11)

        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')
    except Exception as e:
        raise PlotError(f"Error while generating SCAD plot: {e}") from e

    return fig


def close_all_figures():
    """
    Close all open pyplot figures.

    Never raises: a failure (including a missing matplotlib) is reported
    as a ``FigureCleanupWarning``.
    """
    try:
        import matplotlib.pyplot as plt

        if plt.get_fignums():
            plt.close('all')
    except Exception as e:
        warnings.warn(
            f"Could not close figures safely: {e}",
            FigureCleanupWarning,
            stacklevel=2,
        )

