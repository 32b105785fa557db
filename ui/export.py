# ui/export.py
# Chart and table exports for the monthly view.

import io

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter
import pandas as pd

from ui.formatting import format_compact

TABLE_COLUMNS = [
    "Month",
    "Premium Purchases",
    "Cumulative Premium Purchases",
    "Current Cumulative Coverage",
]

BACKGROUND = "#111111"
PURCHASE_COLOR = "#f5c542"
CUMULATIVE_COLOR = "#4ea1ff"
COVERAGE_COLOR = "#59d98e"


def table_csv(monthly_df: pd.DataFrame) -> bytes:
    """Monthly table as CSV, header row first."""
    return monthly_df[TABLE_COLUMNS].to_csv(index=False).encode("utf-8")


def chart_figure(monthly_df: pd.DataFrame, title: str = "Protocol Coverage Fund Model"):
    """Purchases as bars, cumulative premiums and coverage as lines."""
    fig, ax = plt.subplots(figsize=(11, 5), facecolor=BACKGROUND)
    ax.set_facecolor(BACKGROUND)

    x = list(range(len(monthly_df)))
    ax.bar(x, monthly_df["Premium Purchases"], color=PURCHASE_COLOR, alpha=0.7, label="Premium Purchases")
    ax.plot(x, monthly_df["Cumulative Premium Purchases"], color=CUMULATIVE_COLOR, linewidth=2,
            label="Cumulative Premium Purchases")
    ax.fill_between(x, monthly_df["Current Cumulative Coverage"], color=COVERAGE_COLOR, alpha=0.15)
    ax.plot(x, monthly_df["Current Cumulative Coverage"], color=COVERAGE_COLOR, linewidth=2,
            label="Current Cumulative Coverage")

    ax.set_xticks(x)
    ax.set_xticklabels(monthly_df["Month"], rotation=45, ha="right", fontsize=8)
    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _: format_compact(v)))
    ax.set_title(title, color="white")
    ax.tick_params(colors="#cccccc")
    for spine in ax.spines.values():
        spine.set_color("#444444")
    ax.grid(alpha=0.15)
    ax.legend(facecolor=BACKGROUND, labelcolor="white", edgecolor="#444444")
    fig.tight_layout()
    return fig


def chart_png(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", facecolor=BACKGROUND, dpi=120)
    return buf.getvalue()
