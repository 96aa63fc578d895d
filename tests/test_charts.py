import matplotlib.pyplot as plt
from matplotlib.ticker import PercentFormatter

from sample_size_explorer.charts import format_thousands, plot_sample_size, save_chart
from sample_size_explorer.grid import sweep


def test_format_thousands():
    assert format_thousands(6274.04) == "6.3K"
    assert format_thousands(1564.7) == "1.6K"
    assert format_thousands(240) == "0.2K"


def test_plot_labels_every_point_in_thousands():
    frame = sweep("mde", [0.05, 0.1])
    fig, ax = plt.subplots()
    plot_sample_size(frame, "mde", ax=ax)

    labels = [t.get_text() for t in ax.texts]
    assert labels == ["6.3K", "1.6K"]
    assert isinstance(ax.xaxis.get_major_formatter(), PercentFormatter)
    assert ax.get_xlabel() == "Minimum detectable effect (relative)"
    plt.close(fig)


def test_plot_creates_axes_when_none_given():
    ax = plot_sample_size(sweep("alpha"), "alpha", title="alpha sweep")
    assert ax.get_title() == "alpha sweep"
    assert len(ax.lines) == 1
    plt.close(ax.figure)


def test_save_chart_creates_parent_dirs(tmp_path):
    fig, ax = plt.subplots()
    plot_sample_size(sweep("baseline_rate"), "baseline_rate", ax=ax)
    path = save_chart(fig, str(tmp_path / "nested" / "chart.png"))
    plt.close(fig)
    assert (tmp_path / "nested" / "chart.png").stat().st_size > 0
    assert path.endswith("chart.png")
