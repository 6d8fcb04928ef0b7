import matplotlib.pyplot as plt


def plot_results(results, filename='page_size_analysis.png', show=False):
    page_sizes = [str(stats.page_size) for stats in results]
    metrics = [
        ('page_faults', 'Page Faults'),
        ('total_internal_fragmentation', 'Internal Fragmentation (bytes)'),
    ]

    fig, axes = plt.subplots(1, 2, figsize=(15, 5))
    fig.suptitle('Page Size Analysis: Page Faults vs Internal Fragmentation',
                 fontsize=14, fontweight='bold')

    for ax, (metric, title) in zip(axes, metrics):
        values = [getattr(stats, metric) for stats in results]
        x = range(len(page_sizes))
        bars = ax.bar(x, values, 0.6)

        for bar in bars:
            height = bar.get_height()
            ax.text(bar.get_x() + bar.get_width()/2., height,
                    f'{int(height)}', ha='center', va='bottom', fontsize=8)

        ax.set_title(title)
        ax.set_xlabel('Page Size (bytes)')
        ax.set_xticks(x)
        ax.set_xticklabels(page_sizes, rotation=45)
        ax.grid(axis='y', alpha=0.3)

    plt.tight_layout()
    plt.savefig(filename, dpi=300, bbox_inches='tight')
    if show:
        plt.show()
    plt.close(fig)
    return filename


if __name__ == '__main__':
    from config import SimulationConfig
    from simulator import run_sweep

    print("Running simulations...")
    results = run_sweep(SimulationConfig())
    plot_results(results, show=True)
    print("\nGraph saved as 'page_size_analysis.png'")
