MAX_BAR_LEN = 35

KEY_INSIGHTS = [
    "SMALLER pages -> MORE page faults (more pages to manage, less spatial locality per page)",
    "SMALLER pages -> LESS internal fragmentation (less waste in each process's last page)",
    "LARGER pages  -> FEWER page faults (better spatial locality, fewer page table entries)",
    "LARGER pages  -> MORE internal fragmentation (average waste = page size / 2)",
]


def summarize(results):
    """Page size records with the fewest/most faults and least/most fragmentation."""
    return {
        'best_faults': min(results, key=lambda s: s.page_faults),
        'worst_faults': max(results, key=lambda s: s.page_faults),
        'best_fragmentation': min(results, key=lambda s: s.total_internal_fragmentation),
        'worst_fragmentation': max(results, key=lambda s: s.total_internal_fragmentation),
    }


def format_results_table(results):
    lines = [
        f"{'Page Size':<12} {'Frames':<8} {'Page Faults':<12} {'Fault Rate':<11} "
        f"{'Int. Frag.':<12} {'Frag. Rate':<10}",
        "-" * 70,
    ]
    for stats in results:
        lines.append(
            f"{str(stats.page_size) + ' B':<12} {stats.num_frames:<8} {stats.page_faults:<12} "
            f"{stats.page_fault_rate():>8.2f}%  {str(stats.total_internal_fragmentation) + ' B':<12} "
            f"{stats.fragmentation_percent():>8.2f}%"
        )
    return "\n".join(lines)


def format_summary(results):
    summary = summarize(results)
    lines = [
        "ANALYSIS SUMMARY",
        "=" * 70,
        "PAGE FAULT ANALYSIS:",
        f"  Lowest page faults:  {summary['best_faults'].page_size:>6} B page size -> "
        f"{summary['best_faults'].page_faults} faults",
        f"  Highest page faults: {summary['worst_faults'].page_size:>6} B page size -> "
        f"{summary['worst_faults'].page_faults} faults",
        "",
        "INTERNAL FRAGMENTATION ANALYSIS:",
        f"  Lowest fragmentation:  {summary['best_fragmentation'].page_size:>6} B page size -> "
        f"{summary['best_fragmentation'].total_internal_fragmentation} bytes wasted",
        f"  Highest fragmentation: {summary['worst_fragmentation'].page_size:>6} B page size -> "
        f"{summary['worst_fragmentation'].total_internal_fragmentation} bytes wasted",
        "",
        "KEY INSIGHTS:",
    ]
    lines.extend(f"  * {insight}" for insight in KEY_INSIGHTS)
    lines.append("")
    lines.append("TRADE-OFF: Must balance page fault overhead vs memory waste!")
    return "\n".join(lines)


def _bar(value, max_value, fill):
    length = int(value / max_value * MAX_BAR_LEN) if max_value else 0
    return fill * length + " " * (MAX_BAR_LEN - length)


def format_chart(results):
    max_faults = max(stats.page_faults for stats in results)
    max_frag = max(stats.total_internal_fragmentation for stats in results)

    lines = [
        "VISUAL COMPARISON CHART",
        "=" * 70,
        "Legend: [#] Page Faults    [=] Internal Fragmentation",
        "",
    ]
    for stats in results:
        lines.append(f"{stats.page_size:>6}B   [{_bar(stats.page_faults, max_faults, '#')}] "
                     f"{stats.page_fault_rate():>5.1f}% faults")
        lines.append(f"          [{_bar(stats.total_internal_fragmentation, max_frag, '=')}] "
                     f"{stats.fragmentation_percent():>5.1f}% frag")
        lines.append("")
    return "\n".join(lines)


def print_report(results, physical_memory_size, num_processes, accesses_per_process, chart=True):
    print("\n" + "=" * 80)
    print("PAGE SIZE ANALYSIS: Page Faults vs Internal Fragmentation")
    print(f"Physical Memory: {physical_memory_size} bytes | Processes: {num_processes} | "
          f"Accesses per process: {accesses_per_process}")
    print("=" * 80 + "\n")

    print(format_results_table(results))
    print()
    print(format_summary(results))
    if chart:
        print()
        print(format_chart(results))
