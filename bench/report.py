"""Fixed-width console tables for benchmark results."""

from bench.analysis import Profile, Row

RULE = "-" * 70


def format_table(profile: Profile, rows: list[Row]) -> str:
    size_width = max(10, len(profile.size_label) + 2)
    time_label = f"Time ({profile.time_unit})"

    lines = [
        f"{profile.name.upper()} PERFORMANCE ANALYSIS",
        RULE,
        f"Expected Time Complexity: {profile.time_complexity}",
        f"Expected Space Complexity: {profile.space_complexity}",
        "",
        f"{profile.size_label:<{size_width}} {time_label:<15} "
        f"{profile.per_unit_label:<15} {'Ratio':<15}",
        RULE,
    ]
    for row in rows:
        lines.append(
            f"{row.size:<{size_width}d} {row.seconds * profile.time_scale:<15.6f} "
            f"{row.per_unit * profile.per_unit_scale:<15.6f} {row.ratio:<15.2f}")
    lines.append("")
    lines.extend(f"Analysis: {note}" if i == 0 else note
                 for i, note in enumerate(profile.notes))
    return "\n".join(lines)
