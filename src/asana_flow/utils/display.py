"""Presentation helpers for categories, intensities and durations."""


def format_category(category: str) -> str:
    """Turn a category label like FORWARD_BEND into "Forward Bend"."""
    return category.replace("_", " ").title()


def intensity_color(intensity: int) -> str:
    """Body-map heat color for a 0-100 region intensity."""
    if intensity == 0:
        return "#e5e7eb"  # gray-200
    if intensity < 20:
        return "#dcfce7"  # green-100
    if intensity < 40:
        return "#bbf7d0"  # green-200
    if intensity < 60:
        return "#86efac"  # green-300
    if intensity < 80:
        return "#4ade80"  # green-400
    return "#22c55e"  # green-500


def activity_color(intensity: int) -> str:
    """Recovery heat color, red for overworked regions."""
    if intensity >= 80:
        return "#ef4444"  # red-500
    if intensity >= 60:
        return "#f97316"  # orange-500
    if intensity >= 40:
        return "#eab308"  # yellow-500
    if intensity >= 20:
        return "#22c55e"  # green-500
    return "#94a3b8"  # slate-400


def intensity_label(intensity: int) -> str:
    """Human-readable workload label for a recovery intensity."""
    if intensity >= 80:
        return "Overworked"
    if intensity >= 60:
        return "Heavy"
    if intensity >= 40:
        return "Moderate"
    if intensity >= 20:
        return "Light"
    return "Minimal"


def format_sequence_duration(seconds: int) -> str:
    """Format seconds as "5 min" or "4:30"."""
    minutes, secs = divmod(int(seconds), 60)
    if secs == 0:
        return f"{minutes} min"
    return f"{minutes}:{secs:02d}"
