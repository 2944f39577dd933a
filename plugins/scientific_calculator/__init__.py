"""Scientific Calculator plugin manifest."""

manifest = {
    "title": "Scientific Calculator",
    "summary": "Evaluate arithmetic and scientific expressions with degree/radian modes and a recent-results history.",
    "category": "General Utilities",
    "blueprint": "scientific_calculator",
}

__all__ = ["manifest"]
