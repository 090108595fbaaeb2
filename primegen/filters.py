# primegen/filters.py
# Cheap deterministic rejections run before Miller-Rabin.

def passes_quick_filter(value: int) -> bool:
    """Positive, odd, not a multiple of 3."""
    return value > 0 and value % 2 != 0 and value % 3 != 0

def quick_reject(value: int) -> bool:
    return not passes_quick_filter(value)
