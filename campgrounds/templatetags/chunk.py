from django import template

register = template.Library()


@register.filter
def chunk(seq, size: int):
    """Split an iterable into lists of 'size' items for card grid rows."""
    try:
        size = int(size)
    except (TypeError, ValueError):
        size = 3
    if size < 1:
        size = 3
    seq = list(seq or [])
    return [seq[i : i + size] for i in range(0, len(seq), size)]
