def contains(start, end, value):
    return start < value < end


def overlap_1d(a_start, a_end, b_start, b_end):
    return contains(a_start, a_end, b_start) or contains(a_start, a_end, b_end)


def rectangles_overlap(a, b):
    """Boxes are given by centre x, y and width, height. Touching edges don't count."""
    return (
        overlap_1d(a.x - a.width / 2, a.x + a.width / 2,
                   b.x - b.width / 2, b.x + b.width / 2)
        and overlap_1d(a.y - a.height / 2, a.y + a.height / 2,
                       b.y - b.height / 2, b.y + b.height / 2)
    )


def past_top(obj, margin=0):
    return obj.y < margin


def past_bottom(obj, height, margin=0):
    return obj.y > height - margin


def past_left(obj, margin=0):
    return obj.x < -margin


def past_right(obj, width, margin=0):
    return obj.x > width + margin
