def generate_value(rng, max_depth):
    if max_depth <= 0:
        return generate_simple_value(rng)
    choice = rng.randint(0, 3)
    if choice == 0:
        return [generate_value(rng, max_depth - 1) for _ in range(rng.randint(0, 5))]
    if choice == 1:
        return {
            rng.randbytes(rng.randint(0, 8)): generate_value(rng, max_depth - 1)
            for _ in range(rng.randint(0, 5))
        }
    return generate_simple_value(rng)


def generate_simple_value(rng):
    if rng.random() < 0.5:
        return rng.randint(-(2**100), 2**100)
    return rng.randbytes(rng.randint(0, 16))


def nested_lists(depth):
    """Build [[...[]...]] without recursion."""
    value = []
    for _ in range(depth - 1):
        value = [value]
    return value


def nesting_depth(value):
    depth = 0
    while isinstance(value, list):
        depth += 1
        value = value[0] if value else None
    return depth
