"""2020 day 3: trees on a toboggan slope."""

from aocsolve.inputs import log_result, read_lines

SLOPES = [(1, 1), (1, 3), (1, 5), (1, 7), (2, 1)]


def count_trees(tree_map, down, right):
    """Count '#' cells met moving ``down`` rows and ``right`` columns per step."""
    count = 0
    column = 0
    for row in tree_map[::down]:
        if row[column] == "#":
            count += 1
        column = (column + right) % len(row)
    return count


def multiply_tree_counts(tree_map, slopes):
    """Multiply the tree counts of every (down, right) slope."""
    product = 1
    for down, right in slopes:
        product *= count_trees(tree_map, down, right)
    return product


def run(path):
    """Solve both parts for the input file at ``path``."""
    tree_map = read_lines(path)
    trees = count_trees(tree_map, 1, 3)
    log_result(3, 1, "Trees encountered", trees)
    product = multiply_tree_counts(tree_map, SLOPES)
    log_result(3, 2, "Product of trees encountered on slopes", product)
    return trees, product