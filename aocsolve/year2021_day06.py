"""2021 day 6: lanternfish population growth."""

from functools import lru_cache

from aocsolve.inputs import log_result, read_csv_numbers


@lru_cache(maxsize=None)
def population_count(days_to_reproduce, remaining_days):
    """Number of fish descending from one fish (itself included) after ``remaining_days``."""
    if days_to_reproduce > remaining_days:
        return 1
    left = remaining_days - days_to_reproduce
    return population_count(7, left) + population_count(9, left)


def simulate(ages, days):
    """Total population after ``days`` starting from the given timer values."""
    return sum(population_count(age + 1, days) for age in ages)


def run(path):
    """Solve both parts for the input file at ``path``."""
    ages = read_csv_numbers(path)
    short = simulate(ages, 80)
    log_result(6, 1, "Final count after 80 days: ", short)
    print("Cache size: ", population_count.cache_info().currsize)
    long = simulate(ages, 256)
    log_result(6, 2, "Final count after 256 days: ", long)
    print("Cache size: ", population_count.cache_info().currsize)
    return short, long