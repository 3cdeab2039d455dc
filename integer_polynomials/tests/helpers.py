# (C) 2024 Irreducible Inc.

from hypothesis import strategies as st

from integer_polynomials.polynomials.polynomial import Polynomial


def random_integers_strategy(
    min_value: int,
    max_value: int,
) -> st.SearchStrategy[int]:
    return st.builds(lambda rng: rng.randint(min_value, max_value), st.randoms(use_true_random=True))


def coefficients_strategy(
    max_degree: int = 8,
    bound: int = 100,
) -> st.SearchStrategy[list[int]]:
    """Coefficient lists of length 1 to max_degree + 1, trailing zeros allowed."""
    return st.lists(st.integers(-bound, bound), min_size=1, max_size=max_degree + 1)


def normalized_polynomials(
    max_degree: int = 8,
    bound: int = 100,
    nonzero: bool = False,
) -> st.SearchStrategy[Polynomial]:
    polynomials = coefficients_strategy(max_degree, bound).map(lambda terms: Polynomial(terms).normalized())
    if nonzero:
        return polynomials.filter(bool)
    return polynomials


def divisors_strategy(
    max_degree: int = 4,
    bound: int = 20,
) -> st.SearchStrategy[Polynomial]:
    # a divisor needs a non-zero leading coefficient
    return st.builds(
        lambda lower, lead: Polynomial(lower + [lead]),
        st.lists(st.integers(-bound, bound), max_size=max_degree),
        st.integers(-bound, bound).filter(lambda lead: lead != 0),
    )
