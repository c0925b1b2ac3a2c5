"""Small arithmetic drills: factorials, Fibonacci numbers, powers, primes and sequences."""

from __future__ import annotations

import math
import string


def factorial(n: int) -> int:
    """Return n! as the product 1 * 2 * ... * n.

    Values of ``n`` below 1 give the empty product, 1.
    """
    return math.prod(range(1, n + 1))


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting from 1.

    The sequence starts 0, 1, 1, 2, 3, 5, 8, ... so ``fibonacci(1)`` is 0
    and ``fibonacci(2)`` is 1.
    """
    if n < 1:
        raise ValueError(f"position must be at least 1, got {n}")
    previous, current = 0, 1
    if n == 1:
        return previous
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def power(base: int, exponent: int) -> int:
    """Return ``base`` multiplied by itself ``exponent`` times.

    Exponents of 1 or less leave the base as it is, since the result starts
    from the base and only further factors are multiplied in.
    """
    result = base
    for _ in range(2, exponent + 1):
        result *= base
    return result


def is_prime(number: int) -> bool:
    """Tell whether ``number`` is prime; anything below 2 is not."""
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, math.isqrt(number) + 1))


def alphabet() -> str:
    """Return the lowercase letters from 'a' to 'z'."""
    return string.ascii_lowercase


def countdown(n: int) -> list[int]:
    """Return the natural numbers from ``n`` down to 1."""
    return list(range(n, 0, -1))


def sum_naturals(n: int) -> int:
    """Return the sum 1 + 2 + ... + n, or 0 when ``n`` is below 1."""
    return sum(range(1, n + 1))