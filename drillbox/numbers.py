"""Digit and divisor properties of integers."""

from math import isqrt


def reverse_digits(number):
    """Return the number with its decimal digits reversed, keeping its sign.

    Trailing zeros vanish, so ``reverse_digits(1200)`` is ``21``.
    """
    sign = -1 if number < 0 else 1
    return sign * int(str(abs(number))[::-1])


def is_palindrome_number(number):
    """True when the number reads the same with its digits reversed."""
    return reverse_digits(number) == number


def is_armstrong(number):
    """True when the number equals the sum of its digits, each raised to the digit count.

    Zero counts as an Armstrong number. A negative number is taken digit by
    digit with its sign, the way truncating division splits it up.
    """
    if number == 0:
        return True
    digits = str(abs(number))
    power = len(digits)
    sign = -1 if number < 0 else 1
    return sum((sign * int(digit)) ** power for digit in digits) == number


def is_perfect(number):
    """True when the number equals the sum of its divisors up to half of it.

    Zero has no such divisors and so sums to itself; negative numbers never do.
    """
    if number < 1:
        return number == 0
    if number == 1:
        return False
    total = 1
    for divisor in range(2, isqrt(number) + 1):
        if number % divisor == 0:
            total += divisor
            partner = number // divisor
            if partner != divisor:
                total += partner
    return total == number


def is_prime(number):
    """True when the number is greater than one and has no divisor but 1 and itself."""
    if number <= 1:
        return False
    return all(number % divisor for divisor in range(2, isqrt(number) + 1))