"""
Tests running small algorithm programs end to end.
"""
import pytest

from swiftlet.tests.utils import output_lines, run_source

SUM_OF_FIRST_N = """
var sum = 0
var n = 10
var i = 1
while i <= n {
    sum = sum + i
    i = i + 1
}
print(sum)"""

FACTORIAL = """
var n = 5
var factorial = 1
var i = 1
while i <= n {
    factorial = factorial * i
    i = i + 1
}
print(factorial)
"""

GCD = """
var x = 56
var y = 98
while y != 0 {
var remainder = x % y
x = y
y = remainder}
if x < 0 {
x = -x}
print(x)"""

REVERSE_NUMBER = """
var n = 56
var reversed = 0
while n != 0 {
var digit = n % 10
reversed = reversed * 10
reversed = reversed + digit
n = n / 10}
print(reversed)"""

PALINDROME = """
var n = 11112
var reversed = 0
var original = n
while n != 0 {
var digit = n % 10
reversed = reversed * 10
reversed = reversed + digit
n = n / 10
}
if original == reversed {
print("true")} else {
print("false")
}"""

FIBONACCI = """
var N = 10
var a = 0
var b = 1
var count = 2
while count < N {
var next = a + b
a = b
b = next
count = count + 1
}
print(b)"""

MULTIPLICATION_TABLE = """
var number = 5
var i = 1
var toPrint = 0
while i <= 10 {
toPrint = number * i
print(toPrint)
i = i + 1}"""

SUM_DIGITS = """
var number = 12345
var sum = 0
while number > 0 {
 var digit = number % 10
 sum = sum + digit
 number = number / 10
}
print(sum)"""

BIGGEST_DIGIT = """
let number = 12345
var biggestDigit = 0

while number > 0 {
    var digit = number % 10
    if digit > biggestDigit {
        biggestDigit = digit
    }
    number = number / 10
}

print(biggestDigit)"""

IS_PRIME = """
var num = 5
var isPrime = 1

if num <= 1 {
    isPrime = 0
}

var i = 2
while i * i <= num {
    if num % i == 0 {
        isPrime = 0
    }
    i = i + 1
}

if isPrime == 1 {
    print(num)
    print("yes it is prime number")
}

if isPrime == 0 {
    print(num)
    print("no it is not prime number")
}
"""


@pytest.mark.parametrize(
    "source, expected",
    [
        (SUM_OF_FIRST_N, ["55"]),
        (FACTORIAL, ["120"]),
        (GCD, ["14"]),
        (REVERSE_NUMBER, ["65"]),
        (PALINDROME, ["false"]),
        (FIBONACCI, ["34"]),
        (MULTIPLICATION_TABLE, [str(5 * i) for i in range(1, 11)]),
        (SUM_DIGITS, ["15"]),
        (BIGGEST_DIGIT, ["5"]),
        (IS_PRIME, ["5", "yes it is prime number"]),
    ],
    ids=[
        "sum", "factorial", "gcd", "reverse", "palindrome", "fibonacci",
        "multiplication-table", "sum-digits", "biggest-digit", "prime",
    ],
)
def test_algorithm_programs(capsys, source, expected):
    """Each program prints its expected result."""
    _, error = run_source(source)
    assert error is None
    assert output_lines(capsys) == expected
