import pytest

from labkit.euler import euler_function

SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]
PRIMES_1 = SMALL_PRIMES[1:] + [37]
PRIMES_2 = SMALL_PRIMES[1:] + [2]
PRIMES_3 = SMALL_PRIMES[2:] + [2, 3]


@pytest.mark.parametrize("value", [-1, 0])
def test_not_positive_raises(value):
    with pytest.raises(ValueError, match="value <= 0"):
        euler_function(value)


def test_float_rejected():
    with pytest.raises(TypeError):
        euler_function(2.5)


def test_one():
    assert euler_function(1) == 1


@pytest.mark.parametrize(
    "prime",
    [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 53, 83, 89, 113, 131, 173, 179, 191, 233, 239,
     1801, 1951, 2269, 2437, 2791, 3169, 3571, 4219, 4447, 5167, 5419, 6211,
     37633, 43201, 47629, 60493, 63949, 65713, 69313, 73009, 76801, 84673, 106033],
)
def test_primes(prime):
    assert euler_function(prime) == prime - 1


@pytest.mark.parametrize("p", SMALL_PRIMES)
def test_prime_squares(p):
    assert euler_function(p ** 2) == p ** 2 - p


@pytest.mark.parametrize("p", SMALL_PRIMES)
def test_prime_cubes(p):
    assert euler_function(p ** 3) == p ** 3 - p ** 2


@pytest.mark.parametrize("p, q", zip(SMALL_PRIMES, PRIMES_1))
def test_product_of_two_primes(p, q):
    assert euler_function(p * q) == (p - 1) * (q - 1)


@pytest.mark.parametrize("p, q", zip(SMALL_PRIMES, PRIMES_2))
def test_prime_times_square(p, q):
    assert euler_function(p * q ** 2) == (p - 1) * (q ** 2 - q)


@pytest.mark.parametrize("p, q", zip(SMALL_PRIMES, PRIMES_2))
def test_cube_times_square(p, q):
    assert euler_function(p ** 3 * q ** 2) == (p ** 3 - p ** 2) * (q ** 2 - q)


@pytest.mark.parametrize("p, q, r", zip(SMALL_PRIMES, PRIMES_2, PRIMES_3))
def test_product_of_three_primes(p, q, r):
    assert euler_function(p * q * r) == (p - 1) * (q - 1) * (r - 1)


@pytest.mark.parametrize(
    "value, expected",
    [
        (210474803646, 69754744080),
        (137438953472, 68719476736),
        (12367723468232, 5583927744000),
        (4645583927744000, 1858216258560000),
        (95783244687012, 31927748229000),
        (60058265, 47974320),
        (13272154, 5391360),
        (80307499, 80307498),
        (56567985, 29948288),
        (45401631, 27516120),
    ],
)
def test_known_values(value, expected):
    assert euler_function(value) == expected