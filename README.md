# labkit

A collection of small, self-contained algorithms and four command-line
tools, using nothing beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module                    | What it gives you |
|---------------------------|-------------------|
| `labkit.complex_number`   | `ComplexNumber(re, im)` with `+ - * /`, `==` that tolerates differences below machine epsilon, `magnitude()` and `argument()` |
| `labkit.euler`            | `euler_function(value)`: Euler's totient of a positive integer |
| `labkit.segments`         | `Point`, `Segment` and `segments_intersect(s1, s2)` |
| `labkit.areas`            | `Parallelepiped`, `Cylinder`, `Sphere`, each with `area()` (π is taken as 3.14; a non-positive dimension gives 0) |
| `labkit.caesar_cipher`    | `Kernel(shift, alphabet, foreign_chars)` settings and `CaesarCipher` with `encode` / `decode` |
| `labkit.binary_search`    | `find(numbers, target)` over a sorted sequence |
| `labkit.avl_tree`         | `AVLTree`: self-balancing search tree with `insert`, `remove`, `contains`, `find_min`, `find_max`, `format_tree`, `is_empty`, `clear`, `copy` |
| `labkit.binary_tree`      | `Node` and `BinaryTree` with `find`, `insert`, `delete` and an in-order cursor (`reset`, `set_next`, `value`, `is_end`) |
| `labkit.dijkstra`         | `Dijkstra`: single-source shortest paths on a weight matrix |
| `labkit.base_calculator`  | `add`, `subtract`, `multiply`, `divide`, `convert` for numbers written in bases up to 16 |

## Library examples

```python
from labkit.complex_number import ComplexNumber
from labkit.euler import euler_function
from labkit.binary_search import find
from labkit.caesar_cipher import CaesarCipher
from labkit.base_calculator import add, convert

ComplexNumber(5.0, 5.0) * ComplexNumber(3.0, 3.0) == ComplexNumber(0, 30)  # True
ComplexNumber(1, 1) / ComplexNumber(0, 0)   # raises ZeroDivisionError

euler_function(137438953472)   # 68719476736
euler_function(0)              # raises ValueError

find([1, 2, 3, 4, 5, 6], 4)    # 3
find([1, 2, 3, 4, 5, 6], 7)    # -1

CaesarCipher().encode("this is a test")   # "ymnx nx f yjxy"
CaesarCipher().decode("yjxy")             # "test"

add("1010", 2, "FF", 16)       # "109"  (result in the larger of the two bases)
convert("123456789", 10, 16)   # "75BCD15"
```

Shortest paths with `Dijkstra`: give `set_task` a square matrix of edge
weights, where a negative weight means "no edge", and a start vertex (an
invalid matrix or start raises `ValueError`). Then call `solve()` and read
distances with `distance(finish)` or the whole `answer` list. Vertices that
cannot be reached get `-1`. `distance` raises `RuntimeError` before solving
and `IndexError` for an unknown vertex.

```python
from labkit.dijkstra import Dijkstra

graph = [
    [0, 7, 9, -1, -1, 14],
    [7, 0, 10, 15, -1, -1],
    [9, 10, 0, 11, -1, 2],
    [-1, 15, 11, 0, 6, -1],
    [-1, -1, -1, 6, 0, 9],
    [14, -1, 2, -1, 9, 0],
]
solver = Dijkstra()
solver.set_task(graph, 0)
solver.solve()
solver.distance(5)   # 11
solver.answer        # [0.0, 7.0, 9.0, 20.0, 20.0, 11.0]
```

## Command-line tools

Each tool prints a help text when run without arguments, and prints an error
message (rather than failing) when the arguments are wrong.

Surface area of a sphere (one value), cylinder (radius and height) or
parallelepiped (width, height and length):

```
labkit-areas 5
Sphere area is 314.000000
```

Complex arithmetic on two numbers given as real and imaginary parts, with the
operation one of `+`, `-`, `*`, `/`:

```
labkit-complex 1 2 3 4 +
Real = 4 Imaginary = 6
```

Caesar cipher with a shift of 5 over the lower-case Latin alphabet: `e` to
encode or `d` to decode, then the number of words, then the words:

```
labkit-caesar e 2 hello world
mjqqt btwqi
```

Binary search: the element to find, the array size, then the array, which
must be sorted:

```
labkit-search 3 4 1 2 3 4
Find element at 2
```

## What it does not do

Only the areas, complex-number, Caesar-cipher and binary-search tools have
commands. The trees, `Dijkstra`, Euler's totient, segment intersection and
the base calculator are library functions only. Nothing is stored between
runs.