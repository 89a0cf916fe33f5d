# prodrepeat

## overview

Lazy Cartesian power of a sequence with itself: every ordered tuple of a
fixed length drawn, with repetition, from a finite sequence. Tuples come out
in lexicographic order of positions, last position varying fastest, exactly
like `itertools.product(seq, repeat=k)`, but from an explicit iterator
object that can report how many tuples are left and that references the
source's own objects rather than copying them.

## requirements

* Python >= 3.12
* `setuptools`
* `pytest` to run the tests (`pip install .[test]`)

## installation

Install from source with `pip install .`.

## usage

```
>>> from prodrepeat import product_with_repeat, prodrepeat, fixed_repeat
>>> gen = product_with_repeat([0, 1, 2, 3], 3)
>>> next(gen), next(gen), gen.remaining
((0, 0, 0), (0, 0, 1), 62)
>>> prodrepeat("ab", 2)
(('a', 'a'), ('a', 'b'), ('b', 'a'), ('b', 'b'))
>>> pairs = fixed_repeat(2)
>>> len(tuple(pairs("xyz")))
9
```

`repeat == 0` yields one empty tuple; an empty source with `repeat > 0`
yields nothing. `MixedRadixCounter` and `iter_indices` expose the underlying
odometer, including per-position radices.

Generators are not thread-safe; give each thread its own.
