from prodrepeat.prodrepeat import prodrepeat
from prodrepeat.prodrepeat_core import (
    fixed_repeat, PRGenerator, product_with_repeat
)
from prodrepeat.radix import iter_indices, MixedRadixCounter
