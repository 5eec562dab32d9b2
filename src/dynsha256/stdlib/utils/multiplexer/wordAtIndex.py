from dynsha256.types import Array, field # zk_ignore
from typing import Any #zk_ignore
from dynsha256.stdlib.EMBED import sum


# Read `sequence[index]` for an index only known at proving time.
# Every position is weighted by an equality indicator, so the work done
# does not depend on `index`. Exactly one indicator must be set: this
# rejects indices outside of [0, len(sequence)).
def word_at_index(sequence: Array[field, Any], index: field) -> field:
    is_index: Array[field, Any] = [field(int(index == field(i))) for i in range(len(sequence))]

    total_index: field = sum(is_index)
    total_value: field = sum([is_index[i] * sequence[i] for i in range(len(sequence))])

    assert total_index == field(1), "Invalid index: expected exactly one match"
    return total_value


# Read the N words starting at `index`, one oblivious selection per word
def words_at_index(sequence: Array[field, Any], index: field, N: int) -> Array[field, Any]:
    return [word_at_index(sequence, index + field(k)) for k in range(N)]
