# algokit

A collection of classic algorithms as small Python functions with no
dependencies. It covers dynamic programming, string processing, graphs,
binary trees and recursion. Every function takes ordinary Python values
(lists, strings, ints) and returns a result. Where an input cannot be
handled, such as a negative count, an empty list that needs values, or
inputs of mismatched length, a `ValueError` is raised.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.stocks` | `max_profit_unlimited`, `max_profit_two_transactions`, `max_profit_k_transactions`, `max_profit_with_cooldown`, `max_profit_with_fee` |
| `algokit.games` | `predict_the_winner`, `stone_game_ii`, `stone_game_iii`, `get_money_amount` |
| `algokit.alignment` | `longest_common_subsequence`, `num_distinct`, `is_interleave`, `minimum_delete_sum`, `min_insertions` |
| `algokit.matching` | `regex_match` (`.` and `*`), `wildcard_match` (`?` and `*`), `word_break`, `word_break_all` |
| `algokit.subsequences` | `length_of_lis`, `increasing_subsequences`, `minimum_mountain_removals`, `max_envelopes`, `max_height`, `len_longest_fib_subseq` |
| `algokit.arrays` | `make_array_increasing`, `min_swap`, `rob`, `max_satisfaction` |
| `algokit.palindromes` | `longest_palindrome` |
| `algokit.knapsack` | `coin_change`, `find_max_form`, `can_partition`, `find_target_sum_ways`, `num_squares` |
| `algokit.counting` | `num_rolls_to_target`, `count_ways`, `mincost_tickets` |
| `algokit.intervals` | `max_coins`, `mct_from_leaf_values` |
| `algokit.strings` | `custom_sort_string`, `num_decodings`, `decode_message`, `find_and_replace_pattern`, `garbage_collection`, `count_substrings`, `remove_duplicates`, `remove_k_duplicates`, `remove_occurrences`, `reverse_words`, `beauty_sum`, `valid_palindrome` |
| `algokit.justify` | `full_justify` |
| `algokit.graph` | `Graph` with `add_edge`, `neighbours`, `format_adjacency`, `bfs`, `dfs`, `has_cycle_bfs`, `has_cycle_dfs`, `topological_sort` |
| `algokit.trees` | `Node`, `bst_insert`, `build_bst`, `build_tree`, `preorder`, `inorder`, `postorder`, `generate_trees`, `serialize_preorder` |
| `algokit.recursion` | `factorial`, `fib`, `get_sum`, `pow2`, `search`, `last_occurrence`, `is_palindrome`, `subsequences`, `subarrays` |
| `algokit.numtext` | `add_strings`, `number_to_words`, `remove_all` |

`increasing_subsequences`, `subsequences` and `subarrays` are generators.
Results that cannot be reached, such as an amount no coins make up, come
back as `-1` from `coin_change` and `make_array_increasing`.

## Examples

```python
from algokit.stocks import max_profit_unlimited, max_profit_k_transactions
from algokit.matching import word_break_all
from algokit.numtext import number_to_words
from algokit.justify import full_justify

max_profit_unlimited([1, 2, 3, 4, 5])            # 4
max_profit_k_transactions(2, [3, 2, 6, 5, 0, 3])  # 7

word_break_all("catsanddog", ["cat", "cats", "and", "sand", "dog"])
# ['cat sand dog', 'cats and dog']

number_to_words(1234567)
# 'One Million Two Hundred Thirty Four Thousand Five Hundred Sixty Seven'

full_justify(["This", "is", "an", "example"], 8)
# ['This  is', 'an      ', 'example ']
```

Graphs are built edge by edge over integer nodes. `add_edge(u, v, directed=False, weight=None)`
adds the edge both ways unless `directed` is true:

```python
from algokit.graph import Graph

g = Graph()
for u, v in [(0, 1), (1, 2), (1, 4), (2, 3), (3, 4)]:
    g.add_edge(u, v)

g.has_cycle_bfs(4)        # True
g.has_cycle_dfs(4)        # True
g.bfs(0)                  # [0, 1, 2, 4, 3]
print(g.format_adjacency(4))
# 0 : {1,}
# 1 : {0,2,4,}
# ...
```

Trees come from value lists:

```python
from algokit.trees import build_bst, build_tree, inorder, generate_trees

root = build_bst([5, 3, 8, 1, 4])
inorder(root)              # [1, 3, 4, 5, 8]
len(generate_trees(3))     # 5

tree = build_tree([1, 2, -1, -1, 3, -1, -1])   # preorder, -1 marks a missing child
inorder(tree)              # [2, 1, 3]
```

## What this package does not do

It is a library only. It installs no command-line programs, and its
functions read no input and print nothing; callers supply the values and
decide what to do with the results. `Graph.format_adjacency` returns its
listing as a string rather than writing it out.