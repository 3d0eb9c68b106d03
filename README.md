# algokata

A library of classic algorithm exercises written as plain, importable
functions: dynamic programming, backtracking, array and string puzzles,
linked lists, binary trees, and two small command-line tools.

Everything is pure Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokata.trees` | `TreeNode`, `inorder_traversal`, `preorder_traversal`, `postorder_traversal`, `right_side_view` |
| `algokata.linked_lists` | `ListNode`, `MultilevelNode`, `delete_node`, `middle_node`, `is_palindrome_list`, `rotate_right`, `flatten` |
| `algokata.stocks` | `max_profit_single`, `max_profit_unlimited`, `max_profit_two`, `max_profit_k`, `max_profit_cooldown` |
| `algokata.min_stack` | `MinStack` with `push`, `pop`, `top`, `get_min` |
| `algokata.codechef` | `reverse_digits`, `count_fours`, and the command entry points `reverse_main`, `lucky_four_main` |
| `algokata.arrays` | `four_sum`, `arrange_coins`, `can_place_flowers`, `candy`, `can_jump`, `majority_element`, `majority_elements`, `find_max_consecutive_ones`, `next_permutation`, `remove_duplicates`, `rotate_image`, `search_matrix`, `set_zeroes`, `sort_colors`, `kth_factor`, `get_permutation`, `pascal_triangle` |
| `algokata.strings` | `can_construct_palindromes`, `reorganize_string`, `find_longest_word`, `length_of_longest_substring` |
| `algokata.dp_sequences` | `rob`, `max_sum_div_three`, `length_of_lis`, `count_lis`, `longest_arith_seq_length`, `largest_divisible_subset`, `find_longest_chain`, `max_envelopes` |
| `algokata.dp_knapsack` | `coin_change`, `coin_change_ways`, `combination_sum4`, `last_stone_weight_ii`, `can_partition`, `find_target_sum_ways`, `find_max_form`, `num_squares` |
| `algokata.dp_strings` | `num_decodings`, `num_distinct`, `longest_palindrome_subseq`, `min_cut`, `word_break` |
| `algokata.optimization` | `predict_the_winner`, `stone_game`, `min_difficulty`, `find_cheapest_price`, `mincost_tickets` |
| `algokata.backtracking` | `solve_n_queens`, `partition_palindromes`, `subsets_with_dup`, `can_partition_k_subsets` |
| `algokata.dp_grids` | `NumMatrix` with `sum_region`, `calculate_minimum_hp`, `matrix_block_sum`, `maximal_square`, `min_path_sum`, `minimum_total`, `find_paths` |

## Examples

```python
from algokata.stocks import max_profit_single, max_profit_unlimited
from algokata.arrays import four_sum
from algokata.min_stack import MinStack
from algokata.backtracking import solve_n_queens

max_profit_single([7, 1, 5, 3, 6, 4])     # 5
max_profit_unlimited([7, 1, 5, 3, 6, 4])  # 7

four_sum([1, 0, -1, 0, -2, 2], 0)
# [[-2, -1, 1, 2], [-2, 0, 0, 2], [-1, 0, 0, 1]]

stack = MinStack()
stack.push(-2)
stack.push(0)
stack.push(-3)
stack.get_min()  # -3
stack.pop()
stack.top()      # 0
stack.get_min()  # -2

len(solve_n_queens(4))  # 2
```

## Conventions

- Where there is no answer, functions return `None` rather than a sentinel
  number: `coin_change`, `kth_factor`, `majority_element`, `min_difficulty`
  and `find_cheapest_price` all do this.
- Invalid input raises `ValueError` (for example a negative `k` in
  `max_profit_k`, non-positive coins in `coin_change`, or an empty grid in
  the `dp_grids` functions). `MinStack.pop`, `top` and `get_min` raise
  `IndexError` on an empty stack, and `NumMatrix.sum_region` raises
  `IndexError` for a region outside the matrix.
- `next_permutation`, `remove_duplicates`, `rotate_image`, `set_zeroes`,
  `sort_colors`, `delete_node`, `rotate_right` and `flatten` modify what
  they are given, just like `list.sort`.
- `find_paths` counts modulo 1,000,000,007.

## Command-line tools

Two small tools read a count of test cases from standard input followed by
one number per case, and print one answer per line.

Reverse the digits of each number:

```
printf '2\n12345\n120\n' | algokata-reverse
```

prints `54321` and `21`.

Count the digit 4 in each number:

```
printf '2\n447474\n123\n' | algokata-lucky-four
```

prints `4` and `0`.