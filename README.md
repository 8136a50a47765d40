# drillbook

Worked solutions to classic algorithm drills. Each one is a plain Python
function or a small data structure. A `drillbook` command runs a selection
of them on an input file.

## Installing

    pip install .

To run the test suite as well:

    pip install ".[test]"
    pytest

## What is inside

- `drillbook.arrays`: `two_sum`, `three_sum`, `min_subarray_len`, `k_sum`,
  `move_zeroes`, `trap`, `subarray_sum`, `sorted_squares`, `top_k_frequent`
- `drillbook.strings`: `capitalize_title`, `find_anagrams`, `group_anagrams`,
  `letter_combinations`
- `drillbook.linkedlist`: `ListNode`, `LinkedList`, `format_list`,
  `remove_elements`
- `drillbook.bstree`: `TreeNode`, `Tree`, `build_balanced`, `inorder_values`
- `drillbook.cli`: `main`, the entry point of the `drillbook` command

Invalid input raises `ValueError` in these cases:

- `min_subarray_len` with a target that is not positive
- `k_sum` with an empty list, with `k < 1`, or with `k` larger than the number of subsequences
- `find_anagrams` with an empty pattern
- `letter_combinations` with a digit outside 2–9

## Using the library

```python
from drillbook.arrays import trap, sorted_squares, two_sum
from drillbook.strings import capitalize_title, letter_combinations

trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])        # 6
sorted_squares([-4, -1, 0, 3, 10])                # [0, 1, 9, 16, 100]
two_sum([2, 7, 11, 15], 9)                        # [0, 1]
capitalize_title("capiTalIze tHe titLe")          # "Capitalize The Title"
letter_combinations("23")                         # ["ad", "ae", "af", "bd", ..., "cf"]
```

Linked lists and trees:

```python
from drillbook.linkedlist import LinkedList, remove_elements, format_list
from drillbook.bstree import Tree

numbers = LinkedList([1, 2, 6, 3, 4, 5, 6])
head = remove_elements(numbers.head, 6)
print(format_list(head))                          # 1 2 3 4 5

tree = Tree([5, 3, 8, 1])   # built balanced from the sorted values
tree.insert(4)              # values already present are ignored
list(tree.inorder())                              # [1, 3, 4, 5, 8]
tree.format()                                     # "1 3 4 5 8"
```

## Command line

    drillbook <drill> [-i INPUT]

Each drill reads its input file (`input.txt` by default, or the file given
with `-i/--input`) and writes its answer to standard output. The drills are
listed below with the input each one expects:

| drill                 | line 1                           | line 2  |
|-----------------------|----------------------------------|---------|
| `two-sum`             | space-separated integers         | target  |
| `three-sum`           | comma-separated integers         |         |
| `remove-elements`     | space-separated integers         | value   |
| `min-subarray`        | target                           | space-separated integers |
| `trap`                | comma-separated heights          |         |
| `find-anagrams`       | text                             | pattern |
| `group-anagrams`      | space-separated words            |         |
| `subarray-sum`        | comma-separated integers         | k       |
| `sorted-squares`      | space-separated sorted integers  |         |
| `letter-combinations` | digits 2–9                       |         |

`letter-combinations` writes one word per line to `output.txt`. Use
`-o/--output` to write to a different file. It prints nothing.

If the input file cannot be read or its contents are invalid, the command
prints a message to standard error and exits with status 1.

    drillbook --help
    drillbook trap --input heights.txt

## What it does not do

The command line has no drills for `k_sum`, `move_zeroes`, `top_k_frequent`
or `capitalize_title`. These are available only from Python. Binary search
trees have no command either.