# drills

A collection of small, self-contained exercises, one module each in the
`drills` package. They cover linked structures, number theory, text ciphers,
number spelling and simple matrix work. There are no dependencies outside the
standard library.

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

| Module | What it provides |
| --- | --- |
| `drills.generics_list` | `List` and `Node`: a singly linked stack with `push`, `pop` (raises `IndexError` when empty), `len()` and iteration from the head |
| `drills.get_document_id` | `OfficeOne` … `OfficeFour`; `OfficeOne.get_document_id()` returns the id or raises the first `OfficeClosed`, `OfficeNotFound` or `OfficeFull` (all `OfficeError`) met along the chain |
| `drills.insertion_sort` | `insertion_sort(values, steps)` sorts the first `steps + 1` items in place |
| `drills.inv_pyramid` | `inv_pyramid(v, i)` returns `2*i - 1` lines growing to `i` copies of `v` and back |
| `drills.lucas_number` | `lucas_number(position)`: 2, 1, 3, 4, 7, 11, … |
| `drills.lunch_queue` | `Queue` of `Person` with `add`, `rm` (removes the person added first), `search` and `invert_queue` |
| `drills.matrix_determinant` | `matrix_determinant(matrix)` for 3×3 matrices; `ValueError` for other shapes |
| `drills.matrix_display` | `Matrix` whose `str()` is one `(1 2 3)` row per line |
| `drills.matrix_multiplication` | 2×2 `Matrix` and `multiply(m, multiplier)` |
| `drills.matrix_transposition` | 2×2 `Matrix` and `transpose(m)` |
| `drills.min_and_max` | `min_and_max(nb_1, nb_2, nb_3)` returns `(minimum, maximum)` |
| `drills.modify_letter` | `remove_letter_sensitive`, `remove_letter_insensitive`, `swap_letter_case` |
| `drills.moving_targets` | `Field` stack of `Target` with `push`, `pop`, `peek` and `replace_top` |
| `drills.negative_spelling` | `negative_spell(n)` spells zero and negative numbers; `ValueError` for positive ones |
| `drills.nextprime` | `next_prime(nbr)`: the smallest prime at least `nbr` |
| `drills.office_worker` | `OfficeWorker.parse("Name,age,role")` and `WorkerRole.parse`; `ValueError` on bad input |
| `drills.order_books` | `Writer`, `Book` and `order_books(writer)` sorting books by title |
| `drills.organize_garage` | `Garage` with `move_to_right` / `move_to_left` merging both bays |
| `drills.own_and_return` | `Film`, `read_film_name`, `take_film_name` |
| `drills.partial_sums` | `parts_sums(arr)`: prefix sums, longest first, ending with 0 |
| `drills.previousprime` | `is_prime(n)` and `prev_prime(nbr)` (0 when there is no smaller prime) |
| `drills.prime_checker` | `prime_checker(nb)` returns `nb` if prime, `None` below 2, else raises `EvenError` or `DividerError` (both `PrimeError`) |
| `drills.profanity_filter` | `Message.send_ms()` and `check_ms(ms)` rejecting empty messages or ones containing a banned word |
| `drills.queens` | `ChessPosition.create(rank, file)` (`None` off the board) and `Queen.can_attack` |
| `drills.question_mark` | nested `One` … `Four` with `One.get_fourth_layer()` |
| `drills.reverse_it` | `reverse_it(v)`: sign, reversed digits, then the digits |
| `drills.roman_numbers` | `RomanNumber.from_int(value)` using `RomanDigit`; 0 becomes `NULLA` |
| `drills.rot21` | `rot21(text)` shifts ASCII letters 21 places, keeping case |
| `drills.rpn` | `rpn(expression)` evaluates integer reverse Polish notation with `+ - * / %`; `ValueError` if malformed |
| `drills.scytale_cipher` | `scytale_cipher(message, wraps)` |
| `drills.scytale_decoder` | `scytale_decoder(s, letters_per_turn)`; `None` for empty input or zero turns |
| `drills.smallest` | `smallest(mapping)`: the smallest value, or `2**31 - 1` when empty |
| `drills.spelling` | `spell(n)` for 0 to one million; `ValueError` outside that range |
| `drills.talking` | `talking(text)` answers a message by whether it is empty, yelled or a question |

## Example

```python
from drills.rot21 import rot21
from drills.spelling import spell
from drills.roman_numbers import RomanNumber

rot21("MISS")                  # "HDNN"
spell(1234)                    # "one thousand two hundred thirty-four"
str(RomanNumber.from_int(44))  # "XLIV"
```

## Command line

The reverse Polish notation calculator is installed as a command. It joins its
arguments into one expression and prints the result, or `Error` if the
expression is malformed:

```
drills-rpn "1 2 * 3 * 4 +"
```

The same is available as `python -m drills.rpn "1 2 * 3 * 4 +"`.

Integer division and remainder truncate toward zero, and results outside the
signed 64-bit range are reported as `Error`. No other module has a command;
they are meant to be imported.