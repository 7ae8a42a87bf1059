# objdemos

A collection of small, self-contained object-oriented demonstrations. Each
one is both a runnable command and an importable module:

| Command             | Module                   | What it shows                                        |
|---------------------|--------------------------|------------------------------------------------------|
| `objdemos-bridge`   | `objdemos.bridge`        | The bridge pattern: computers × operating systems    |
| `objdemos-cube`     | `objdemos.cube`          | Surface area, volume and equality of cuboids         |
| `objdemos-throwing` | `objdemos.throwing`      | Exceptions travelling through three call levels      |
| `objdemos-geometry` | `objdemos.geometry`      | Whether a point lies inside, on or outside a circle  |
| `objdemos-printer`  | `objdemos.printer`       | A shared printer that counts its jobs                |
| `objdemos-owning`   | `objdemos.owning`        | An owning pointer that releases its target           |
| `objdemos-person`   | `objdemos.person_demo`   | Strong reference counting with `StrongPointer`       |
| `objdemos-snake`    | `objdemos.snake.game`    | A terminal snake game                                |

The package has no dependencies outside the standard library. Install with:

```
pip install .
```

## Running the demos

```
objdemos-bridge
objdemos-cube
objdemos-geometry
objdemos-printer
objdemos-owning
objdemos-person
```

`objdemos-throwing` takes one integer (decimal, `0x` hexadecimal or
`0`-prefixed octal) choosing what the innermost level, `level_c`, raises:

```
objdemos-throwing 4
```

- `0` raises nothing;
- `1` raises an int value, caught and reported by `level_a`;
- `4` and `5` raise `MyError` and `MySubError`, caught by `level_a`, which
  prints the error's `what()`;
- `2` (a double) is not caught and `3` (a float) is outside the declared
  throw list; both end with `my_terminate_func` and exit status 134.

Without exactly one argument it prints a usage line and exits with an error
status.

## Snake

```
objdemos-snake
```

Steer with `w` (up), `s` (down), `a` (left) and `d` (right). The game starts
on the first direction key other than left, and keeps moving in the last
direction until another key is pressed; a key that would reverse the snake
is ignored. Eating `#` grows the snake; running into the wall `*` or into the
body `=` prints `GAME OVER!!!` and ends the game. The game also ends when
standard input is closed. It reads keys through `termios` and `select`, so
it needs a POSIX terminal.

The game is built from `objdemos.snake.wall.Wall`, `objdemos.snake.food.Food`
and `objdemos.snake.body.Snake`, which can be driven directly, e.g.
`Snake.move("d")` returns `False` when the snake hits something.
`objdemos.snake.game.resolve_key` holds the key rules described above.

## Library pieces

Besides the demos, the package offers a few small building blocks:

- `objdemos.typehelpers`: `strictly_order_type`, `compare_type`,
  `KeyValuePair` (ordered by key) and the 32-bit hash functions
  `hash_int32`, `hash_int64`, `hash_float` and `hash_double`.
- `objdemos.lightref`: `LightRefBase` and `StrongPointer` for explicit strong
  reference counting; `on_destroy` runs when the last strong reference is
  dropped.
- `objdemos.bitops`: a fixed-size `Bitmask` with `first_zero`, `weight`,
  `set`, `clear` and `test`, plus `popcount`, `popcountl` and `popcountll`.
- `objdemos.linkedlist`: an intrusive circular doubly linked `ListNode`
  whose head node is the list itself.
- `objdemos.atomic`: `AtomicInt32`, a lock-guarded 32-bit integer that wraps
  around like two's-complement arithmetic; its read-modify-write operations
  return the previous value.
- `objdemos.aref`: `ARef`, a reference count starting at one that calls a
  release function when it drops to zero.
- `objdemos.sockets`: `get_control_socket`, which reads a socket descriptor
  from an `ANDROID_SOCKET_<name>` environment variable, raising `KeyError`
  when it is not set, and `SocketNamespace`.

```python
from objdemos.bitops import Bitmask

mask = Bitmask(40)
mask.set(0)
mask.set(1)
assert mask.first_zero() == 2
assert mask.weight() == 2
```

## What it does not do

`objdemos.lightref` offers strong references only: there is no weak
pointer and no promotion from weak to strong. `objdemos.sockets` only looks
up descriptors in the environment; it does not create, bind or connect
sockets.

## Tests

```
pip install .[test]
pytest
```