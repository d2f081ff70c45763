# setuputil

Small building blocks for decoding and displaying binary installer data.

## Modules

- `setuputil.mathutil` provides `ceildiv`, `is_power_of_2` and
  `mod_power_of_2`. It also has `safe_right_shift` and `safe_left_shift`,
  which take a bit width and return 0 once the shift reaches that width.
  `rotl_fixed` does a rotate left within a given bit width, and
  `is_aligned_on` checks alignment.
- `setuputil.endian` provides the `ByteOrder` enum (`LITTLE`, `BIG`,
  `ByteOrder.native()`) and the functions `byteswap`, `load`, `load_array`,
  `store` and `store_array`. These handle fixed-width integers, signed or
  unsigned. `store` truncates values to the given width. `load` and
  `load_array` raise `ValueError` when the buffer is too short.
- `setuputil.flags` provides `FlagSet`, an immutable set of members of a
  single enum, stored as a bit mask in definition order. It supports `&`,
  `|`, `^`, `~`, `has`, `has_all`, iteration, `FlagSet.all(enum_type)` and
  `FlagSet.from_bits(enum_type, bits)`. `format_enum` returns a member's
  name, or `(unknown:N)` when the position is out of range. `format_flags`
  joins the names of the set flags with commas and gives `(none)` for an
  empty set.
- `setuputil.ansi` provides `AnsiConsoleParser`, which splits a byte stream
  into plain text and CSI commands. A sequence may span several `write`
  calls. Override `handle_text` and `handle_command` to use the results; the
  default handlers record them in `text` and `commands`. `CommandType` names
  the known final characters. `read_codes` splits a sequence's
  `;`-separated codes: an empty code counts as 0 and a code that is not a
  number gives `None`.
- `setuputil.output` provides the formatting helpers `quoted`,
  `if_not_empty`, `if_not_equal`, `if_not_zero`, `print_hex`,
  `print_hex_bytes` and `print_bytes`. `print_bytes` uses binary units from
  `BYTE_SIZE_UNITS`.

## Example

```python
from setuputil.endian import ByteOrder, load, store
from setuputil.output import print_bytes

data = store(0x12345678, 4, ByteOrder.LITTLE)
assert load(data, 4, ByteOrder.LITTLE) == 0x12345678
print(print_bytes(1536))   # 1.5 KiB
```

## What it does not do

This package is a set of helpers only. It does not open or extract installer
files. It has no command-line tool and no reader for enums or packed flag
fields stored in a stream. Build those on top of `endian` and `flags`.

## Tests

```
pip install -e .[test]
pytest
```