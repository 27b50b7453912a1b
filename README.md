# mcukit

Small, dependency-free Python helpers for microcontroller-style data:
waveform generation, float bit patterns, running statistics, compact data
structures, byte sinks, a streaming XML writer, and drivers for a number of
I2C peripherals that talk to a bus object you supply.

## Modules

### Signals and math

- `mcukit.functiongenerator`: `FunctionGenerator(period, amplitude, phase, y_shift)`
  with `configure`, `sawtooth`, `triangle`, `square`, `sinus` and
  `stair(t, steps=8)`. The free functions `fgsaw`, `fgtri`, `fgsqr`, `fgsin`
  and `fgstr` take the same parameters per call, and `fgtri` and `fgsqr` also
  take a `duty_cycle`. A zero period, or fewer than 2 stair steps, raises
  `ValueError`.
- `mcukit.ieee754`: bit-level access to single precision values. It has
  `sign`, `exponent`, `mantissa`, `dump_float`, `is_nan`, `is_inf`,
  `is_pos_inf`, `is_neg_inf`, `pow2`, `pow2_fast` and `flip`. It also has
  `float_to_double_packed` and `double_packed_to_float`, which convert to and
  from the 8 bytes of a 64-bit double in either `ByteOrder`.
- `mcukit.mathhelpers`: `sci(number, digits)` formats a number as
  `d.dddE+xx`. `seconds_to_clock` and `millis_to_clock` give `HH:MM[:SS]` and
  `HH:MM:SS.mmm`, and both drop whole days. `weeks`, `days`, `hours` and
  `minutes` convert a number of seconds.
- `mcukit.multimap`: `multi_map(value, inputs, outputs)` does piecewise linear
  interpolation. Values outside the table are clamped. When every argument is
  an integer, it uses integer division that truncates toward zero.
- `mcukit.temperature`: `fahrenheit`, `kelvin`, `dew_point`, `dew_point_fast`,
  `humidex`, `heat_index`, `heat_index_fast` and `heat_index_fast_int`.

### Data structures

- `mcukit.nibblearray.NibbleArray(size)`: a fixed-length array of 4-bit
  values that supports indexing and `len()`.
- `mcukit.running_average.RunningAverage(size)`: the last `size` values, with
  the following methods:
  - `add_value` and `fill_value`;
  - `average` and `fast_average`;
  - `standard_deviation` and `standard_error`;
  - `minimum` and `maximum`, the extremes since the last `clear`;
  - `min_in_buffer` and `max_in_buffer`;
  - `element`, `is_full`, `size` and `count`.

  Empty statistics return NaN.
- `mcukit.running_median.RunningMedian(size)`: a buffer of 1 to 19 values,
  with the following methods:
  - `median`;
  - `average(n_medians=None)`;
  - `highest` and `lowest`;
  - `element` and `sorted_element`;
  - `predict`, `size` and `count`.
- `mcukit.byteset.ByteSet`: a set of the integers 0..255.
  - It supports `add`, `discard`, `toggle`, `invert`, `clear` and `copy`.
  - The operators are `|`, `-` and `&` and their in-place forms, plus `==`,
    and `<=` for the subset test.
  - It has a cursor walk with `first`, `next`, `prev` and `last`, which return
    -1 when there is no element.
- `mcukit.troolean.Troolean`: Kleene three-valued logic. The value can be
  `None` for unknown, a bool, or an int where 0 is false, -1 is unknown and
  anything else is true. It supports `~`, `&`, `|`, `==`, `is_true`,
  `is_false` and `is_unknown`. Only true counts as true in `bool()`.
- `mcukit.stopwatch.StopWatch(resolution=Resolution.MILLIS, clock=time.monotonic_ns)`:
  `start`, `stop`, `reset`, `value`/`elapsed`, `is_running`, `state`
  (a `State`) and `resolution`.

### Output

- `mcukit.printing`: byte sinks that accept `str`, bytes or a single byte
  value.
  - `PrintCharArray` keeps up to 255 bytes. It has `buffer()`, `free()`,
    `clear()` and `len()`.
  - `PrintSize` only counts bytes, through `total()`.
  - `PrintString` collects everything, and `text()` returns it.
- `mcukit.xmlwriter.XMLWriter(stream)`: writes indented XML to any object
  with a `write(str)` method. It has the following methods:
  - `header` and `comment`;
  - `tag_open` and `tag_close`, which uses a stack of open tags;
  - `tag_start`, `tag_field` and `tag_end`;
  - `write_node`;
  - `set_indent_size`, `incr_indent`, `decr_indent` and `indent`;
  - `raw` and `escape`.

  Integers are written in a chosen `base` (`DEC`, `HEX`, `OCT`, `BIN`) and
  floats with a chosen number of `decimals`. Strings are XML-escaped.

### I2C device drivers

Each driver takes a bus object as its first argument. The bus object must
provide:

- `write(address, data: bytes)`, which sends bytes to a device;
- `read(address, length) -> bytes`, which receives bytes from a device.

Out-of-range pins, channels and values raise `ValueError`. A short read
raises `OSError`.

| Module | Class | Device |
| --- | --- | --- |
| `mcukit.mcp23017` | `MCP23017`, `PinMode` | 16-bit I/O expander |
| `mcukit.mcp4725` | `MCP4725`, `PowerDownMode` | 12-bit DAC |
| `mcukit.ms5611` | `MS5611` | barometric pressure and temperature sensor |
| `mcukit.max44009` | `Max44009` | ambient light (lux) sensor |
| `mcukit.pca9635` | `PCA9635`, `LedMode` | 16-channel LED driver |
| `mcukit.pca9685` | `PCA9685` | 16-channel 12-bit PWM controller |
| `mcukit.pcf8574` | `PCF8574` | 8-bit I/O expander |
| `mcukit.sht31` | `SHT31` | temperature and humidity sensor |
| `mcukit.hmc6352` | `HMC6352`, `HmcMode` | digital compass |

The drivers that wait for conversions (`MS5611`, `SHT31`, `HMC6352`) accept a
`sleep` callable. `SHT31` also accepts a millisecond `clock`. Both can be
replaced in tests.

## What this package does not do

mcukit contains no bus implementation of its own. It does not open I2C
devices, talk to an operating system driver or drive GPIO pins itself. You
must pass each driver an object with the `write`/`read` interface above. This
can be a wrapper around whatever I2C access your system has, or a simulated
bus. The package has no command-line tool.

## Installation

```
pip install mcukit
```

## Examples

```python
from mcukit.running_average import RunningAverage

ra = RunningAverage(4)
for v in (1.0, 2.0, 3.0, 4.0, 5.0):
    ra.add_value(v)
print(ra.average())   # 3.5, taken over the last four values
```

```python
from mcukit.multimap import multi_map

print(multi_map(12, [11, 22, 33], [111, 222, 555]))    # 121
print(multi_map(12.0, [11, 22, 33], [111, 222, 555]))  # 121.0909...
```

```python
from mcukit.byteset import ByteSet
from mcukit.troolean import Troolean

s = ByteSet([3, 7, 200])
print(list(s), s.first(), s.next(), s.last())  # [3, 7, 200] 3 7 200

print(Troolean(None) & False)   # false
print(Troolean(True) | None)    # true
```

```python
import io
from mcukit.xmlwriter import XMLWriter

out = io.StringIO()
xml = XMLWriter(out)
xml.header()
xml.tag_open("root")
xml.write_node("value", 42)
xml.tag_close()
print(out.getvalue())
# <?xml version="1.0" encoding="UTF-8"?>
# <root>
#   <value>42</value>
# </root>
```

A driver with a simple loop-back bus:

```python
from mcukit.pcf8574 import PCF8574

class LoopBus:
    def __init__(self):
        self.last = b"\xff"

    def write(self, address, data):
        self.last = bytes(data)

    def read(self, address, length):
        return self.last[:length]

port = PCF8574(LoopBus(), 0x20)
port.begin(0x0F)
print(hex(port.read8()))   # 0xf
```

## Running the tests

```
pip install -e ".[test]"
pytest
```